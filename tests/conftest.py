"""Shared fixtures."""

from __future__ import annotations

import typing as typ

import pytest

from github_events import fork_payload, push_payload, release_payload, star_payload


@pytest.fixture
def push() -> dict[str, typ.Any]:
    return push_payload()


@pytest.fixture
def star() -> dict[str, typ.Any]:
    return star_payload()


@pytest.fixture
def fork() -> dict[str, typ.Any]:
    return fork_payload()


@pytest.fixture
def release() -> dict[str, typ.Any]:
    return release_payload()
