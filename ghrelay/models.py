"""Normalized GitHub event records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CommitSummary:
    """
    One commit carried by a push.

    Fields
    ------
    id : str
        Full commit hash; only the first 7 characters are displayed.
    message : str
        Full commit message, possibly multi-line.
    url : str
        Link to the commit on GitHub.
    """

    id: str
    message: str
    url: str


@dataclass(frozen=True)
class PushEvent:
    """
    Commits pushed to a branch.

    Fields
    ------
    author : str
        ``pusher.name`` from the payload.
    commits : tuple[CommitSummary, ...]
        In payload order; empty for a push without commits.
    repo_name : str
        Repository in 'owner/repo' format.
    branch : str
        Ref with the ``refs/heads/`` prefix removed.
    compare_url : str
        GitHub compare view for the pushed range.
    """

    author: str
    commits: tuple[CommitSummary, ...]
    repo_name: str
    branch: str
    compare_url: str


@dataclass(frozen=True)
class StarEvent:
    user: str
    repo_name: str
    repo_url: str
    total_stars: int


@dataclass(frozen=True)
class ForkEvent:
    user: str
    original_repo: str
    fork_url: str
    fork_name: str
    total_forks: int


@dataclass(frozen=True)
class ReleaseEvent:
    """
    A published release.

    ``description`` is ``None`` when the release has no body.
    """

    repo_name: str
    tag_name: str
    author_name: str
    release_url: str
    description: str | None
    is_pre_release: bool


EventRecord = Union[PushEvent, StarEvent, ForkEvent, ReleaseEvent]
