"""Tests for the webhook HTTP surface."""

from __future__ import annotations

import json
import logging
import typing as typ

import pytest
from fastapi.testclient import TestClient

from ghrelay.app import create_app
from ghrelay.config import Settings
from ghrelay.schemas import DisplayMessage
from ghrelay.services.discord import DeliveryError
from github_events import push_payload, star_payload


class RecordingSink:
    def __init__(self, error: Exception | None = None) -> None:
        self.sent: list[tuple[str, DisplayMessage]] = []
        self.error = error

    async def deliver(self, channel_id: str, message: DisplayMessage) -> dict[str, typ.Any]:
        if self.error is not None:
            raise self.error
        self.sent.append((channel_id, message))
        return {}


def _settings() -> Settings:
    return Settings(discord_token="token", channel_id="chan-1", verify_channel=False)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def client(sink: RecordingSink) -> TestClient:
    return TestClient(create_app(_settings(), sink=sink))


def _post(client: TestClient, event: str | None, body: typ.Any):
    headers = {"Content-Type": "application/json"}
    if event is not None:
        headers["X-GitHub-Event"] = event
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return client.post("/webhook", content=content, headers=headers)


def test_health(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "ok"


def test_help_lists_events(client: TestClient) -> None:
    assert "push" in client.get("/help").text


def test_push_is_forwarded(client: TestClient, sink: RecordingSink) -> None:
    response = _post(client, "push", push_payload())
    assert response.status_code == 200
    assert response.text == "push event forwarded"
    assert len(sink.sent) == 1
    channel_id, message = sink.sent[0]
    assert channel_id == "chan-1"
    assert message.title == "Push to octo/reef"


def test_ignored_action(client: TestClient, sink: RecordingSink) -> None:
    response = _post(client, "star", star_payload("deleted"))
    assert response.status_code == 200
    assert response.text == "ignored"
    assert sink.sent == []


def test_unknown_kind(client: TestClient, sink: RecordingSink) -> None:
    response = _post(client, "issue_comment", {"action": "created"})
    assert response.text == "ignored"
    assert sink.sent == []


def test_missing_header_is_ignored(client: TestClient, sink: RecordingSink) -> None:
    assert _post(client, None, push_payload()).text == "ignored"
    assert sink.sent == []


def test_malformed_payload(
    client: TestClient, sink: RecordingSink, caplog: pytest.LogCaptureFixture
) -> None:
    payload = push_payload()
    payload["repository"] = {}
    with caplog.at_level(logging.WARNING, logger="ghrelay.routers.gh"):
        response = _post(client, "push", payload)
    assert response.status_code == 422
    assert response.text == "malformed payload: repository.full_name"
    assert sink.sent == []
    assert any("repository.full_name" in r.getMessage() for r in caplog.records)


def test_invalid_json(client: TestClient) -> None:
    response = _post(client, "push", b"{oops")
    assert response.status_code == 422


def test_delivery_failure_is_not_retried() -> None:
    failing = RecordingSink(error=DeliveryError(500, "boom"))
    client = TestClient(create_app(_settings(), sink=failing))
    response = _post(client, "push", push_payload())
    assert response.status_code == 502
    assert failing.sent == []


def test_deeply_nested_body_is_malformed(client: TestClient, sink: RecordingSink) -> None:
    response = _post(client, "push", b"[" * 100000 + b"]" * 100000)
    assert response.status_code == 422
    assert response.text == "malformed payload: $"
    assert sink.sent == []


def test_uppercase_kind_is_ignored(client: TestClient, sink: RecordingSink) -> None:
    assert _post(client, "PUSH", push_payload()).text == "ignored"
    assert sink.sent == []
