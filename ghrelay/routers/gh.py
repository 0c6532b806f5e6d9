"""Ruter GH?"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Header, Request
from fastapi.responses import PlainTextResponse

from ghrelay.services.discord import DeliveryError, Sink
from ghrelay.services.github import MalformedPayload, classify
from ghrelay.services.render import render

router = APIRouter(tags=["github"])
logger = logging.getLogger(__name__)


async def relay_event(kind: str | None, body: bytes, sink: Sink, channel_id: str) -> str | None:
    """
    Classify, render and deliver one event.

    Returns the delivered title, or ``None`` when the event produces no message.
    Classification and delivery errors propagate to the caller.
    """
    record = classify(kind, body)
    if record is None:
        return None
    message = render(record)
    await sink.deliver(channel_id, message)
    return message.title


@router.post("/webhook", response_class=PlainTextResponse)
async def github_webhook(
    request: Request,
    x_github_event: str | None = Header(None),
):
    """
    GitHub webhook endpoint.

    The event kind comes from `X-GitHub-Event`; the body is the raw JSON
    payload. Supported events are forwarded to the configured channel.
    """
    body = await request.body()
    event = x_github_event or "unknown"
    state = request.app.state

    try:
        title = await relay_event(event, body, state.sink, state.channel_id)
    except MalformedPayload as exc:
        logger.warning("Dropping malformed %s event: %s", exc.kind, exc)
        return PlainTextResponse(f"malformed payload: {exc.path}", status_code=422)
    except (DeliveryError, httpx.HTTPError) as exc:
        logger.error("Delivery of %s event failed: %s", event, exc)
        return PlainTextResponse("delivery failed", status_code=502)

    if title is None:
        logger.info("Ignoring %s event", event)
        return "ignored"

    logger.info("Forwarded %s event: %s", event, title)
    return f"{event} event forwarded"
