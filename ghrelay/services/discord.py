"""Yet another discord services"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import httpx

from ghrelay.schemas import DisplayMessage
from ghrelay.utils import clip

logger = logging.getLogger(__name__)

DISCORD_API_BASE = "https://discord.com/api/v10"
HTTP_TIMEOUT_SECONDS = 15
HTTP_TIMEOUT_SHORT_SECONDS = 10

# Embed limits enforced by the Discord API.
TITLE_LIMIT = 256
FIELD_NAME_LIMIT = 256
FIELD_VALUE_LIMIT = 1024
FOOTER_LIMIT = 2048
MAX_FIELDS = 25
EMPTY_VALUE = "\u200b"

JSONDict = dict[str, Any]


class DeliveryError(RuntimeError):
    """The Discord API rejected a request."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Discord error: {status_code} {body}")


class Sink(Protocol):
    async def deliver(self, channel_id: str, message: DisplayMessage) -> JSONDict: ...


def embed_payload(message: DisplayMessage) -> JSONDict:
    """Convert a display message into a Discord embed, applying transport limits."""
    fields = [
        {
            "name": clip(field.name, FIELD_NAME_LIMIT),
            "value": clip(field.value, FIELD_VALUE_LIMIT) or EMPTY_VALUE,
            "inline": field.inline,
        }
        for field in message.fields[:MAX_FIELDS]
    ]
    return {
        "title": clip(message.title, TITLE_LIMIT),
        "url": message.link_target,
        "color": message.color_value,
        "fields": fields,
        "footer": {"text": clip(message.footer, FOOTER_LIMIT)},
        "timestamp": message.timestamp.isoformat(),
    }


def _headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bot {token}"}


def _check(resp: httpx.Response) -> JSONDict:
    if resp.status_code >= 300:
        raise DeliveryError(resp.status_code, resp.text)
    try:
        return resp.json() if resp.content else {}
    except ValueError:
        return {}


async def send_embed(
    token: str,
    channel_id: int | str,
    message: DisplayMessage,
    *,
    api_base: str = DISCORD_API_BASE,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JSONDict:
    """Post ``message`` as a single embed to ``channel_id``."""
    api = f"{api_base.rstrip('/')}/channels/{channel_id}/messages"
    payload: JSONDict = {"embeds": [embed_payload(message)]}

    async with httpx.AsyncClient(
        timeout=HTTP_TIMEOUT_SECONDS, transport=transport
    ) as client:
        resp = await client.post(api, json=payload, headers=_headers(token))
    return _check(resp)


async def fetch_channel(
    token: str,
    channel_id: int | str,
    *,
    api_base: str = DISCORD_API_BASE,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JSONDict:
    """Get discord channel (JSON)."""
    url = f"{api_base.rstrip('/')}/channels/{channel_id}"
    async with httpx.AsyncClient(
        timeout=HTTP_TIMEOUT_SHORT_SECONDS, transport=transport
    ) as client:
        resp = await client.get(url, headers=_headers(token))
    return _check(resp)


class DiscordSink:
    """Delivers display messages through the Discord bot API."""

    def __init__(
        self,
        token: str,
        *,
        api_base: str = DISCORD_API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.api_base = api_base
        self.transport = transport

    async def deliver(self, channel_id: str, message: DisplayMessage) -> JSONDict:
        data = await send_embed(
            self.token,
            channel_id,
            message,
            api_base=self.api_base,
            transport=self.transport,
        )
        logger.debug("Delivered %r to channel %s", message.title, channel_id)
        return data

    async def check_channel(self, channel_id: str) -> JSONDict:
        return await fetch_channel(
            self.token, channel_id, api_base=self.api_base, transport=self.transport
        )
