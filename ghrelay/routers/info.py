"""Ruter Ingfo?"""

from __future__ import annotations

from textwrap import dedent

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ghrelay.services.github import SUPPORTED_KINDS

router = APIRouter()

HTTP_HELP_TEXT = dedent(
    f"""
GitHub → Discord Relay (HTTP Help)

Endpoints
---------
- GET  /         : Health check
- GET  /help     : This summary
- POST /webhook  : GitHub webhook (Content type: application/json)

Events
------
{', '.join(sorted(SUPPORTED_KINDS))}

Notes
-----
- star: only 'created' is relayed.
- release: only 'published' is relayed.
- Everything else is acknowledged and ignored.
"""
).strip()


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    """Health check."""
    return "ok"


@router.get("/help", response_class=PlainTextResponse)
async def http_help() -> str:
    return HTTP_HELP_TEXT
