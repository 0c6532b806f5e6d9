"""the beautiful world start from here."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from ghrelay.config import Settings, settings as default_settings
from ghrelay.routers import gh, info
from ghrelay.services.discord import DeliveryError, DiscordSink, Sink

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(settings: Settings | None = None, sink: Sink | None = None) -> FastAPI:
    """
    Build the relay application.

    The destination channel and delivery sink live on ``app.state`` and are
    passed explicitly into the webhook pipeline.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings.require()
        if settings.verify_channel and isinstance(app.state.sink, DiscordSink):
            try:
                channel = await app.state.sink.check_channel(settings.channel_id)
            except (DeliveryError, httpx.HTTPError) as exc:
                logger.warning("Channel %s not found: %s", settings.channel_id, exc)
            else:
                logger.info("Resolved channel #%s", channel.get("name", settings.channel_id))
        logger.info("Webhook relay ready, relaying to channel %s", settings.channel_id)
        yield

    app = FastAPI(title="GitHub → Discord relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.channel_id = settings.channel_id
    app.state.sink = sink or DiscordSink(
        settings.discord_token, api_base=settings.discord_api_base
    )

    app.include_router(info.router)
    app.include_router(gh.router)
    return app


app = create_app()
