"""Run the relay with uvicorn."""

from __future__ import annotations

import uvicorn

from ghrelay.app import configure_logging
from ghrelay.config import settings


def main() -> None:
    configure_logging(settings.log_level)
    settings.require()
    uvicorn.run("ghrelay.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
