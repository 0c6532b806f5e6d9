"""the beautiful world start from here."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

REQUIRED_ENV = ("DISCORD_TOKEN", "CHANNEL_ID")


class ConfigError(RuntimeError):
    """Raised when a required setting is absent."""


def _env(name: str, default: str = ""):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_flag(name: str, default: str = "true"):
    return field(
        default_factory=lambda: os.getenv(name, default).strip().lower()
        in {"1", "true", "yes", "on"}
    )


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    discord_token: str = _env("DISCORD_TOKEN")
    channel_id: str = _env("CHANNEL_ID")
    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    discord_api_base: str = _env("DISCORD_API_BASE", "https://discord.com/api/v10")
    log_level: str = _env("LOG_LEVEL", "INFO")
    verify_channel: bool = _env_flag("VERIFY_CHANNEL")

    def missing(self) -> list[str]:
        """Names of required environment variables that are unset."""
        values = {"DISCORD_TOKEN": self.discord_token, "CHANNEL_ID": self.channel_id}
        return [name for name in REQUIRED_ENV if not values[name].strip()]

    def require(self) -> "Settings":
        missing = self.missing()
        if missing:
            raise ConfigError(f"missing required settings: {', '.join(missing)}")
        return self


settings = Settings()
