"""Display message schemas"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict


class EmbedField(BaseModel):
    """A labelled value inside a display message."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = False


class DisplayMessage(BaseModel):
    """
    Channel-agnostic rendering of one event.

    Built once per event by the renderer and handed to a delivery sink.
    Transport limits (field length, field count) are applied by the sink.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    link_target: str
    accent_color: tuple[int, int, int]
    fields: tuple[EmbedField, ...]
    footer: str
    timestamp: dt.datetime

    @property
    def color_value(self) -> int:
        """Accent color packed as 0xRRGGBB."""
        r, g, b = self.accent_color
        return (r << 16) | (g << 8) | b
