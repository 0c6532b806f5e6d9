"""Timezone helpers."""

from __future__ import annotations

import datetime as dt

TZ = dt.timezone.utc


def now_utc() -> dt.datetime:
    """Current timezone-aware datetime in UTC."""

    return dt.datetime.now(tz=TZ)
