"""Implementations of `core.interfaces.clock.Clock`."""

from __future__ import annotations

from datetime import datetime, timezone


class SystemClock:
    """Wall clock, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to one instant (tests, reproducible output)."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
