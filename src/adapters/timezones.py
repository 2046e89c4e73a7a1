"""Timezone database access.

`zoneinfo` (system tzdata, or the `tzdata` package as fallback) resolves IANA
names; `tzlocal` detects the local system zone.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from tzlocal import get_localzone

from core.logging_config import get_logger

_log = get_logger(__name__)


@lru_cache(maxsize=1)
def _known_zones() -> frozenset[str]:
    return frozenset(available_timezones())


def resolve_zone(name: str) -> ZoneInfo:
    """Resolve an exact IANA key into a `ZoneInfo`.

    The name is used verbatim: no trimming, no case folding.

    Raises:
        ValueError: when the key is not in the timezone database.
    """

    if not name:
        raise ValueError("empty timezone name")
    if name not in _known_zones():
        raise ValueError(f"unknown timezone name: {name}")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"cannot load timezone {name}: {exc}") from exc


def list_zones(prefix: str | None = None) -> list[str]:
    """Sorted IANA names, optionally restricted to those starting with `prefix`."""

    zones = sorted(_known_zones())
    if prefix:
        zones = [z for z in zones if z.startswith(prefix)]
    return zones


def zone_count() -> int:
    return len(_known_zones())


def get_local_zone(override: str | None = None) -> tzinfo:
    """Local system zone, or `override` resolved through `resolve_zone`.

    If the system zone cannot be identified, the fixed offset currently in
    effect is used instead.
    """

    if override:
        return resolve_zone(override)
    try:
        return get_localzone()
    except (ZoneInfoNotFoundError, ValueError, LookupError) as exc:
        _log.warning("Could not detect local timezone (%s); using system offset", exc)
        fallback = datetime.now().astimezone().tzinfo
        if fallback is None:
            raise ValueError(f"cannot determine local timezone: {exc}") from exc
        return fallback


def zone_key(zone: tzinfo) -> str:
    """Display key of a zone: the IANA key when there is one."""

    key = getattr(zone, "key", None)
    if key:
        return key
    return str(zone)
