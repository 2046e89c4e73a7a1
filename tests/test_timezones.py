from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

import adapters.timezones as timezones
from adapters.timezones import get_local_zone, list_zones, resolve_zone, zone_key


def test_resolve_known_zone() -> None:
    assert resolve_zone("Asia/Kolkata") == ZoneInfo("Asia/Kolkata")


@pytest.mark.parametrize("name", ["", "Not/AZone", "Asia", "../etc/passwd"])
def test_resolve_rejects_unknown_names(name: str) -> None:
    with pytest.raises(ValueError):
        resolve_zone(name)


def test_override_wins_over_system_zone() -> None:
    assert zone_key(get_local_zone("Asia/Tokyo")) == "Asia/Tokyo"


def test_undetectable_system_zone_falls_back_to_current_offset(monkeypatch: pytest.MonkeyPatch) -> None:
    def _broken() -> ZoneInfo:
        raise ZoneInfoNotFoundError("no zone configured")

    monkeypatch.setattr(timezones, "get_localzone", _broken)

    zone = get_local_zone()

    assert zone.utcoffset(datetime.now()) is not None


def test_list_zones_with_prefix() -> None:
    zones = list_zones("Europe/")
    assert "Europe/London" in zones
    assert all(z.startswith("Europe/") for z in zones)
