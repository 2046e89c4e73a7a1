"""Time report construction.

One instant is taken from the clock and converted to the local zone and to
every configured zone. Labels are padded to the widest one, including
"Local time", so the times start in a common column.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterable, Sequence

from adapters.timezones import zone_key
from core.domain.models import LOCAL_TIME_LABEL, Report, ReportRow, TimezoneEntry
from core.interfaces.clock import Clock

TIME_FORMAT = "%Y-%m-%d %H:%M %Z"


def max_label_width(names: Iterable[str]) -> int:
    return max([len(LOCAL_TIME_LABEL), *(len(n) for n in names)])


def format_time(moment: datetime) -> str:
    return moment.strftime(TIME_FORMAT)


def format_offset(offset: timedelta | None) -> str:
    """`timedelta` -> `+HH:MM` / `-HH:MM`."""

    total = int((offset or timedelta(0)).total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rest // 60:02d}"


def _row(label: str, instant: datetime, zone: tzinfo) -> ReportRow:
    converted = instant.astimezone(zone)
    return ReportRow(
        label=label,
        zone=zone_key(zone),
        time=format_time(converted),
        utc_offset=format_offset(converted.utcoffset()),
    )


def render(entries: Sequence[TimezoneEntry], now: datetime, local_zone: tzinfo) -> Report:
    """Render all rows from the single instant `now`.

    The first row is always the local time; entries follow in file order,
    duplicates included.
    """

    if now.tzinfo is None:
        raise ValueError("render() needs a timezone-aware instant")

    rows = [_row(LOCAL_TIME_LABEL, now, local_zone)]
    rows.extend(_row(entry.name, now, entry.zone) for entry in entries)
    return Report(
        instant=now.astimezone(timezone.utc),
        width=max_label_width(entry.name for entry in entries),
        rows=rows,
    )


def build_report(entries: Sequence[TimezoneEntry], clock: Clock, local_zone: tzinfo) -> Report:
    """Read the clock once and render."""

    return render(entries, clock.now(), local_zone)
