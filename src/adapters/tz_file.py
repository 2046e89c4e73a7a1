"""Reader for the `.tz.rc` file.

Format: one IANA timezone name per line, nothing else. Lines are not
trimmed and blank lines are not skipped, so a blank line is an invalid
timezone. The first invalid line aborts the whole read.
"""

from __future__ import annotations

from pathlib import Path

from adapters.timezones import resolve_zone
from core.domain.models import TimezoneEntry
from core.errors import ConfigFormatError, ConfigReadError
from core.logging_config import get_logger

_log = get_logger(__name__)


def _strip_terminator(raw: str) -> str:
    return raw.removesuffix("\n").removesuffix("\r")


def parse_line(line: str, *, line_number: int | None = None) -> TimezoneEntry:
    """Parse a single config line (without its terminator)."""

    try:
        zone = resolve_zone(line)
    except ValueError as exc:
        raise ConfigFormatError(line, str(exc), line_number=line_number) from exc
    return TimezoneEntry(name=line, zone=zone)


def read_entries(path: Path) -> list[TimezoneEntry]:
    """Read every line of `path` into entries, in file order.

    Raises:
        ConfigReadError: the file cannot be opened or decoded.
        ConfigFormatError: a line is not a valid timezone name.
    """

    entries: list[TimezoneEntry] = []
    try:
        with Path(path).open("r", encoding="utf-8", newline="\n") as fh:
            for number, raw in enumerate(fh, start=1):
                entries.append(parse_line(_strip_terminator(raw), line_number=number))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(Path(path), exc) from exc

    _log.debug("Parsed %d timezone(s) from %s", len(entries), path)
    return entries


read = read_entries
