"""Config file location.

An explicit path on the command line always wins; otherwise the file is
`<home>/.tz.rc`. The home directory is passed in by the caller, so these
functions never read the environment themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.config import DEFAULT_CONFIG_FILENAME
from core.errors import ConfigLocationError
from core.logging_config import get_logger

_log = get_logger(__name__)


def get_home_dir() -> Path | None:
    """Home directory of the current user, or None when it cannot be determined."""

    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def resolve_config_path(
    explicit: str | Path | None,
    home: Path | None,
    *,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> Path:
    """Return the config path; the file is not checked for existence here."""

    if explicit is not None:
        path = Path(explicit)
        _log.debug("Using explicit config path %s", path)
        return path
    if home is None:
        raise ConfigLocationError()
    path = Path(home) / filename
    _log.debug("Using default config path %s", path)
    return path


def locate(
    args: Sequence[str],
    home: Path | None,
    *,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> Path:
    """Locate the config file from a full argv (program name first).

    `args[1]`, when present, is taken as-is as the config path.
    """

    explicit = args[1] if len(args) > 1 else None
    return resolve_config_path(explicit, home, filename=filename)
