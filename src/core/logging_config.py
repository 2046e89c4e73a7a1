"""Project logging (Rich).

All loggers hang off the `tzclock` logger, which owns a single RichHandler
on stderr. Stdout stays reserved for the report.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "tzclock"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach the stderr handler once and set the level."""

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger under the `tzclock` hierarchy (`tzclock.<name>`)."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
