"""Clock contract.

The renderer asks a `Clock` for the instant instead of calling
`datetime.now()` itself, so tests can pin the time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant.

    Rules:
    - `now` must return a timezone-aware datetime.
    """

    def now(self) -> datetime:
        ...
