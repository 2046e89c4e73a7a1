"""Domain models (Pydantic v2).

- `TimezoneEntry`: one valid line of the config file.
- `ReportRow` / `Report`: the rendered snapshot of a single instant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterator
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

LOCAL_TIME_LABEL = "Local time"


class TimezoneEntry(BaseModel):
    """A timezone listed in the config file.

    `name` is kept verbatim for display; `zone` is what conversions use.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="IANA name exactly as written in the file (e.g. 'Asia/Kolkata').",
    )
    zone: ZoneInfo = Field(
        ...,
        description="Zone resolved against the timezone database.",
    )


class ReportRow(BaseModel):
    """One printed line of the report, before padding."""

    label: str = Field(..., min_length=1)
    zone: str = Field(..., description="Key of the zone used to convert the instant.")
    time: str = Field(..., description="Formatted instant, e.g. '2024-01-01 17:30 IST'.")
    utc_offset: str = Field(..., pattern=r"^[+-]\d{2}:\d{2}$")


class Report(BaseModel):
    """Aligned snapshot of one instant across the local zone and every entry."""

    instant: datetime = Field(..., description="UTC instant shared by every row.")
    width: int = Field(..., ge=len(LOCAL_TIME_LABEL))
    rows: list[ReportRow] = Field(default_factory=list)

    def lines(self) -> Iterator[str]:
        for row in self.rows:
            yield f"{row.label.ljust(self.width)}\t= {row.time}"
