"""JSON export of the report.

Machine-readable alternative to the aligned text output (`--json`).
"""

from __future__ import annotations

import json

from core.domain.models import Report


def report_to_json(report: Report) -> str:
    """Serialize `Report` as stable, UTF-8 friendly JSON (without padding)."""

    payload = report.model_dump(mode="json", exclude={"width"})
    return json.dumps(payload, ensure_ascii=False, indent=2)
