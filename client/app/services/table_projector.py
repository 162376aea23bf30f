# client/app/services/table_projector.py
"""
Builds the display table from normalized rows.

The first row's keys (in their original order) are the header for the whole
result. Keys that only appear in later rows are not shown; keys missing from a
later row, and NaN or infinite numbers, show the missing-value sentinel.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from ..core.config import settings
from ..schemas.display import DisplayTable


def format_cell(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            return settings.missing_sentinel
        return f"{value:.2f}"
    if value is None or value == "":
        return settings.missing_sentinel
    return str(value)


def project_table(rows: List[Dict[str, Any]]) -> Optional[DisplayTable]:
    """Return the table for `rows`, or None when there is nothing to show."""
    if not rows:
        return None
    header = list(rows[0].keys())
    body = [[format_cell(row.get(key)) for key in header] for row in rows]
    return DisplayTable(header=header, body=body)
