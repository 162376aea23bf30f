# client/app/services/row_normalizer.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .time_normalizer import normalize_timestamp, recognized_fields


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def normalize_row(row: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """Return a copy of `row` with present timestamp fields rewritten."""
    out = dict(row)
    for field in fields:
        if field in out and not _is_blank(out[field]):
            out[field] = normalize_timestamp(out[field], field)
    return out


def normalize_rows(
    rows: List[Dict[str, Any]],
    fields: Optional[Iterable[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Normalize every row of a query result.

    Row count and order are preserved and the input rows are not mutated.
    `fields` defaults to the configured timestamp fields.
    """
    field_list = list(recognized_fields() if fields is None else fields)
    return [normalize_row(row, field_list) for row in rows]
