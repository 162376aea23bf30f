# client/app/services/time_normalizer.py
"""
Timestamp normalization for result rows.

Every recognized timestamp field is rendered in one display timezone and one
string format, both taken from settings. Values without an offset are assumed
to be in `settings.source_timezone`. Strings must be ISO-8601; numbers are
epoch milliseconds.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Optional

import pandas as pd

from ..core.config import settings
from ..core.errors import TimeParsingError


def recognized_fields() -> List[str]:
    return settings.timestamp_field_list()


def _to_timestamp(value: Any) -> pd.Timestamp:
    if isinstance(value, bool):
        raise TypeError("booleans are not timestamps")
    if isinstance(value, (int, float)):
        return pd.to_datetime(value, unit="ms", utc=True)
    if isinstance(value, str):
        text = value.strip()
        # pandas resolves these to the current clock even with a format
        if text.lower() in ("now", "today"):
            raise ValueError(f"relative timestamp {text!r}")
        return pd.to_datetime(text, format="ISO8601")
    if isinstance(value, (datetime, date, pd.Timestamp)):
        return pd.Timestamp(value)
    raise TypeError(f"unsupported type {type(value).__name__}")


def normalize_timestamp(value: Any, field: Optional[str] = None) -> str:
    """Return `value` as a display string, or raise TimeParsingError."""
    try:
        ts = _to_timestamp(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise TimeParsingError(field, value) from e
    if pd.isna(ts):
        raise TimeParsingError(field, value)

    if ts.tzinfo is None:
        ts = ts.tz_localize(settings.source_timezone)
    return ts.tz_convert(settings.display_timezone).strftime(settings.timestamp_format)
