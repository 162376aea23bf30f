# client/app/core/errors.py
from __future__ import annotations

from typing import Optional


class QueryClientError(Exception):
    """Base for every failure surfaced to the user through the Failed state."""


class ValidationError(QueryClientError):
    """Question rejected before sending. Nothing raises this yet."""


class TransportError(QueryClientError):
    """Network failure or non-2xx response from the query service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class QueryTimeoutError(TransportError):
    pass


class MalformedResponseError(QueryClientError):
    """2xx response whose body is not JSON or not a QueryResponse."""


class TimeParsingError(QueryClientError, ValueError):
    def __init__(self, field: Optional[str], value):
        self.field = field
        self.value = value
        label = f"field '{field}'" if field else "timestamp"
        super().__init__(f"Could not parse {label} value {value!r}")
