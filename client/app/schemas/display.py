# client/app/schemas/display.py
from __future__ import annotations

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict

from .query import Row


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class SubmissionState(BaseModel):
    """Snapshot of the controller. Replaced whole, never edited in place."""
    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus = SubmissionStatus.IDLE
    token: int = 0
    sql_query: str = ""
    rows: List[Row] = []
    error_message: str = ""


class DisplayTable(BaseModel):
    header: List[str]
    body: List[List[str]]


class RenderState(BaseModel):
    """What the presentation layer draws."""
    sql_query_text: str = ""
    table_header: List[str] = []
    table_body: List[List[str]] = []
    has_table: bool = False
    is_loading: bool = False
    error_message: str = ""
    is_error_visible: bool = False
