# client/app/schemas/query.py
from __future__ import annotations

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field


Row = Dict[str, Any]


class QueryRequest(BaseModel):
    question: str


class QueryResponse(BaseModel):
    """Body returned by the query service on success."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sql_query: str = Field(..., alias="sqlQuery")
    result: List[Row]
