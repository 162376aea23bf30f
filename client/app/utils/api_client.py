# client/app/utils/api_client.py
from typing import Any, Dict

import requests
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..core.config import settings
from ..core.errors import MalformedResponseError, QueryTimeoutError, TransportError
from ..schemas.query import QueryRequest, QueryResponse


# -------------------------------
# Error message helpers
# -------------------------------
def _detail_text(val: Any) -> str:
    # FastAPI validation errors: [{"loc": [...], "msg": "...", ...}, ...]
    if isinstance(val, list):
        msgs = [v.get("msg", str(v)) if isinstance(v, dict) else str(v) for v in val]
        return "; ".join(msgs)
    return val if isinstance(val, str) else str(val)


def _error_detail(r: requests.Response) -> str | None:
    """Pull the service's own message out of an error body, if it sent one."""
    try:
        body = r.json()
    except ValueError:
        return None

    if isinstance(body, dict):
        for key in ("detail", "error", "message"):
            val = body.get(key)
            if val:
                return _detail_text(val)
    return None


def _summarize(e: PydanticValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _request(method: str, url: str, timeout: float, **kwargs) -> Any:
    try:
        r = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.Timeout as e:
        logger.warning(f"{method} {url} timed out: {e}")
        raise QueryTimeoutError(f"Query service timed out after {timeout:g}s") from e
    except requests.RequestException as e:
        logger.warning(f"{method} {url} failed: {e}")
        raise TransportError(str(e) or e.__class__.__name__) from e

    if not r.ok:
        detail = _error_detail(r)
        msg = detail or f"Request failed with status code {r.status_code}"
        logger.warning(f"{method} {url} -> {r.status_code}: {msg}")
        raise TransportError(msg, status_code=r.status_code)

    try:
        return r.json()
    except ValueError as e:
        raise MalformedResponseError(f"Query service returned a non-JSON body: {e}") from e


# -------------------------------
# QueryServiceClient
# -------------------------------
class QueryServiceClient:
    def __init__(self, url: str | None = None, timeout: float | None = None):
        self.url = url or settings.query_service_url
        self.timeout = timeout if timeout is not None else settings.query_timeout

    def query(self, question: str) -> QueryResponse:
        """POST the question and return the validated response body."""
        payload: Dict[str, Any] = QueryRequest(question=question).model_dump()
        logger.debug(f"POST {self.url} question={question!r}")
        data = _request("POST", self.url, self.timeout, json=payload)
        try:
            return QueryResponse.model_validate(data)
        except PydanticValidationError as e:
            raise MalformedResponseError(
                f"Unexpected response from query service: {_summarize(e)}"
            ) from e
