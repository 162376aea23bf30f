# client/app/services/controller.py
"""
Query submission lifecycle.

State machine:  idle -> loading -> (success | failed)
                success -> loading          (next submit)
                failed  -> idle | loading   (dismiss / next submit)

Every submit gets a new token. A response whose token is no longer current
belongs to a superseded submission and is dropped without touching state.
"""
from __future__ import annotations

from itertools import count
from threading import RLock
from typing import Optional

from loguru import logger

from ..core.errors import QueryClientError
from ..schemas.display import DisplayTable, RenderState, SubmissionState, SubmissionStatus
from ..utils.api_client import QueryServiceClient
from .row_normalizer import normalize_rows
from .table_projector import project_table


class QueryController:
    def __init__(self, client: Optional[QueryServiceClient] = None):
        self.client = client or QueryServiceClient()
        self._lock = RLock()
        self._tokens = count(1)
        self._state = SubmissionState()

    @property
    def state(self) -> SubmissionState:
        with self._lock:
            return self._state

    # ----------------------------------------------------
    # Transitions
    # ----------------------------------------------------
    def submit(self, question: str) -> SubmissionState:
        with self._lock:
            token = next(self._tokens)
            self._state = SubmissionState(status=SubmissionStatus.LOADING, token=token)
        logger.info(f"[{token}] submitting question: {question!r}")

        try:
            response = self.client.query(question)
            rows = normalize_rows(response.result)
            final = SubmissionState(
                status=SubmissionStatus.SUCCESS,
                token=token,
                sql_query=response.sql_query,
                rows=rows,
            )
            logger.info(f"[{token}] received {len(rows)} row(s)")
        except QueryClientError as e:
            logger.warning(f"[{token}] {e.__class__.__name__}: {e}")
            final = self._failed(token, e)
        except Exception as e:
            logger.exception(f"[{token}] unexpected error while querying")
            final = self._failed(token, e)

        # Loading is cleared only here, by swapping in the terminal snapshot.
        with self._lock:
            if self._state.token != token:
                logger.info(f"[{token}] discarding stale response (current is {self._state.token})")
                return self._state
            self._state = final
            return final

    def dismiss_error(self) -> SubmissionState:
        with self._lock:
            if self._state.status is SubmissionStatus.FAILED:
                self._state = self._state.model_copy(update={"status": SubmissionStatus.IDLE})
            return self._state

    @staticmethod
    def _failed(token: int, exc: Exception) -> SubmissionState:
        return SubmissionState(
            status=SubmissionStatus.FAILED,
            token=token,
            error_message=str(exc) or exc.__class__.__name__,
        )

    # ----------------------------------------------------
    # Views
    # ----------------------------------------------------
    def table(self) -> Optional[DisplayTable]:
        return project_table(self.state.rows)

    def render_state(self) -> RenderState:
        state = self.state
        table = project_table(state.rows)
        return RenderState(
            sql_query_text=state.sql_query,
            table_header=table.header if table else [],
            table_body=table.body if table else [],
            has_table=table is not None,
            is_loading=state.status is SubmissionStatus.LOADING,
            error_message=state.error_message,
            is_error_visible=state.status is SubmissionStatus.FAILED,
        )
