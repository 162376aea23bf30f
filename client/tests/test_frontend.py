# client/tests/test_frontend.py
import json
import os
import sys

import pytest
import requests
import streamlit as st
from loguru import logger
from streamlit.testing.v1 import AppTest

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "frontend", "app.py"))


# -----------------------------------------------------------
# Helpers
# -----------------------------------------------------------
def _response(status: int, body) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = json.dumps(body).encode("utf-8")
    return r


@pytest.fixture
def _restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


# -----------------------------------------------------------
# Submit flow
# -----------------------------------------------------------
def test_submit_disables_button_during_call_and_renders_result(monkeypatch, _restore_logger):
    seen = []

    def fake_request(method, url, **kwargs):
        # called from the script thread while the query is in flight
        seen.append(st.session_state.pending_question)
        return _response(200, {"sqlQuery": "SELECT 1 AS Amount", "result": [{"Amount": 1, "Name": None}]})

    monkeypatch.setattr(requests, "request", fake_request)

    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    assert not at.button[0].disabled

    at.text_input(key="question").input("orders")
    at.button[0].click().run()

    assert seen == ["orders"]
    assert at.session_state.pending_question is None
    assert not at.button[0].disabled
    assert at.code[0].value == "SELECT 1 AS Amount"
    df = at.dataframe[0].value
    assert list(df.columns) == ["Amount", "Name"]
    assert df.iloc[0].tolist() == ["1.00", "N/A"]


def test_failed_submit_shows_error_and_dismiss_hides_it(monkeypatch, _restore_logger):
    def fake_request(method, url, **kwargs):
        raise requests.ConnectionError("Network Error")

    monkeypatch.setattr(requests, "request", fake_request)

    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.text_input(key="question").input("orders")
    at.button[0].click().run()

    assert "Network Error" in at.error[0].value

    dismiss = [b for b in at.button if b.label == "Dismiss"][0]
    dismiss.click().run()
    assert len(at.error) == 0
