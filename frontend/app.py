import os
import sys

import pandas as pd
import streamlit as st

# project root on sys.path when launched with `streamlit run frontend/app.py`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from client.app.core.config import settings
from client.app.core.logging_config import setup_logging
from client.app.services.controller import QueryController

st.set_page_config(page_title=settings.project_name, layout="wide")

if "controller" not in st.session_state:
    setup_logging()
    st.session_state.controller = QueryController()
    st.session_state.pending_question = None
controller: QueryController = st.session_state.controller


def _queue_question():
    # runs before the rerun, so the form below renders disabled for the whole call
    st.session_state.pending_question = st.session_state.question


st.title(settings.project_name)

pending = st.session_state.pending_question
view = controller.render_state()
with st.form("ask"):
    st.text_input("Ask a question", key="question")
    st.form_submit_button(
        "Submit",
        on_click=_queue_question,
        disabled=pending is not None or view.is_loading,
        use_container_width=True,
    )

if pending is not None:
    try:
        with st.spinner("Running query..."):
            controller.submit(pending)
    finally:
        st.session_state.pending_question = None
    st.rerun()

if view.is_error_visible:
    c1, c2 = st.columns([6, 1])
    c1.error(view.error_message)
    if c2.button("Dismiss"):
        controller.dismiss_error()
        st.rerun()

if view.sql_query_text:
    st.subheader("Generated SQL Query:")
    st.code(view.sql_query_text, language="sql")

if view.has_table:
    st.subheader("Result:")
    st.dataframe(
        pd.DataFrame(view.table_body, columns=view.table_header),
        use_container_width=True,
        hide_index=True,
    )
