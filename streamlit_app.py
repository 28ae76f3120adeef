# streamlit_app.py

import html
import logging
from typing import Optional

import streamlit as st

from analyzer_config import get_config
from analyzer_logging import setup_logging
from analyzer_state import (
    AnalyzerState,
    Analyzed,
    Idle,
    can_analyze,
    request_analysis,
    select_file,
    selected_file_name,
)
from analyzer_view import render_analysis, render_empty_state

STATE_KEY = "analyzer_state"

config = get_config()
setup_logging(config.log_level)
# Streamlit runs this script as __main__
logger = logging.getLogger("streamlit_app")

# -----------------------------
# Session helpers
# -----------------------------


def current_user() -> Optional[str]:
    """Signed-in user, if any. Only decides whether the login hint is shown."""
    return st.session_state.get("user")


def get_state() -> AnalyzerState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = Idle()
    return st.session_state[STATE_KEY]


def set_state(state: AnalyzerState) -> None:
    st.session_state[STATE_KEY] = state

# -----------------------------
# Streamlit UI
# -----------------------------

st.set_page_config(page_title=config.app_title, page_icon="📄", layout="wide")

st.markdown(
    """
    <style>
    .main-title {
        text-align: center;
        font-size: 2.5em;
        margin-bottom: 0;
    }
    .subtitle {
        text-align: center;
        color: #6b7280;
        margin-bottom: 30px;
    }
    .stButton>button {
        width: 100%;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown(f"<h1 class='main-title'>{html.escape(config.app_title)}</h1>", unsafe_allow_html=True)
st.markdown("<p class='subtitle'>Upload your resume and get feedback</p>", unsafe_allow_html=True)

for problem in config.validate():
    logger.warning(f"Configuration problem: {problem}")
    st.error(problem)

col1, col2 = st.columns([1, 2])

with col1:
    st.subheader("📤 Upload Resume")
    up = st.file_uploader(
        "Upload resume",
        type=config.accepted_file_types or None,
        label_visibility="collapsed",
    )

    uploaded_name = up.name if up is not None else None
    if uploaded_name != selected_file_name(get_state()):
        set_state(select_file(get_state(), uploaded_name))

    st.caption(selected_file_name(get_state()) or "Click to upload resume")

    if st.button("Analyze Resume", type="primary", disabled=not can_analyze(get_state())):
        set_state(request_analysis(get_state()))

    if not current_user():
        st.caption("(Login optional for now)")

with col2:
    state = get_state()

    if isinstance(state, Analyzed):
        render_analysis(state.analysis, state.file_name, show_chart=config.show_score_chart)
    else:
        render_empty_state()
