"""
Streamlit session state and store initialization helpers.
"""

from __future__ import annotations

import time

import streamlit as st

from core.config import get_default_user_id
from core.session import DrillSession
from core.store import StoreContext, open_store_context


@st.cache_resource
def get_store_context() -> StoreContext:
    """
    Open the stores once per server process.
    """
    return open_store_context()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "owner_id" not in st.session_state:
        st.session_state.owner_id = get_default_user_id()
    if "drill_session" not in st.session_state:
        st.session_state.drill_session = DrillSession()
    if "last_tick" not in st.session_state:
        st.session_state.last_tick = None
    if "history_saved" not in st.session_state:
        st.session_state.history_saved = False


def get_drill_session() -> DrillSession:
    return st.session_state.drill_session


def consume_elapsed_seconds() -> int:
    """
    Whole seconds since the last call, carrying the remainder forward.
    """
    now = time.monotonic()
    last = st.session_state.last_tick
    if last is None:
        st.session_state.last_tick = now
        return 0

    elapsed = int(now - last)
    st.session_state.last_tick = last + elapsed
    return elapsed
