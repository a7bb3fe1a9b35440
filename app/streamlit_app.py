"""
Word Drill - Main App

Streamlit front end for the vocabulary drill session engine.
"""

import logging

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, get_store_context
from core.config import is_test_mode


# ---- Page Setup ----

st.set_page_config(
    page_title="Word Drill",
    page_icon="🃏",
    layout="centered"
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main():
    """Main app entry point."""
    ensure_session_state()
    stores = get_store_context()

    if is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using the test database (set TEST_MODE=false in .env for production)")

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render(stores)


if __name__ == "__main__":
    main()
