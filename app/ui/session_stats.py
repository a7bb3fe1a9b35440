"""
Session Statistics UI

Renders counters and the countdown from a session snapshot.
"""

import streamlit as st

from core.schemas import SessionSummary
from core.session import SessionSnapshot
from core.session_recorder import HistoryEntry


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def render_session_stats(snapshot: SessionSnapshot) -> None:
    """
    Render live counters for a running session.
    """
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Time Left", format_time(snapshot.remaining_seconds))

    with col2:
        st.metric("Total Words", snapshot.total_words)

    with col3:
        st.metric("Used Words", snapshot.used_count)

    with col4:
        st.metric("Discarded", snapshot.discarded_count)


def render_session_complete(summary: SessionSummary, history: tuple[HistoryEntry, ...]) -> None:
    """Render the end-of-session summary and action log."""
    st.success("🎉 Session finished! Here's your summary:")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Words", summary.total_words)
    col2.metric("Words Used", summary.used_count)
    col3.metric("Words Discarded", summary.discarded_count)
    col4.metric("Total Actions", summary.total_actions)

    if history:
        st.markdown("### Session History")
        st.dataframe(
            [
                {
                    "word": entry.word,
                    "action": entry.action.value,
                    "time": entry.timestamp.strftime("%H:%M:%S"),
                }
                for entry in history
            ],
            use_container_width=True,
            hide_index=True,
        )
