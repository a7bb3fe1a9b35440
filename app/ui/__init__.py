"""UI Components for Word Drill"""

from app.ui.word_card import render_word_card
from app.ui.session_stats import format_time, render_session_stats, render_session_complete

__all__ = [
    "render_word_card",
    "format_time",
    "render_session_stats",
    "render_session_complete",
]
