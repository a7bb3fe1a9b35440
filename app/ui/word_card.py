"""
Word card UI component.
"""

from __future__ import annotations

import html

import streamlit as st


CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
CARD_BG_COLOR = "#f0f2f6"
WORD_FONT_SIZE = "3em"
WORD_COLOR = "#1f1f1f"


def render_word_card(word: str, corner_text: str = "") -> None:
    """
    Render the word currently on display.

    Args:
        word: Word to show (escaped before rendering)
        corner_text: Optional text in the top-right corner
    """
    corner_html = ""
    if corner_text:
        corner_html = (
            '<div style="position: absolute; top: 15px; right: 20px; font-size: 0.9em; '
            f'color: #666; font-style: italic;">{html.escape(corner_text)}</div>'
        )

    main_html = (
        f'<h1 style="font-size: {WORD_FONT_SIZE}; color: {WORD_COLOR}; margin: 0; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{html.escape(word)}</h1>"
    )

    card_html = (
        f'<div style="background-color: {CARD_BG_COLOR}; padding: {CARD_PADDING}; '
        'border-radius: 15px; text-align: center; box-shadow: 0 4px 6px '
        f'rgba(0, 0, 0, 0.1); min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}</div>'
    )

    st.markdown(card_html, unsafe_allow_html=True)
