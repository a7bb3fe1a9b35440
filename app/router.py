"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.game import render_game_page
from app.pages.statistics import render_statistics_page
from app.pages.word_bank import render_word_bank_page
from core.store import StoreContext


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[StoreContext], None]


PAGES = [
    AppPage(title="Game", render=render_game_page),
    AppPage(title="Word Bank", render=render_word_bank_page),
    AppPage(title="Statistics", render=render_statistics_page),
]
