"""
Types for the statistics page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd


@dataclass(frozen=True)
class RecentGame:
    """One row of the recent activity list."""
    words_used: int
    minutes: int
    created_at: datetime


@dataclass(frozen=True)
class Achievement:
    name: str
    description: str
    earned: bool


@dataclass(frozen=True)
class HistoryStatistics:
    """
    Aggregates over one owner's completed sessions.
    """
    total_games: int
    total_words: int
    average_words_per_game: int
    total_play_minutes: int
    games_this_week: int
    streak: int
    games_per_weekday: pd.Series  # Mon..Sun, last 7 days
    recent_activity: list[RecentGame] = field(default_factory=list)  # Newest first
    achievements: list[Achievement] = field(default_factory=list)
