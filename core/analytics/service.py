"""
Service layer to assemble statistics from stored session history.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pandas as pd

from core.analytics.metrics import (
    compute_achievements,
    compute_average_words,
    compute_games_per_weekday,
    compute_play_minutes,
    compute_recent_activity,
    compute_streak,
    compute_total_words,
    recent_games,
)
from core.analytics.queries import load_history_df
from core.analytics.types import HistoryStatistics
from core.schemas import SessionRecord
from core.store.history_repo import HistoryStore


def build_statistics(
    records: list[SessionRecord],
    now: Optional[datetime] = None,
) -> HistoryStatistics:
    """
    Compute every value shown on the statistics page.
    """
    now_ts = pd.Timestamp(now or datetime.now(timezone.utc))
    if now_ts.tzinfo is None:
        now_ts = now_ts.tz_localize("UTC")
    else:
        now_ts = now_ts.tz_convert("UTC")

    history_df = load_history_df(records)
    week_df = recent_games(history_df, now_ts)
    total_games = int(len(history_df))
    total_words = compute_total_words(history_df)
    streak = compute_streak(history_df, now_ts)

    return HistoryStatistics(
        total_games=total_games,
        total_words=total_words,
        average_words_per_game=compute_average_words(history_df),
        total_play_minutes=compute_play_minutes(history_df),
        games_this_week=int(len(week_df)),
        streak=streak,
        games_per_weekday=compute_games_per_weekday(week_df),
        recent_activity=compute_recent_activity(history_df),
        achievements=compute_achievements(total_games, total_words, streak),
    )


def build_owner_statistics(
    history: HistoryStore,
    owner_id: str,
    now: Optional[datetime] = None,
) -> HistoryStatistics:
    """Load an owner's history and compute statistics."""
    return build_statistics(history.list(owner_id), now=now)
