"""
Metric computations for the statistics page.
"""

from __future__ import annotations

import math

import pandas as pd

from core.analytics.constants import (
    ACHIEVEMENT_DESCRIPTIONS,
    CONSISTENT_PLAYER_DAYS,
    RECENT_ACTIVITY_LIMIT,
    RECENT_WINDOW_DAYS,
    WEEKDAY_LABELS,
    WORD_MASTER_WORDS,
)
from core.analytics.types import Achievement, RecentGame


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up (2.5 -> 3).
    """
    return int(math.floor(value + 0.5))


def compute_total_words(history_df: pd.DataFrame) -> int:
    if history_df.empty:
        return 0
    return int(history_df["words_used"].sum())


def compute_average_words(history_df: pd.DataFrame) -> int:
    """
    Mean words used per game, rounded to a whole word.
    """
    if history_df.empty:
        return 0
    return round_half_up(float(history_df["words_used"].mean()))


def compute_play_minutes(history_df: pd.DataFrame) -> int:
    if history_df.empty:
        return 0
    return round_half_up(float(history_df["duration_seconds"].sum()) / 60.0)


def recent_games(
    history_df: pd.DataFrame,
    now: pd.Timestamp,
    days: int = RECENT_WINDOW_DAYS,
) -> pd.DataFrame:
    """
    Games created within the last `days` days of `now`.
    """
    if history_df.empty:
        return history_df
    cutoff = now - pd.Timedelta(days=days)
    return history_df[history_df["created_at"] >= cutoff]


def compute_games_per_weekday(recent_df: pd.DataFrame) -> pd.Series:
    """
    Game counts by weekday, always indexed Mon..Sun.
    """
    if recent_df.empty:
        return pd.Series(0, index=WEEKDAY_LABELS, dtype="int64")
    counts = recent_df["created_at"].dt.dayofweek.value_counts()
    counts.index = [WEEKDAY_LABELS[i] for i in counts.index]
    return counts.reindex(WEEKDAY_LABELS, fill_value=0).astype("int64")


def compute_streak(history_df: pd.DataFrame, now: pd.Timestamp) -> int:
    """
    Consecutive UTC days with at least one game, ending today or yesterday.
    """
    if history_df.empty:
        return 0

    played_days = set(history_df["day_utc"])
    day = now.floor("D")
    if day not in played_days:
        day -= pd.Timedelta(days=1)

    streak = 0
    while day in played_days:
        streak += 1
        day -= pd.Timedelta(days=1)
    return streak


def compute_recent_activity(
    history_df: pd.DataFrame,
    limit: int = RECENT_ACTIVITY_LIMIT,
) -> list[RecentGame]:
    """
    The newest `limit` games with their words used and rounded minutes.
    """
    if history_df.empty:
        return []

    newest = history_df.sort_values("created_at", ascending=False, kind="stable").head(limit)
    return [
        RecentGame(
            words_used=int(row.words_used),
            minutes=round_half_up(float(row.duration_seconds) / 60.0),
            created_at=row.created_at.to_pydatetime(),
        )
        for row in newest.itertuples(index=False)
    ]


def compute_achievements(total_games: int, total_words: int, streak: int) -> list[Achievement]:
    earned = {
        "First Game": total_games >= 1,
        "Word Master": total_words >= WORD_MASTER_WORDS,
        "Consistent Player": streak >= CONSISTENT_PLAYER_DAYS,
    }
    return [
        Achievement(name=name, description=description, earned=earned[name])
        for name, description in ACHIEVEMENT_DESCRIPTIONS.items()
    ]
