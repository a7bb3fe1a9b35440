"""
Data-loading helpers for statistics.
"""

from __future__ import annotations

import pandas as pd

from core.schemas import SessionRecord

HISTORY_COLUMNS = ["created_at", "words_used", "duration_seconds", "total_actions", "day_utc"]


def load_history_df(records: list[SessionRecord]) -> pd.DataFrame:
    """
    Flatten session records into a dataframe sorted by creation time.
    """
    if not records:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    df = pd.DataFrame([
        {
            "created_at": record.created_at,
            "words_used": record.summary.used_count,
            "duration_seconds": record.duration_seconds,
            "total_actions": record.summary.total_actions,
        }
        for record in records
    ])
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True, errors="coerce")
    df = df.dropna(subset=["created_at"])
    df["day_utc"] = df["created_at"].dt.floor("D")
    return df.sort_values("created_at").reset_index(drop=True)
