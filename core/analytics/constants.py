"""
Constants for the statistics page.
"""

from __future__ import annotations

from typing import Final


WEEKDAY_LABELS: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

RECENT_WINDOW_DAYS: Final[int] = 7
RECENT_ACTIVITY_LIMIT: Final[int] = 5

# Achievement thresholds
WORD_MASTER_WORDS: Final[int] = 100
CONSISTENT_PLAYER_DAYS: Final[int] = 7

ACHIEVEMENT_DESCRIPTIONS: Final[dict[str, str]] = {
    "First Game": "Complete your first game",
    "Word Master": f"Practice {WORD_MASTER_WORDS} words",
    "Consistent Player": f"Play for {CONSISTENT_PLAYER_DAYS} days straight",
}
