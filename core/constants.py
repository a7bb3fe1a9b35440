"""
Word Drill Constants

Session defaults and built-in categories in one place.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


# ---- History Actions ----

class ActionType(str, Enum):
    """Kind of action recorded in the session history."""
    DRAWN = "drawn"          # Word put on display
    DISCARDED = "discarded"  # Word removed from play
    RETURNED = "returned"    # Word put back into the pool


# ---- Session Defaults ----

DEFAULT_TIMER_SECONDS: Final[int] = 30
TIMER_MIN_SECONDS: Final[int] = 10
TIMER_MAX_SECONDS: Final[int] = 300
TIMER_STEP_SECONDS: Final[int] = 10

DEFAULT_WORD_COUNT: Final[int] = 5  # Initial count when a category is toggled on
DEFAULT_REPEAT_WORDS: Final[bool] = True


# ---- Built-in Categories ----
# Always available, owned by nobody, never mutated.

BUILTIN_CATEGORY_PREFIX: Final[str] = "default-"

BUILTIN_CATEGORIES: Final[list[dict]] = [
    {
        "id": "default-nouns",
        "name": "Nouns",
        "words": ["apple", "book", "car", "dog", "elephant", "flower", "guitar", "house", "island", "jacket"],
    },
    {
        "id": "default-verbs",
        "name": "Verbs",
        "words": ["run", "jump", "swim", "dance", "sing", "write", "read", "cook", "play", "sleep"],
    },
    {
        "id": "default-adjectives",
        "name": "Adjectives",
        "words": ["happy", "sad", "big", "small", "fast", "slow", "beautiful", "ugly", "smart", "funny"],
    },
]
