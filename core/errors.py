"""
Error kinds raised by the drill core.

Every operation validates before mutating, so a raised error always
leaves the engine, timer and recorder exactly as they were.
"""

from __future__ import annotations


class DrillError(Exception):
    """Base class for all word-drill errors."""


class InvalidCategory(DrillError):
    """A selection references a category that does not exist."""

    def __init__(self, category_id: str):
        super().__init__(f"Unknown category: {category_id}")
        self.category_id = category_id


class EmptyPool(DrillError):
    """A selection (or pool) yields zero words."""


class NotLoaded(DrillError):
    """A draw engine operation was attempted before load()."""


class NoCurrentWord(DrillError):
    """Discard/return was attempted with no word on display."""


class PoolExhausted(DrillError):
    """Draw attempted after the engine already signalled exhaustion."""


class InvalidTransition(DrillError):
    """An event is not legal in the current session or timer state."""


class InvalidPreset(DrillError, ValueError):
    """Preset values failed structural validation."""


class CategoryNotOwned(DrillError, PermissionError):
    """Mutation of a built-in category or one owned by another user."""
