"""
Session Recorder

Append-only, timestamped log of every draw/discard/return action in one
session. Summary counters are computed from it at session end; the log
itself is never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

from core.constants import ActionType
from core.schemas import SessionSummary
from core.session_builders.pool_types import DrawState


@dataclass(frozen=True)
class HistoryEntry:
    """
    A single recorded action.
    """
    word: str
    timestamp: datetime
    action: ActionType
    occurrence: Optional[int] = None  # Pool index the action applied to


class SessionRecorder:
    """Chronological action log for one session."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def record(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def count(self, action: ActionType) -> int:
        return sum(1 for entry in self._entries if entry.action == action)

    def summarize(self, state: DrawState) -> SessionSummary:
        """
        Compute summary counters without touching the log.

        Args:
            state: Final draw state; carries the pool and its partitions
        """
        return SessionSummary(
            total_words=len(state.pool),
            used_count=len(state.used),
            discarded_count=len(state.discarded),
            total_actions=len(self._entries),
        )
