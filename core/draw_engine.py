"""
Draw Engine

Tracks which pool occurrences are available, used or discarded, and
picks the next word to put on display.

Status flow:
    idle -> ready (load) -> drawing -> ... -> exhausted (repeat off)
    any  -> idle (reset)

Every action appends a HistoryEntry to the session recorder.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from core.constants import ActionType, DEFAULT_REPEAT_WORDS
from core.errors import EmptyPool, NoCurrentWord, NotLoaded, PoolExhausted
from core.session_builders.pool_types import DrawState, WordPool
from core.session_recorder import HistoryEntry, SessionRecorder

logger = logging.getLogger(__name__)


class EngineStatus(str, Enum):
    """Lifecycle of the draw engine."""
    IDLE = "idle"            # No pool loaded
    READY = "ready"          # Pool loaded, nothing drawn yet
    DRAWING = "drawing"      # At least one draw made
    EXHAUSTED = "exhausted"  # Pool ran out with repeat disabled


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DrawEngine:
    """
    Word selection state machine for one session.

    Args:
        repeat_words: Reset the pool instead of ending when it runs out
        recorder: Session log that receives every action
        rng: Random source (seed it for reproducible draws)
        clock: Timestamp source for history entries
    """

    def __init__(
        self,
        repeat_words: bool = DEFAULT_REPEAT_WORDS,
        recorder: Optional[SessionRecorder] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.repeat_words = repeat_words
        self.recorder = recorder if recorder is not None else SessionRecorder()
        self._rng = rng or random.Random()
        self._clock = clock or _utc_now
        self._state: Optional[DrawState] = None
        self.status = EngineStatus.IDLE

    # ---- Read-only views ----

    @property
    def state(self) -> Optional[DrawState]:
        return self._state

    @property
    def pool(self) -> Optional[WordPool]:
        return self._state.pool if self._state else None

    @property
    def current_word(self) -> Optional[str]:
        return self._state.current_word if self._state else None

    @property
    def exhausted(self) -> bool:
        return self.status == EngineStatus.EXHAUSTED

    # ---- Operations ----

    def load(self, pool: WordPool) -> None:
        """
        Load a pool; every occurrence becomes available and nothing is current.
        """
        if len(pool) == 0:
            raise EmptyPool("Cannot load an empty pool")
        self._state = DrawState(pool=pool)
        self.status = EngineStatus.READY
        logger.debug("Loaded pool of %d words", len(pool))

    def reset(self) -> None:
        """Drop the loaded pool and return to idle."""
        self._state = None
        self.status = EngineStatus.IDLE

    def draw(self) -> Optional[str]:
        """
        Put a new word on display.

        Picks uniformly among available occurrences and marks it used. When
        nothing is available and repeat is enabled, the pool is reset and a
        word is picked from the whole pool without marking it used, so the
        next draw still sees the complete pool. With repeat disabled the
        engine becomes exhausted and None is returned.

        Returns:
            The word now on display, or None on exhaustion

        Raises:
            NotLoaded: no pool loaded
            PoolExhausted: exhaustion was already signalled
        """
        state = self._require_state()
        if self.status == EngineStatus.EXHAUSTED:
            raise PoolExhausted("All words have been used")

        available = state.available
        if available:
            occurrence = self._rng.choice(available)
            state.move_to(occurrence, "used")
        elif self.repeat_words:
            # Shown but not marked used; the next draw sees the full pool
            state.clear()
            occurrence = self._rng.randrange(len(state.pool))
            logger.debug("Pool exhausted, reset for repeat")
        else:
            state.current = None
            self.status = EngineStatus.EXHAUSTED
            logger.info("Pool exhausted after %d actions", len(self.recorder))
            return None

        state.current = occurrence
        self.status = EngineStatus.DRAWING
        self._record(occurrence, ActionType.DRAWN)
        return state.pool[occurrence]

    def discard(self) -> Optional[str]:
        """
        Remove the current word from play, then draw the next one.
        """
        state = self._require_current()
        occurrence = state.current
        state.move_to(occurrence, "discarded")
        self._record(occurrence, ActionType.DISCARDED)
        state.current = None
        return self.draw()

    def return_to_pool(self) -> Optional[str]:
        """
        Put the current word back among the available ones, then draw.
        """
        state = self._require_current()
        occurrence = state.current
        state.move_to(occurrence, "available")
        self._record(occurrence, ActionType.RETURNED)
        state.current = None
        return self.draw()

    # ---- Helpers ----

    def _require_state(self) -> DrawState:
        if self._state is None:
            raise NotLoaded("Draw engine has no pool loaded")
        return self._state

    def _require_current(self) -> DrawState:
        state = self._require_state()
        if state.current is None:
            raise NoCurrentWord("No word is currently on display")
        return state

    def _record(self, occurrence: int, action: ActionType) -> None:
        self.recorder.record(HistoryEntry(
            word=self._state.pool[occurrence],
            timestamp=self._clock(),
            action=action,
            occurrence=occurrence,
        ))
