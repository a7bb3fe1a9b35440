"""
Session Controller

One drill session as a single state machine over
{setup, playing, paused, finished}. The controller owns the draw engine,
the timer and the recorder; every mutating call runs under one lock and
goes through `transition()`, which keeps the timer in lockstep with the
phase (the timer only runs while playing).

Timer expiry is processed only between operations: `tick()` and the word
actions share the same lock, so a draw can never interleave with expiry.
"""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from core.constants import DEFAULT_REPEAT_WORDS, DEFAULT_TIMER_SECONDS
from core.draw_engine import DrawEngine
from core.errors import InvalidTransition, NotLoaded
from core.presets import deserialize, serialize
from core.schemas import PresetConfig, SessionRecord, SessionSummary
from core.session_builders.pool_builder import Categories, build_word_pool
from core.session_builders.pool_types import Selection
from core.session_recorder import SessionRecorder
from core.session_timer import SessionTimer

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    SETUP = "setup"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


class SessionEvent(str, Enum):
    START = "start"      # Begin (or play again) with the configured setup
    PAUSE = "pause"
    RESUME = "resume"
    EXPIRE = "expire"    # Timer reached zero
    EXHAUST = "exhaust"  # Pool ran out with repeat disabled
    FINISH = "finish"    # User ended the session early
    RESET = "reset"      # Back to setup, pool dropped


_TRANSITIONS: dict[tuple[SessionPhase, SessionEvent], SessionPhase] = {
    (SessionPhase.SETUP, SessionEvent.START): SessionPhase.PLAYING,
    (SessionPhase.SETUP, SessionEvent.RESET): SessionPhase.SETUP,
    (SessionPhase.PLAYING, SessionEvent.PAUSE): SessionPhase.PAUSED,
    (SessionPhase.PLAYING, SessionEvent.EXPIRE): SessionPhase.FINISHED,
    (SessionPhase.PLAYING, SessionEvent.EXHAUST): SessionPhase.FINISHED,
    (SessionPhase.PLAYING, SessionEvent.FINISH): SessionPhase.FINISHED,
    (SessionPhase.PLAYING, SessionEvent.RESET): SessionPhase.SETUP,
    (SessionPhase.PAUSED, SessionEvent.RESUME): SessionPhase.PLAYING,
    (SessionPhase.PAUSED, SessionEvent.FINISH): SessionPhase.FINISHED,
    (SessionPhase.PAUSED, SessionEvent.RESET): SessionPhase.SETUP,
    (SessionPhase.FINISHED, SessionEvent.START): SessionPhase.PLAYING,
    (SessionPhase.FINISHED, SessionEvent.RESET): SessionPhase.SETUP,
}


def transition(phase: SessionPhase, event: SessionEvent) -> SessionPhase:
    """
    Next phase for an event.

    Raises:
        InvalidTransition: the event is not legal in this phase
    """
    try:
        return _TRANSITIONS[(phase, event)]
    except KeyError:
        raise InvalidTransition(f"Cannot {event.value} while {phase.value}") from None


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything the presentation layer needs to render one frame.
    """
    phase: SessionPhase
    current_word: Optional[str]
    remaining_seconds: int
    timer_seconds: int
    repeat_words: bool
    total_words: int
    used_count: int
    discarded_count: int
    available_count: int
    action_count: int


class DrillSession:
    """
    Single-owner controller for one user's drill session.

    Args:
        rng: Random source handed to each draw engine
        clock: Timestamp source for history entries and records
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self.phase = SessionPhase.SETUP
        self.selection: Selection = {}
        self.timer_seconds = DEFAULT_TIMER_SECONDS
        self.repeat_words = DEFAULT_REPEAT_WORDS

        self.recorder = SessionRecorder()
        self.engine = self._new_engine()
        self.timer = self._new_timer()

    # ---- Setup ----

    def configure(
        self,
        selection: Optional[Selection] = None,
        timer_seconds: Optional[int] = None,
        repeat_words: Optional[bool] = None,
    ) -> SessionSnapshot:
        """
        Update setup parameters. Only allowed in setup.
        """
        with self._lock:
            self._expect_phase(SessionPhase.SETUP, action="configure")
            if timer_seconds is not None and int(timer_seconds) <= 0:
                raise ValueError(f"Timer must be positive, got {timer_seconds}")

            if selection is not None:
                self.selection = dict(selection)
            if timer_seconds is not None:
                self.timer_seconds = int(timer_seconds)
                self.timer.reset(self.timer_seconds)
            if repeat_words is not None:
                self.repeat_words = bool(repeat_words)
            return self.snapshot()

    def apply_preset(self, config: PresetConfig, categories: Categories) -> SessionSnapshot:
        """
        Load a preset into setup, dropping categories that no longer exist.
        """
        selection = deserialize(config, categories)
        return self.configure(
            selection=selection,
            timer_seconds=config.timer_seconds,
            repeat_words=config.repeat_words,
        )

    def to_preset(self) -> PresetConfig:
        with self._lock:
            return serialize(self.selection, self.timer_seconds, self.repeat_words)

    # ---- Lifecycle ----

    def start(self, categories: Categories) -> SessionSnapshot:
        """
        Build the pool and begin playing; also used to play again.

        Raises:
            EmptyPool / InvalidCategory: setup stays untouched
        """
        with self._lock:
            transition(self.phase, SessionEvent.START)
            pool = build_word_pool(self.selection, categories)

            self.recorder = SessionRecorder()
            self.engine = self._new_engine()
            self.engine.load(pool)
            self.timer = self._new_timer()

            self._apply(SessionEvent.START)
            logger.info(
                "Session started: %d words, %ds, repeat=%s",
                len(pool), self.timer_seconds, self.repeat_words,
            )
            self.engine.draw()
            return self.snapshot()

    def pause(self) -> SessionSnapshot:
        with self._lock:
            self._apply(SessionEvent.PAUSE)
            return self.snapshot()

    def resume(self) -> SessionSnapshot:
        with self._lock:
            self._apply(SessionEvent.RESUME)
            return self.snapshot()

    def toggle_pause(self) -> SessionSnapshot:
        with self._lock:
            if self.phase == SessionPhase.PAUSED:
                return self.resume()
            return self.pause()

    def finish(self) -> SessionSnapshot:
        """End the session early."""
        with self._lock:
            self._apply(SessionEvent.FINISH)
            return self.snapshot()

    def reset(self) -> SessionSnapshot:
        """Return to setup, keeping the setup parameters."""
        with self._lock:
            self._apply(SessionEvent.RESET)
            return self.snapshot()

    def tick(self) -> SessionSnapshot:
        """
        Account for one elapsed second. Ignored unless playing.
        """
        with self._lock:
            if self.phase == SessionPhase.PLAYING:
                self.timer.tick()
            return self.snapshot()

    # ---- Word actions ----

    def draw(self) -> SessionSnapshot:
        """Skip to a new word."""
        with self._lock:
            self._expect_phase(SessionPhase.PLAYING, action="draw")
            self.engine.draw()
            return self._after_word_action()

    def discard(self) -> SessionSnapshot:
        with self._lock:
            self._expect_phase(SessionPhase.PLAYING, action="discard")
            self.engine.discard()
            return self._after_word_action()

    def return_to_pool(self) -> SessionSnapshot:
        with self._lock:
            self._expect_phase(SessionPhase.PLAYING, action="return")
            self.engine.return_to_pool()
            return self._after_word_action()

    # ---- Results ----

    def summary(self) -> SessionSummary:
        with self._lock:
            state = self.engine.state
            if state is None:
                raise NotLoaded("No session has been started")
            return self.recorder.summarize(state)

    def to_record(self, created_at: Optional[datetime] = None) -> SessionRecord:
        """
        Build the history record for a finished session.
        """
        with self._lock:
            self._expect_phase(SessionPhase.FINISHED, action="record")
            return SessionRecord(
                summary=self.summary(),
                duration_seconds=self.timer.elapsed,
                created_at=created_at or self._clock(),
            )

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            state = self.engine.state
            return SessionSnapshot(
                phase=self.phase,
                current_word=self.engine.current_word,
                remaining_seconds=self.timer.remaining,
                timer_seconds=self.timer_seconds,
                repeat_words=self.repeat_words,
                total_words=len(state.pool) if state else 0,
                used_count=len(state.used) if state else 0,
                discarded_count=len(state.discarded) if state else 0,
                available_count=len(state.available) if state else 0,
                action_count=len(self.recorder),
            )

    # ---- Internals ----

    def _apply(self, event: SessionEvent) -> None:
        """
        Apply one event: move the phase and drive the timer to match.
        """
        previous = self.phase
        self.phase = transition(previous, event)

        if event == SessionEvent.START:
            self.timer.start()
        elif event == SessionEvent.PAUSE:
            self.timer.pause()
        elif event == SessionEvent.RESUME:
            self.timer.resume()
        elif event in (SessionEvent.EXHAUST, SessionEvent.FINISH):
            if self.timer.running:
                self.timer.pause()
        elif event == SessionEvent.RESET:
            self.engine.reset()
            self.recorder = SessionRecorder()
            self.engine.recorder = self.recorder
            self.timer = self._new_timer()

        if self.phase == SessionPhase.FINISHED:
            logger.info(
                "Session finished (%s) after %ds, %d actions",
                event.value, self.timer.elapsed, len(self.recorder),
            )

    def _after_word_action(self) -> SessionSnapshot:
        if self.engine.exhausted:
            self._apply(SessionEvent.EXHAUST)
        return self.snapshot()

    def _on_timer_expired(self) -> None:
        if self.phase == SessionPhase.PLAYING:
            self._apply(SessionEvent.EXPIRE)

    def _expect_phase(self, phase: SessionPhase, action: str) -> None:
        if self.phase != phase:
            raise InvalidTransition(f"Cannot {action} while {self.phase.value}")

    def _new_engine(self) -> DrawEngine:
        return DrawEngine(
            repeat_words=self.repeat_words,
            recorder=self.recorder,
            rng=self._rng,
            clock=self._clock,
        )

    def _new_timer(self) -> SessionTimer:
        timer = SessionTimer(self.timer_seconds)
        timer.subscribe(self._on_timer_expired)
        return timer
