"""
Session Timer

Countdown in whole seconds that gates the playing phase. The timer never
touches draw state; on reaching zero it only notifies its subscribers.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from core.errors import InvalidTransition


class TimerStatus(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


ExpiryListener = Callable[[], None]


class SessionTimer:
    """
    Pausable countdown driven by one tick per elapsed second.
    """

    def __init__(self, duration_seconds: int) -> None:
        self._validate(duration_seconds)
        self.duration = int(duration_seconds)
        self.remaining = self.duration
        self.status = TimerStatus.STOPPED
        self._listeners: list[ExpiryListener] = []

    @staticmethod
    def _validate(duration_seconds: int) -> None:
        if int(duration_seconds) <= 0:
            raise ValueError(f"Timer duration must be positive, got {duration_seconds}")

    @property
    def elapsed(self) -> int:
        return self.duration - self.remaining

    @property
    def running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    @property
    def expired(self) -> bool:
        return self.status == TimerStatus.EXPIRED

    def subscribe(self, listener: ExpiryListener) -> None:
        """Register a callback fired once when the countdown reaches zero."""
        self._listeners.append(listener)

    def start(self) -> None:
        self._expect(TimerStatus.STOPPED, "start")
        self.status = TimerStatus.RUNNING

    def pause(self) -> None:
        self._expect(TimerStatus.RUNNING, "pause")
        self.status = TimerStatus.PAUSED

    def resume(self) -> None:
        self._expect(TimerStatus.PAUSED, "resume")
        self.status = TimerStatus.RUNNING

    def reset(self, duration_seconds: int | None = None) -> None:
        """
        Stop the timer and rewind it, optionally with a new duration.
        """
        if duration_seconds is not None:
            self._validate(duration_seconds)
            self.duration = int(duration_seconds)
        self.remaining = self.duration
        self.status = TimerStatus.STOPPED

    def tick(self) -> bool:
        """
        Account for one elapsed second.

        Ticks outside the running state are ignored.

        Returns:
            True if this tick expired the timer
        """
        if self.status != TimerStatus.RUNNING:
            return False

        self.remaining = max(0, self.remaining - 1)
        if self.remaining > 0:
            return False

        self.status = TimerStatus.EXPIRED
        for listener in list(self._listeners):
            listener()
        return True

    def _expect(self, status: TimerStatus, action: str) -> None:
        if self.status != status:
            raise InvalidTransition(f"Cannot {action} timer while {self.status.value}")
