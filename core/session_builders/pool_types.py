"""
Typed pool models shared by the pool builder and the draw engine.

Occurrences are identified by their index in the pool, never by word
value, so duplicate words drawn from overlapping categories stay
independent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional


# Category id -> requested word count, in insertion order
Selection = dict[str, int]

Partition = Literal["available", "used", "discarded"]


@dataclass(frozen=True)
class WordPool:
    """
    Ordered, possibly-repeating word sequence for one session.
    """
    words: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, occurrence: int) -> str:
        return self.words[occurrence]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    @property
    def occurrences(self) -> range:
        return range(len(self.words))


@dataclass
class DrawState:
    """
    Partition of the pool's occurrences plus the one on display.

    ``available`` is derived, so available + used + discarded always
    covers every occurrence exactly once.
    """
    pool: WordPool
    used: set[int] = field(default_factory=set)
    discarded: set[int] = field(default_factory=set)
    current: Optional[int] = None

    @property
    def available(self) -> list[int]:
        return [
            i for i in self.pool.occurrences
            if i not in self.used and i not in self.discarded
        ]

    @property
    def current_word(self) -> Optional[str]:
        if self.current is None:
            return None
        return self.pool[self.current]

    def move_to(self, occurrence: int, target: Partition) -> None:
        """
        Move an occurrence to the target partition, removing it from others.
        """
        self.used.discard(occurrence)
        self.discarded.discard(occurrence)

        if target == "used":
            self.used.add(occurrence)
        elif target == "discarded":
            self.discarded.add(occurrence)

    def clear(self) -> None:
        """Make every occurrence available again."""
        self.used.clear()
        self.discarded.clear()
