"""
Pydantic models for the word drill.

These models describe the values exchanged with the external stores:
categories coming in, preset configurations and finished-session
records going out.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.constants import DEFAULT_REPEAT_WORDS, DEFAULT_TIMER_SECONDS


# ---- Categories ----

class Category(BaseModel):
    """A named, ordered sequence of distinct words."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    words: list[str] = Field(default_factory=list)
    owner_id: Optional[str] = None  # None for built-ins

    @property
    def is_builtin(self) -> bool:
        return self.owner_id is None

    def __len__(self) -> int:
        return len(self.words)


# ---- Presets ----

class PresetConfig(BaseModel):
    """
    Saved setup parameters.

    Serialized with camelCase keys. The legacy ``timer`` key is accepted
    on input so presets stored by older clients still load.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selected_categories: list[str] = Field(
        default_factory=list,
        alias="selectedCategories",
    )
    word_counts: dict[str, int] = Field(
        default_factory=dict,
        alias="wordCounts",
    )
    timer_seconds: int = Field(
        DEFAULT_TIMER_SECONDS,
        gt=0,
        validation_alias=AliasChoices("timerSeconds", "timer", "timer_seconds"),
        serialization_alias="timerSeconds",
    )
    repeat_words: bool = Field(DEFAULT_REPEAT_WORDS, alias="repeatWords")

    @field_validator("selected_categories")
    @classmethod
    def _dedupe_categories(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    @field_validator("word_counts")
    @classmethod
    def _check_counts(cls, value: dict[str, int]) -> dict[str, int]:
        for category_id, count in value.items():
            if count < 1:
                raise ValueError(f"word count for {category_id!r} must be >= 1, got {count}")
        return value


# ---- Session History ----

class SessionSummary(BaseModel):
    """Read-only aggregate computed once at session end."""
    model_config = ConfigDict(frozen=True)

    total_words: int
    used_count: int
    discarded_count: int
    total_actions: int


class SessionRecord(BaseModel):
    """Completed session handed to the history store."""
    summary: SessionSummary
    duration_seconds: int = Field(..., ge=0, alias="durationSeconds")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def words_used(self) -> int:
        return self.summary.used_count
