"""
Preset Serializer

Converts setup parameters to and from a portable PresetConfig. Loading a
preset tolerates drift in the category store: deleted categories are
dropped and counts are clamped to what is left.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from core.constants import TIMER_MAX_SECONDS, TIMER_MIN_SECONDS
from core.errors import InvalidPreset
from core.schemas import PresetConfig
from core.session_builders.pool_builder import Categories, clamp_word_count, index_categories
from core.session_builders.pool_types import Selection

logger = logging.getLogger(__name__)


def serialize(selection: Selection, timer_seconds: int, repeat_words: bool) -> PresetConfig:
    """
    Build a preset from the current setup.

    Raises:
        InvalidPreset: a count below 1 or a non-positive timer
    """
    try:
        return PresetConfig(
            selected_categories=list(selection.keys()),
            word_counts=dict(selection),
            timer_seconds=timer_seconds,
            repeat_words=repeat_words,
        )
    except ValidationError as exc:
        raise InvalidPreset(str(exc)) from exc


def deserialize(config: PresetConfig, categories: Categories) -> Selection:
    """
    Rebuild a selection from a preset against the current categories.

    The result may be a strict subset of what was saved, possibly empty.
    """
    by_id = index_categories(categories)
    selection: Selection = {}
    for category_id in config.selected_categories:
        category = by_id.get(category_id)
        if category is None:
            logger.warning("Preset category %s no longer exists, dropping it", category_id)
            continue

        count = clamp_word_count(config.word_counts.get(category_id, 1), len(category.words))
        if count == 0:
            logger.warning("Preset category %s has no words, dropping it", category_id)
            continue
        selection[category_id] = count
    return selection


def preset_from_mapping(data: Mapping[str, Any]) -> PresetConfig:
    """
    Parse a stored preset mapping (camelCase keys, legacy ``timer`` accepted).

    Raises:
        InvalidPreset: the mapping does not describe a valid preset
    """
    try:
        return PresetConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise InvalidPreset(str(exc)) from exc


def preset_to_mapping(config: PresetConfig) -> dict[str, Any]:
    """Dump a preset to a JSON-ready mapping with camelCase keys."""
    return config.model_dump(mode="json", by_alias=True)


def clamp_timer_seconds(timer_seconds: int) -> int:
    """
    Fit a timer into the setup slider range.

    Presets may carry timers outside the range; callers should keep the
    stored value unless the user picks a new one.
    """
    return min(max(int(timer_seconds), TIMER_MIN_SECONDS), TIMER_MAX_SECONDS)
