"""
Word Pool Builder

Turns a selection of (category, count) pairs into the flat word pool for
one session:
- categories are walked in selection order
- each contributes the first `count` words of its word list
- counts are clamped to what the category currently holds

No shuffling happens here; the draw engine picks at random.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Union

from core.constants import DEFAULT_WORD_COUNT
from core.errors import EmptyPool, InvalidCategory
from core.schemas import Category
from core.session_builders.pool_types import Selection, WordPool

logger = logging.getLogger(__name__)

Categories = Union[Mapping[str, Category], Iterable[Category]]


def index_categories(categories: Categories) -> dict[str, Category]:
    """
    Normalize a category collection to an id -> Category mapping.
    """
    if isinstance(categories, Mapping):
        return dict(categories)
    return {category.id: category for category in categories}


def clamp_word_count(count: int, available: int) -> int:
    """
    Clamp a requested count to [1, available].

    Returns 0 only when the category has no words at all.
    """
    if available <= 0:
        return 0
    return max(1, min(int(count), available))


def build_word_pool(selection: Selection, categories: Categories) -> WordPool:
    """
    Build the word pool for a session.

    Args:
        selection: Category id -> requested count, in the order chosen
        categories: Current categories from the category store

    Returns:
        WordPool with repeats preserved verbatim

    Raises:
        EmptyPool: selection is empty or yields no words
        InvalidCategory: selection references an unknown category
    """
    if not selection:
        raise EmptyPool("Please select at least one category")

    by_id = index_categories(categories)
    words: list[str] = []
    for category_id, requested in selection.items():
        category = by_id.get(category_id)
        if category is None:
            raise InvalidCategory(category_id)

        count = clamp_word_count(requested, len(category.words))
        if count != requested:
            logger.warning(
                "Clamped %s from %d to %d words", category_id, requested, count
            )
        words.extend(category.words[:count])

    if not words:
        raise EmptyPool("No words available in selected categories")

    return WordPool(words=tuple(words))


# ---- Selection Editing ----

def toggle_category(selection: Selection, category: Category) -> Selection:
    """
    Add a category with its default count, or remove it if already selected.

    Categories without words cannot be selected and are left out.
    """
    updated = dict(selection)
    if category.id in updated:
        del updated[category.id]
    elif category.words:
        updated[category.id] = min(DEFAULT_WORD_COUNT, len(category.words))
    return updated


def set_word_count(selection: Selection, category: Category, count: int) -> Selection:
    """
    Set the requested count for a category, clamped to its size.
    """
    updated = dict(selection)
    updated[category.id] = clamp_word_count(count, len(category.words))
    return updated
