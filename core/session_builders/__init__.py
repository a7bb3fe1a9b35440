"""Word pool building for drill sessions."""

from core.session_builders.pool_types import DrawState, Selection, WordPool
from core.session_builders.pool_builder import (
    build_word_pool,
    clamp_word_count,
    index_categories,
    set_word_count,
    toggle_category,
)

__all__ = [
    "DrawState",
    "Selection",
    "WordPool",
    "build_word_pool",
    "clamp_word_count",
    "index_categories",
    "set_word_count",
    "toggle_category",
]
