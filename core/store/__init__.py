"""
Persistence collaborators for the drill core.

`open_store_context()` bundles the three stores over one engine so the
app can hand a single object around instead of module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from core.store.category_repo import CategoryStore, parse_word_list
from core.store.database import get_engine, init_db, make_session_factory, reset_db
from core.store.history_repo import HistoryStore
from core.store.preset_repo import PresetStore


@dataclass(frozen=True)
class StoreContext:
    """The stores a drill app talks to."""
    categories: CategoryStore
    presets: PresetStore
    history: HistoryStore


def open_store_context(engine: Optional[Engine] = None) -> StoreContext:
    """
    Build all stores over one engine, creating tables if needed.
    """
    engine = engine or get_engine()
    init_db(engine)
    factory = make_session_factory(engine)
    return StoreContext(
        categories=CategoryStore(factory),
        presets=PresetStore(factory),
        history=HistoryStore(factory),
    )


__all__ = [
    "StoreContext",
    "open_store_context",
    "CategoryStore",
    "PresetStore",
    "HistoryStore",
    "parse_word_list",
    "get_engine",
    "init_db",
    "reset_db",
]
