"""
Category/Word store.

Built-in categories come from constants and are always listed first;
user-defined categories are stored per owner and only that owner may add
words to them.
"""

from __future__ import annotations

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from core.constants import BUILTIN_CATEGORIES, BUILTIN_CATEGORY_PREFIX
from core.errors import CategoryNotOwned, InvalidCategory
from core.schemas import Category
from core.store.models import CategoryRow, CategoryWordRow

logger = logging.getLogger(__name__)

_WORD_SEPARATORS = re.compile(r"[,\n]")


def builtin_categories() -> list[Category]:
    return [Category(**data) for data in BUILTIN_CATEGORIES]


def parse_word_list(text: str) -> list[str]:
    """
    Split comma- or newline-separated input into trimmed, non-empty words.
    """
    return [word.strip() for word in _WORD_SEPARATORS.split(text or "") if word.strip()]


class CategoryStore:
    """Read/write access to categories for one database."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_categories(self, owner_id: str | None) -> list[Category]:
        """
        Built-ins followed by the owner's categories in creation order.
        """
        categories = builtin_categories()
        if owner_id is None:
            return categories

        session = self._session_factory()
        try:
            rows = session.query(CategoryRow).filter(
                CategoryRow.owner_id == owner_id
            ).order_by(CategoryRow.created_at, CategoryRow.id).all()

            for row in rows:
                words = session.query(CategoryWordRow.word).filter(
                    CategoryWordRow.category_id == row.id
                ).order_by(CategoryWordRow.position).all()
                categories.append(Category(
                    id=row.id,
                    name=row.name,
                    words=[w.word for w in words],
                    owner_id=row.owner_id,
                ))
            return categories
        finally:
            session.close()

    def create_category(self, owner_id: str, name: str) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValueError("Category name must not be empty")

        session = self._session_factory()
        try:
            row = CategoryRow(
                id=str(uuid.uuid4()),
                owner_id=owner_id,
                name=name,
                created_at=datetime.now(timezone.utc),
            )
            session.add(row)
            session.commit()
            logger.info("Created category %s (%r) for %s", row.id, name, owner_id)
            return Category(id=row.id, name=row.name, words=[], owner_id=owner_id)
        finally:
            session.close()

    def add_words(self, owner_id: str, category_id: str, words: Iterable[str]) -> list[str]:
        """
        Append words to an owned category.

        Words are trimmed; blanks and words already in the category are
        skipped. Returns the words actually added, in order.

        Raises:
            CategoryNotOwned: built-in category or another user's category
            InvalidCategory: unknown category id
        """
        if category_id.startswith(BUILTIN_CATEGORY_PREFIX):
            raise CategoryNotOwned(f"Built-in category {category_id} is read-only")

        session = self._session_factory()
        try:
            row = session.get(CategoryRow, category_id)
            if row is None:
                raise InvalidCategory(category_id)
            if row.owner_id != owner_id:
                raise CategoryNotOwned(f"Category {category_id} belongs to another user")

            existing = {
                w.word for w in session.query(CategoryWordRow.word).filter(
                    CategoryWordRow.category_id == category_id
                ).all()
            }
            next_position = session.query(
                func.coalesce(func.max(CategoryWordRow.position), -1)
            ).filter(CategoryWordRow.category_id == category_id).scalar() + 1

            added: list[str] = []
            for word in (w.strip() for w in words):
                if not word or word in existing:
                    continue
                session.add(CategoryWordRow(
                    category_id=category_id,
                    owner_id=owner_id,
                    word=word,
                    position=next_position,
                ))
                existing.add(word)
                added.append(word)
                next_position += 1

            session.commit()
            logger.info("Added %d words to category %s", len(added), category_id)
            return added
        finally:
            session.close()
