"""
SQLAlchemy ORM models for word drill persistence.

Custom categories and their words, named presets and completed-session
history. Built-in categories are never stored.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CategoryRow(Base):
    """
    A user-defined category. Words live in category_words.
    """
    __tablename__ = 'categories'

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<CategoryRow({self.id}, {self.name!r}, owner={self.owner_id})>"


class CategoryWordRow(Base):
    """
    One word of a category; position keeps append order.
    """
    __tablename__ = 'category_words'

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(String(64), ForeignKey('categories.id'), nullable=False, index=True)
    owner_id = Column(String(255), nullable=False)
    word = Column(String(255), nullable=False)
    position = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<CategoryWordRow({self.category_id}, #{self.position} {self.word!r})>"


class PresetRow(Base):
    """
    A named setup configuration, stored as its camelCase mapping.
    """
    __tablename__ = 'presets'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    config = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<PresetRow(id={self.id}, {self.name!r})>"


class GameHistoryRow(Base):
    """
    Summary of one completed session.
    """
    __tablename__ = 'game_history'

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)

    # Summary counters
    total_words = Column(Integer, nullable=False)
    words_used = Column(Integer, nullable=False)
    words_discarded = Column(Integer, nullable=False)
    total_actions = Column(Integer, nullable=False)

    duration = Column(Integer, nullable=False)  # Elapsed timer seconds
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<GameHistoryRow(id={self.id}, used={self.words_used}, duration={self.duration})>"
