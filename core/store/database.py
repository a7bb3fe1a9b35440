"""
Database - engine and session factory for the stores.

Handles connection setup and schema creation only; each store module
owns its own queries.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import MEMORY_DATABASE_URLS, get_database_url
from core.store.models import Base


def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Get SQLAlchemy engine for database connection.

    In-memory sqlite shares a single connection so every session sees the
    same tables; other sqlite URLs allow cross-thread use for Streamlit.

    Returns:
        SQLAlchemy Engine instance
    """
    db_url = db_url or get_database_url()
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if db_url in MEMORY_DATABASE_URLS:
            kwargs["poolclass"] = StaticPool
        return create_engine(db_url, echo=False, **kwargs)

    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """
    Create tables that don't exist yet. Safe to call repeatedly.
    """
    existing_tables = set(inspect(engine).get_table_names())
    if not set(Base.metadata.tables).issubset(existing_tables):
        Base.metadata.create_all(engine)


def reset_db(engine: Engine) -> None:
    """
    DANGEROUS: Delete all stored categories, presets and history.
    """
    Base.metadata.drop_all(engine)
    init_db(engine)