"""
Environment configuration.

Values come from the process environment, optionally seeded from a .env
file in the working directory.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///word_drill.db"
PROD_DB_NAME = "word_drill"
TEST_DB_NAME = "test_word_drill"
MEMORY_DATABASE_URLS = ("sqlite://", "sqlite:///:memory:")


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    Falls back to a local sqlite file. In TEST_MODE the database name is
    swapped for its test counterpart: sqlite files get a ``test_`` prefix,
    server URLs have ``word_drill`` replaced with ``test_word_drill``.
    In-memory sqlite URLs are returned unchanged.

    Returns:
        SQLAlchemy connection URL
    """
    base_url = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL
    if not is_test_mode():
        return base_url

    if base_url in MEMORY_DATABASE_URLS:
        return base_url

    if base_url.startswith("sqlite:///"):
        head, _, filename = base_url.rpartition("/")
        if filename and not filename.startswith("test_"):
            return f"{head}/test_{filename}"
        return base_url

    if TEST_DB_NAME in base_url:
        return base_url
    return base_url.replace(PROD_DB_NAME, TEST_DB_NAME)


def get_default_user_id() -> str:
    """Get default owner id for categories, presets and history."""
    return os.getenv("DEFAULT_USER_ID", "guest")
