import random
from datetime import datetime, timedelta, timezone

import pytest

from core.schemas import Category
from core.store import get_engine, open_store_context


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        value = self.now
        self.now += timedelta(seconds=1)
        return value


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def categories():
    return [
        Category(id="nouns", name="Nouns", words=["apple", "book", "car", "dog"]),
        Category(id="verbs", name="Verbs", words=["run", "jump"]),
        Category(id="mixed", name="Mixed", words=["apple", "run", "blue"]),
        Category(id="empty", name="Empty", words=[]),
    ]


@pytest.fixture
def stores():
    engine = get_engine("sqlite://")
    context = open_store_context(engine)
    yield context
    engine.dispose()
