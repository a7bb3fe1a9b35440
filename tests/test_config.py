import pytest

from core import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATABASE_URL", "TEST_MODE", "DEFAULT_USER_ID"):
        monkeypatch.delenv(name, raising=False)


def test_default_database_url():
    assert config.get_database_url() == "sqlite:///word_drill.db"


def test_test_mode_prefixes_sqlite_file(monkeypatch):
    monkeypatch.setenv("TEST_MODE", "true")
    assert config.get_database_url() == "sqlite:///test_word_drill.db"

    monkeypatch.setenv("DATABASE_URL", "sqlite:///data/test_drill.db")
    assert config.get_database_url() == "sqlite:///data/test_drill.db"


def test_test_mode_swaps_server_database(monkeypatch):
    monkeypatch.setenv("TEST_MODE", "TRUE")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/word_drill")
    assert config.get_database_url() == "postgresql://u:p@host/test_word_drill"

    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/test_word_drill")
    assert config.get_database_url() == "postgresql://u:p@host/test_word_drill"


def test_production_url_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host/word_drill")
    assert config.get_database_url() == "postgresql://u:p@host/word_drill"
    assert not config.is_test_mode()


def test_default_user_id(monkeypatch):
    assert config.get_default_user_id() == "guest"
    monkeypatch.setenv("DEFAULT_USER_ID", "alice")
    assert config.get_default_user_id() == "alice"


@pytest.mark.parametrize("url", ["sqlite://", "sqlite:///:memory:"])
def test_test_mode_keeps_in_memory_sqlite(monkeypatch, url):
    monkeypatch.setenv("TEST_MODE", "true")
    monkeypatch.setenv("DATABASE_URL", url)
    assert config.get_database_url() == url
