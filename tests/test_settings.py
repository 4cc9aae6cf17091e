import importlib

import pytest

from marketplace import config


@pytest.fixture()
def reload_config(monkeypatch):
    for name in ("DATABASE_URL", "POSTGRES_HOST", "GZIP_MINIMUM_SIZE", "CORS_ORIGINS", "LOG_LEVEL", "LOG_DIR", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    settings = reload_config()

    assert settings.DATABASE_URL == "sqlite:///./marketplace.db"
    assert settings.GZIP_MINIMUM_SIZE == 1000
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_DIR is None
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8000


def test_database_url_takes_precedence(monkeypatch, reload_config):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/other.db")
    monkeypatch.setenv("POSTGRES_HOST", "db")

    assert reload_config().DATABASE_URL == "sqlite:///tmp/other.db"


def test_postgres_url_built_from_parts(monkeypatch, reload_config):
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_USER", "shop")
    monkeypatch.setenv("POSTGRES_PASSWORD", "secret")
    monkeypatch.setenv("POSTGRES_PORT", "5433")
    monkeypatch.setenv("POSTGRES_DB", "marketplace")

    assert reload_config().DATABASE_URL == "postgresql://shop:secret@db:5433/marketplace"


def test_cors_origins_split(monkeypatch, reload_config):
    monkeypatch.setenv("CORS_ORIGINS", "https://shop.example.com, https://admin.example.com")

    assert reload_config().CORS_ORIGINS == ["https://shop.example.com", "https://admin.example.com"]


def test_server_and_logging_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_DIR", "/var/log/marketplace")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = reload_config()

    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 9001
    assert settings.LOG_DIR == "/var/log/marketplace"
    assert settings.LOG_LEVEL == "DEBUG"
