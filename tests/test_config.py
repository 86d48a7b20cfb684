"""Tests for application configuration."""


def test_settings_defaults(tmp_path):
    """Verify default settings load without errors."""
    from app.config import Settings

    settings = Settings(db_path=str(tmp_path / "x.db"))
    assert settings.app_name == "Equipment Tracker API"
    assert settings.port == 5000
    assert settings.debug is False
    assert settings.cors_origins == ["*"]


def test_async_database_url_from_db_path():
    """Verify the SQLite file path becomes an aiosqlite URL."""
    from app.config import Settings

    settings = Settings(db_path="/var/lib/equipment/equipment.db", database_url=None)
    assert settings.async_database_url == "sqlite+aiosqlite:////var/lib/equipment/equipment.db"
    assert settings.sync_database_url == "sqlite:////var/lib/equipment/equipment.db"


def test_async_database_url_from_database_url():
    """Verify DATABASE_URL is converted to async format."""
    from app.config import Settings

    settings = Settings(database_url="sqlite:///data/equipment.db")
    assert settings.async_database_url == "sqlite+aiosqlite:///data/equipment.db"


def test_sync_database_url_from_async_database_url():
    """Alembic gets a plain sqlite URL even when an async one is configured."""
    from app.config import Settings

    settings = Settings(database_url="sqlite+aiosqlite:///data/equipment.db")
    assert settings.sync_database_url == "sqlite:///data/equipment.db"
    assert settings.async_database_url == "sqlite+aiosqlite:///data/equipment.db"


def test_settings_from_environment(monkeypatch):
    """Environment variables override defaults, case-insensitively."""
    from app.config import Settings

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DB_PATH", "/tmp/other.db")
    monkeypatch.delenv("DATABASE_URL", raising=False)

    settings = Settings()
    assert settings.port == 8080
    assert settings.db_path == "/tmp/other.db"
