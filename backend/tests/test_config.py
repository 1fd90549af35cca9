"""Settings — environment-driven configuration."""

from contact_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("GEOCODING_URL", raising=False)
    monkeypatch.delenv("GEOCODING_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.geocoding_url == "https://api-ninjas.com/api/geocoding"
    assert settings.geocoding_api_key is None


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert Settings(_env_file=None).port == 9090


def test_postgres_url_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://user:pw@db:5432/contacts")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://user:pw@db:5432/contacts"


def test_sqlite_url_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///:memory:"
