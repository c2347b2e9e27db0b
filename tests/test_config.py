import pytest
from pydantic import ValidationError
from sqlalchemy.engine import make_url

from userhub.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings(_env_file=None)
    assert s.HTTP_PORT == 8080
    assert s.GRPC_PORT == 9090
    assert s.REDIS_DB == 0
    assert s.redis_url == "redis://localhost:6379/0"

    url = make_url(s.database_url)
    assert url.drivername == "postgresql+asyncpg"
    assert (url.host, url.port, url.database) == ("localhost", 5432, "hexagonal_app")
    assert url.query["ssl"] == "disable"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_USER", "svc")
    monkeypatch.setenv("DB_PASSWORD", "p@ss/word")
    monkeypatch.setenv("DB_SSLMODE", "require")
    monkeypatch.setenv("REDIS_PASSWORD", "s3cr:t")
    monkeypatch.setenv("REDIS_DB", "2")

    s = Settings(_env_file=None)
    url = make_url(s.database_url)
    assert (url.host, url.port, url.username, url.password) == ("db.internal", 6543, "svc", "p@ss/word")
    assert url.query["ssl"] == "require"
    assert s.redis_url == "redis://:s3cr%3At@localhost:6379/2"


def test_database_url_override_wins(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///:memory:"


def test_invalid_port_is_rejected(monkeypatch):
    monkeypatch.setenv("DB_PORT", "not-a-number")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
