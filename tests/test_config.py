import pytest
from pydantic import ValidationError

from shared.core.config import Settings, get_database_url


def test_jwt_secret_is_required(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_jwt_secret_from_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")

    assert Settings(_env_file=None).JWT_SECRET == "from-env"


def test_database_url_override_wins(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "x")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./inventory.db")

    assert get_database_url(Settings(_env_file=None)) == "sqlite:///./inventory.db"


def test_database_url_from_parts():
    config = Settings(_env_file=None, JWT_SECRET="x", DATABASE_URL=None,
                      DB_USER="inv", DB_PASS="pw",
                      DB_HOST="db", DB_PORT="5432", DB_NAME="inventory")

    assert get_database_url(config) == "postgresql+psycopg2://inv:pw@db:5432/inventory"
