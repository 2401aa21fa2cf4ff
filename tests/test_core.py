import pytest

from app.core import database
from app.core.config import Settings, settings
from app.core.exceptions import (
    BadRequestException,
    ConflictException,
    DatabaseException,
    NotFoundException,
)


@pytest.mark.parametrize("raw", ["info", " Info ", "INFO"])
def test_log_level_is_upper_cased(raw):
    assert Settings(LOG_LEVEL=raw).LOG_LEVEL == "INFO"


def test_postgres_scheme_is_normalized():
    config = Settings(DB_CONNECTION="postgres://u:p@db.example.com:5432/school")

    assert config.DB_CONNECTION == "postgresql://u:p@db.example.com:5432/school"
    assert config.is_postgres()


def test_postgres_engine_options(monkeypatch):
    monkeypatch.setattr(settings, "DB_CONNECTION", "postgresql://u:p@localhost/school")
    monkeypatch.setattr(settings, "DB_ECHO_SQL", True)

    options = database.build_engine_options()

    assert options["pool_size"] == settings.DB_POOL_SIZE
    assert options["pool_pre_ping"] is True
    assert options["echo_pool"] is True
    assert options["connect_args"]["sslmode"] == "require"


def test_sqlite_engine_options(monkeypatch):
    monkeypatch.setattr(settings, "DB_CONNECTION", "sqlite://")
    monkeypatch.setattr(settings, "DB_ECHO_SQL", False)

    options = database.build_engine_options()

    assert "pool_size" not in options
    assert options["echo_pool"] is False


@pytest.mark.parametrize(
    "exc,status_code",
    [
        (BadRequestException("x"), 400),
        (NotFoundException("x"), 404),
        (ConflictException("x"), 409),
        (DatabaseException("x"), 500),
    ],
)
def test_exceptions_carry_status_and_message(exc, status_code):
    assert exc.status_code == status_code
    assert exc.message == "x"
    assert vars(exc) == {"message": "x", "status_code": status_code}
