import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from app.core import database
from app.core.exceptions import ConflictException
from app.main import app
from app.schemas.student import StudentCreate
from app.services.student import student as crud_student


@pytest.fixture
def fresh_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'students.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def unreachable_engine(tmp_path):
    # Parent directory does not exist, so SQLite cannot open the file
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'students.db'}")
    yield engine
    engine.dispose()


def test_check_database_connection_succeeds(monkeypatch, fresh_engine):
    monkeypatch.setattr(database, "engine", fresh_engine)

    assert database.check_database_connection() is True


def test_check_database_connection_reports_failure(monkeypatch, unreachable_engine, caplog):
    monkeypatch.setattr(database, "engine", unreachable_engine)

    assert database.check_database_connection() is False
    assert "Database connection error" in caplog.text


def test_init_db_creates_table_idempotently(monkeypatch, fresh_engine):
    monkeypatch.setattr(database, "engine", fresh_engine)

    assert database.init_db() is True
    assert database.init_db() is True

    inspector = inspect(fresh_engine)
    assert inspector.has_table("students")
    columns = {c["name"] for c in inspector.get_columns("students")}
    assert columns == {"id", "name", "age", "rollnumber", "city", "created_at"}


def test_init_db_fails_when_unreachable(monkeypatch, unreachable_engine):
    monkeypatch.setattr(database, "engine", unreachable_engine)

    assert database.init_db() is False


def test_startup_aborts_without_database(monkeypatch):
    monkeypatch.setattr("app.main.init_db", lambda: False)

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def test_startup_with_database(monkeypatch):
    monkeypatch.setattr("app.main.init_db", lambda: True)

    with TestClient(app) as client:
        assert client.get("/").status_code == 200


def test_unique_violation_in_service(session_factory):
    payload = StudentCreate(name="Ravi", age=19, rollnumber="R010", city="Goa")
    with session_factory() as db:
        crud_student.create_student(db, payload)

    with session_factory() as db:
        with pytest.raises(ConflictException):
            crud_student.create_student(db, payload)
        assert len(crud_student.get_students(db)) == 1
