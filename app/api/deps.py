from typing import Generator
from sqlalchemy.orm import Session
from app.core.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.

    Borrows a connection from the pool for the duration of one request and
    returns it when the session closes, whether the handler succeeded or raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
