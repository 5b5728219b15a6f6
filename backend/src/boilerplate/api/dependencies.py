"""Request-scoped database session dependency."""

from typing import Generator

from sqlalchemy.orm import Session


def get_session() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session. Lazy-imports the engine so routers import without settings."""
    from boilerplate.db.engine import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
