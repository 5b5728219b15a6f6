"""Engine factory for SQLite (development, tests) and PostgreSQL (production).

SQLite connections get foreign keys and a busy timeout on every connect.
PostgreSQL connections get pre-ping and bounded pool sizing.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from boilerplate.config import Settings, get_settings


def _set_sqlite_pragmas(dbapi_connection, connection_record):
    """Set SQLite PRAGMAs on every new connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """Create a SQLAlchemy engine from settings.

    - SQLite: check_same_thread disabled (FastAPI runs sync endpoints in a
      threadpool), PRAGMA listener attached
    - Anything else: pre-ping, 100 open / 10 idle connections, hourly recycle
    """
    settings = settings or get_settings()

    if settings.is_sqlite:
        engine = create_engine(
            settings.database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )
        event.listen(engine, "connect", _set_sqlite_pragmas)
        return engine

    return create_engine(
        settings.database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=90,
        pool_recycle=3600,
        echo=settings.debug,
    )


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
    return _engine


def SessionLocal() -> Session:
    """Open a new session bound to the process-wide engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory()


@contextmanager
def get_db() -> Generator[Session, None, None]:
    """Context manager yielding a database session.

    Usage:
        with get_db() as db:
            todos = todo_service.list(db, Caller.internal(), None)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
