"""Test fixtures for Boilerplate integration tests.

Uses a temp-file SQLite database with foreign keys enabled, matching the
production engine's PRAGMA setup. Every test runs inside a connection-level
transaction that is rolled back afterwards.
"""

import os
import tempfile
import uuid

os.environ.setdefault("BOILERPLATE_JWT_SECRET", "test_jwt_secret_boilerplate_ci_12345")
os.environ.setdefault("BOILERPLATE_LOG_JSON", "false")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session

from boilerplate.crud.caller import Caller
from boilerplate.db.base import Base
from boilerplate.membership.models import Membership  # noqa: F401 -- ensure models registered
from boilerplate.organisation.models import Organisation  # noqa: F401
from boilerplate.record.models import Record  # noqa: F401
from boilerplate.record.schemas import RecordCreate
from boilerplate.record.service import record_repository
from boilerplate.todo.models import Todo  # noqa: F401


@pytest.fixture(scope="session")
def test_engine():
    """Create a SQLite test database engine.

    Uses a temp file so the threadpool that runs sync FastAPI endpoints
    sees the same database. Creates all tables via Base.metadata.create_all.
    """
    tmpfile = tempfile.NamedTemporaryFile(
        suffix=".db", delete=False, prefix="boilerplate_test_"
    )
    db_path = tmpfile.name
    tmpfile.close()

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        echo=False,
    )

    @event.listens_for(engine, "connect")
    def set_pragmas(dbapi_conn, conn_rec):
        # pysqlite emits its own BEGIN and breaks SAVEPOINT; take over both
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    @event.listens_for(engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()
    try:
        os.unlink(db_path)
    except OSError:
        pass


@pytest.fixture
def db_session(test_engine):
    """Create a database session for each test.

    Session commits and rollbacks act on SAVEPOINTs inside one outer
    transaction, which is rolled back after each test to maintain isolation.
    """
    connection = test_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection, join_transaction_mode="create_savepoint")

    yield session

    session.close()
    if transaction.is_active:
        transaction.rollback()
    connection.close()


@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def owner(owner_id) -> Caller:
    """Authenticated caller who owns the seeded rows."""
    return Caller.user(owner_id)


@pytest.fixture
def stranger(other_owner_id) -> Caller:
    """Authenticated caller who owns nothing."""
    return Caller.user(other_owner_id)


@pytest.fixture
def internal() -> Caller:
    return Caller.internal()


@pytest.fixture
def seeded_records(db_session, owner, owner_id):
    """Five records titled "Record 0".."Record 4", all owned by `owner`."""
    return [
        record_repository.create(
            db_session, owner, RecordCreate(title=f"Record {i}", owner_id=owner_id)
        )
        for i in range(5)
    ]
