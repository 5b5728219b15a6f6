"""Database layer: engine, declarative base, mixins, session management."""

from boilerplate.db.base import Base, EntityMixin, SoftDeleteMixin, TimestampMixin
from boilerplate.db.engine import SessionLocal, create_db_engine, get_db, get_engine

__all__ = [
    "Base",
    "EntityMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
    "create_db_engine",
    "get_engine",
    "SessionLocal",
    "get_db",
]
