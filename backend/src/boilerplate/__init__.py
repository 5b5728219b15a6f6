"""Ownership-scoped CRUD service for todos, organisations, memberships, and records."""

__version__ = "0.1.0"
