"""Generic ownership-scoped repository.

One Repository instance per resource. All methods take a Session and a
Caller as their first arguments (dependency injection, no ambient state).

Scoping rules, applied identically by list/get/update/delete:
- soft-deleted rows (deleted_at IS NOT NULL) are never matched
- when the resource has an owner column and the caller is a user, rows are
  narrowed to owner == caller.owner_id
- Caller.internal() sees every live row

create applies no scope; there is no existing row to narrow.
Store errors (SQLAlchemyError) propagate unwrapped, after the session has been
rolled back so it stays usable.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from boilerplate.crud.caller import Caller, is_nil_id
from boilerplate.crud.options import ListOptions
from boilerplate.crud.resource import Resource
from boilerplate.exceptions import (
    InvalidIDError,
    InvalidOptionsError,
    InvalidOwnerError,
    NoRowsAffectedError,
    NotFoundError,
)


class Repository:
    """Filtered CRUD against one model, parameterised by a Resource."""

    def __init__(self, resource: Resource) -> None:
        self.resource = resource
        self.model = resource.model

    # -- Helpers --------------------------------------------------------------

    def _scoped(self, db: Session, caller: Caller) -> Query:
        """Base query for every read and write: live rows the caller may see."""
        query = db.query(self.model).filter(self.model.deleted_at.is_(None))
        owner_column = self.resource.owner_column
        if owner_column is not None and not caller.is_internal:
            query = query.filter(owner_column == caller.owner_id)
        return query

    @staticmethod
    @contextmanager
    def _writing(db: Session) -> Iterator[None]:
        """Commit the block's writes; roll back and re-raise on store errors."""
        try:
            yield
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

    def _check_id(self, entity_id: Optional[uuid.UUID]) -> None:
        if is_nil_id(entity_id):
            raise InvalidIDError(
                message=f"invalid {self.resource.name} id",
                detail=f"id={entity_id!r}",
            )

    # -- CRUD -----------------------------------------------------------------

    def create(self, db: Session, caller: Caller, options: Any):
        """Insert a row and return it with id and timestamps populated.

        An authenticated caller can only create rows it owns.
        """
        if options is None:
            raise InvalidOptionsError(detail=f"{self.resource.name} create options are required")
        self.resource.validate_create(options)

        values = options.model_dump()
        if self.resource.owned and not caller.is_internal:
            if values.get(self.resource.owner_field) != caller.owner_id:
                raise InvalidOwnerError(
                    detail=f"{self.resource.owner_field} does not match the authenticated caller",
                )

        entity = self.model(**values)
        with self._writing(db):
            db.add(entity)
        db.refresh(entity)
        return entity

    def list(
        self, db: Session, caller: Caller, options: Optional[ListOptions] = None
    ) -> list:
        """Return live rows visible to the caller.

        None options mean defaults: no filter, store order, no pagination.
        """
        if options is None:
            options = ListOptions()
        self.resource.validate_list(options)

        query = self._scoped(db, caller)

        for field in self.resource.filter_fields:
            value = getattr(options, field, None)
            if value:
                query = query.filter(getattr(self.model, field) == value)

        if options.order_by:
            column = getattr(self.model, options.order_by)
            if options.order_direction.lower() == "desc":
                query = query.order_by(column.desc())
            else:
                query = query.order_by(column.asc())

        if options.skip > 0:
            query = query.offset(options.skip)
        if options.limit > 0:
            query = query.limit(options.limit)

        return query.all()

    def get(self, db: Session, caller: Caller, entity_id: Optional[uuid.UUID]):
        """Fetch one live row by id. Raises NotFoundError if the caller cannot see it."""
        self._check_id(entity_id)

        entity = (
            self._scoped(db, caller)
            .filter(self.model.id == entity_id)
            .populate_existing()
            .first()
        )
        if entity is None:
            raise NotFoundError(
                message=f"{self.resource.name} not found",
                detail=f"id={entity_id}",
            )
        return entity

    def update(
        self,
        db: Session,
        caller: Caller,
        entity_id: Optional[uuid.UUID],
        options: Any,
    ):
        """Write whitelisted fields, then re-fetch.

        The UPDATE carries the same scope as get, so a non-owner affects zero
        rows and the re-fetch raises NotFoundError.
        """
        self._check_id(entity_id)
        if options is None:
            raise InvalidOptionsError(detail=f"{self.resource.name} update options are required")
        if self.resource.validate_update is None:
            raise InvalidOptionsError(
                message=f"{self.resource.name} does not support updates",
            )
        self.resource.validate_update(options)

        values = {
            getattr(self.model, field): getattr(options, field)
            for field in self.resource.update_fields
        }
        with self._writing(db):
            (
                self._scoped(db, caller)
                .filter(self.model.id == entity_id)
                .update(values, synchronize_session="fetch")
            )

        return self.get(db, caller, entity_id)

    def delete(self, db: Session, caller: Caller, entity_id: Optional[uuid.UUID]) -> None:
        """Soft-delete: stamp deleted_at. Raises NoRowsAffectedError when nothing matched."""
        self._check_id(entity_id)

        with self._writing(db):
            rows = (
                self._scoped(db, caller)
                .filter(self.model.id == entity_id)
                .update(
                    {self.model.deleted_at: datetime.now(timezone.utc)},
                    synchronize_session="fetch",
                )
            )
        if rows == 0:
            raise NoRowsAffectedError(
                message=f"no {self.resource.name} deleted",
                detail=f"id={entity_id}",
            )
