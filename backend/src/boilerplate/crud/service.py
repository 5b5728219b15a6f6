"""Service layer: re-validate, log, forward.

There is no business rule here beyond what the repository enforces. The
class is the seam where instrumentation lives and where a fake repository
can be swapped in.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

import structlog
from sqlalchemy.orm import Session

from boilerplate.crud.caller import Caller, is_nil_id
from boilerplate.crud.options import ListOptions
from boilerplate.crud.repository import Repository
from boilerplate.exceptions import InvalidIDError, InvalidOptionsError


class ResourceService:
    """CRUD entry point for one resource."""

    def __init__(self, repository: Repository, logger=None) -> None:
        self.repository = repository
        self.resource = repository.resource
        self.logger = logger or structlog.get_logger(__name__)

    def _log(self, event: str, function: str) -> None:
        # Not bound at construction: services are built at import, before configure_logging()
        self.logger.debug(
            event,
            function=function,
            layer="service",
            resource=self.resource.name,
        )

    def _check_id(self, entity_id: Optional[uuid.UUID]) -> None:
        if is_nil_id(entity_id):
            raise InvalidIDError(
                message=f"invalid {self.resource.name} id",
                detail=f"id={entity_id!r}",
            )

    def create(self, db: Session, caller: Caller, options: Any):
        self._log("creating_resource", "create")
        if options is None:
            raise InvalidOptionsError(detail=f"{self.resource.name} create options are required")
        self.resource.validate_create(options)
        return self.repository.create(db, caller, options)

    def list(
        self, db: Session, caller: Caller, options: Optional[ListOptions] = None
    ) -> list:
        self._log("listing_resources", "list")
        if options is not None:
            self.resource.validate_list(options)
        return self.repository.list(db, caller, options)

    def get(self, db: Session, caller: Caller, entity_id: Optional[uuid.UUID]):
        self._log("retrieving_resource", "get")
        self._check_id(entity_id)
        return self.repository.get(db, caller, entity_id)

    def update(
        self,
        db: Session,
        caller: Caller,
        entity_id: Optional[uuid.UUID],
        options: Any,
    ):
        self._log("updating_resource", "update")
        self._check_id(entity_id)
        if options is None:
            raise InvalidOptionsError(detail=f"{self.resource.name} update options are required")
        if self.resource.validate_update is not None:
            self.resource.validate_update(options)
        return self.repository.update(db, caller, entity_id, options)

    def delete(self, db: Session, caller: Caller, entity_id: Optional[uuid.UUID]) -> None:
        self._log("deleting_resource", "delete")
        self._check_id(entity_id)
        self.repository.delete(db, caller, entity_id)
