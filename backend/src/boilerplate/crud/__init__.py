"""Generic ownership-scoped CRUD: caller identity, validators, repository, service."""

from boilerplate.crud.caller import Caller, is_nil_id
from boilerplate.crud.repository import Repository
from boilerplate.crud.resource import Resource
from boilerplate.crud.service import ResourceService

__all__ = [
    "Caller",
    "is_nil_id",
    "Repository",
    "Resource",
    "ResourceService",
]
