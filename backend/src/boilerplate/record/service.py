"""Record resource wiring. Owner-scoped, like organisations."""

from boilerplate.crud.repository import Repository
from boilerplate.crud.resource import Resource
from boilerplate.crud.service import ResourceService
from boilerplate.crud.validators import (
    validate_owned_create_options,
    validate_update_options,
)
from boilerplate.record.models import Record

record_resource = Resource(
    name="record",
    model=Record,
    validate_create=validate_owned_create_options,
    validate_update=validate_update_options,
    owner_field="owner_id",
    filter_fields=("title",),
    update_fields=("title",),
    order_fields=("title", "created_at", "updated_at"),
)

record_repository = Repository(record_resource)
record_service = ResourceService(record_repository)
