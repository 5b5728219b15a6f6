"""Organisation resource wiring.

Organisations carry owner_id, so every read and write from an
authenticated caller is narrowed to the caller's own organisations.
"""

from boilerplate.crud.repository import Repository
from boilerplate.crud.resource import Resource
from boilerplate.crud.service import ResourceService
from boilerplate.crud.validators import (
    validate_owned_create_options,
    validate_update_options,
)
from boilerplate.organisation.models import Organisation

organisation_resource = Resource(
    name="organisation",
    model=Organisation,
    validate_create=validate_owned_create_options,
    validate_update=validate_update_options,
    owner_field="owner_id",
    filter_fields=("title",),
    update_fields=("title",),
    order_fields=("title", "created_at", "updated_at"),
)

organisation_repository = Repository(organisation_resource)
organisation_service = ResourceService(organisation_repository)
