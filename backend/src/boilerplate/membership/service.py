"""Membership resource wiring.

Memberships have no title and no owner: create requires both ids, list
filters on either, and updates are not supported.

An organisation that was soft-deleted no longer accepts members
(InvalidIDError). An organisation id that never existed is left to the
foreign key, so it surfaces as a store IntegrityError.
"""

from boilerplate.crud.caller import is_nil_id
from boilerplate.crud.repository import Repository
from boilerplate.crud.resource import Resource
from boilerplate.crud.service import ResourceService
from boilerplate.exceptions import InvalidIDError
from boilerplate.membership.models import Membership
from boilerplate.membership.schemas import MembershipCreate
from boilerplate.organisation.models import Organisation


def validate_membership_create_options(options: MembershipCreate) -> None:
    if is_nil_id(options.org_id):
        raise InvalidIDError(message="invalid organisation id", detail="org_id is required")
    if is_nil_id(options.user_id):
        raise InvalidIDError(message="invalid user id", detail="user_id is required")


class MembershipRepository(Repository):
    """Repository that refuses new members for deleted organisations."""

    def create(self, db, caller, options):
        if options is not None:
            self.resource.validate_create(options)
            tombstone = (
                db.query(Organisation.deleted_at)
                .filter(Organisation.id == options.org_id)
                .first()
            )
            if tombstone is not None and tombstone.deleted_at is not None:
                raise InvalidIDError(
                    message="invalid organisation id",
                    detail=f"organisation {options.org_id} has been deleted",
                )
        return super().create(db, caller, options)


membership_resource = Resource(
    name="membership",
    model=Membership,
    validate_create=validate_membership_create_options,
    filter_fields=("org_id", "user_id"),
)

membership_repository = MembershipRepository(membership_resource)
membership_service = ResourceService(membership_repository)
