"""Tests for the membership resource: two-id create, id filters, no updates."""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from boilerplate.exceptions import (
    InvalidIDError,
    InvalidOptionsError,
    NoRowsAffectedError,
    NotFoundError,
)
from boilerplate.membership.schemas import MembershipCreate, MembershipListOptions
from boilerplate.membership.service import membership_repository, membership_service
from boilerplate.organisation.schemas import OrganisationCreate
from boilerplate.organisation.service import organisation_repository
from boilerplate.todo.schemas import TodoCreate
from boilerplate.todo.service import todo_service


@pytest.fixture
def organisations(db_session, owner, owner_id):
    return [
        organisation_repository.create(
            db_session, owner, OrganisationCreate(title=title, owner_id=owner_id)
        )
        for title in ("Acme", "Globex")
    ]


@pytest.fixture
def members():
    return [uuid.uuid4() for _ in range(3)]


@pytest.fixture
def memberships(db_session, internal, organisations, members):
    """Acme has all three members; Globex only the first."""
    acme, globex = organisations
    created = [
        membership_service.create(
            db_session, internal, MembershipCreate(org_id=acme.id, user_id=user_id)
        )
        for user_id in members
    ]
    created.append(
        membership_service.create(
            db_session, internal, MembershipCreate(org_id=globex.id, user_id=members[0])
        )
    )
    return created


class TestCreateMembership:
    def test_create(self, db_session, internal, organisations, members):
        membership = membership_service.create(
            db_session,
            internal,
            MembershipCreate(org_id=organisations[0].id, user_id=members[0]),
        )
        assert membership.id is not None
        assert membership.org_id == organisations[0].id
        assert membership.user_id == members[0]
        assert membership.deleted_at is None

    def test_create_requires_org_id(self, db_session, internal, members):
        with pytest.raises(InvalidIDError, match="organisation"):
            membership_service.create(
                db_session, internal, MembershipCreate(user_id=members[0])
            )

    def test_create_requires_user_id(self, db_session, internal, organisations):
        with pytest.raises(InvalidIDError, match="user"):
            membership_service.create(
                db_session, internal, MembershipCreate(org_id=organisations[0].id)
            )

    def test_unknown_organisation_violates_foreign_key(self, db_session, internal):
        """Store errors propagate unwrapped from the repository."""
        with pytest.raises(IntegrityError):
            membership_repository.create(
                db_session,
                internal,
                MembershipCreate(org_id=uuid.uuid4(), user_id=uuid.uuid4()),
            )

    def test_session_usable_after_store_error(self, db_session, internal):
        """A rejected write is rolled back, so the same session keeps working."""
        with pytest.raises(IntegrityError):
            membership_service.create(
                db_session,
                internal,
                MembershipCreate(org_id=uuid.uuid4(), user_id=uuid.uuid4()),
            )

        todo = todo_service.create(db_session, internal, TodoCreate(title="after"))
        assert todo_service.get(db_session, internal, todo.id).title == "after"

    def test_deleted_organisation_rejects_members(
        self, db_session, owner, internal, organisations, members
    ):
        organisation_repository.delete(db_session, owner, organisations[0].id)

        with pytest.raises(InvalidIDError, match="organisation"):
            membership_service.create(
                db_session,
                internal,
                MembershipCreate(org_id=organisations[0].id, user_id=members[0]),
            )
        assert membership_service.list(db_session, internal, None) == []


class TestListMemberships:
    def test_list_all(self, db_session, internal, memberships):
        assert len(membership_service.list(db_session, internal, None)) == 4

    def test_filter_by_org(self, db_session, internal, organisations, memberships):
        acme = organisations[0]
        result = membership_service.list(
            db_session, internal, MembershipListOptions(org_id=acme.id)
        )
        assert len(result) == 3
        assert {m.org_id for m in result} == {acme.id}

    def test_filter_by_user(self, db_session, internal, members, memberships):
        result = membership_service.list(
            db_session, internal, MembershipListOptions(user_id=members[0])
        )
        assert len(result) == 2

    def test_filter_by_org_and_user(
        self, db_session, internal, organisations, members, memberships
    ):
        result = membership_service.list(
            db_session,
            internal,
            MembershipListOptions(org_id=organisations[1].id, user_id=members[0]),
        )
        assert [m.id for m in result] == [memberships[3].id]

    def test_user_callers_see_all_memberships(self, db_session, stranger, memberships):
        """Memberships carry no owner column, so no owner narrowing applies."""
        assert len(membership_service.list(db_session, stranger, None)) == 4


class TestMembershipLifecycle:
    def test_get(self, db_session, internal, memberships):
        membership = membership_service.get(db_session, internal, memberships[0].id)
        assert membership.id == memberships[0].id

    def test_update_not_supported(self, db_session, internal, memberships):
        with pytest.raises(InvalidOptionsError, match="does not support updates"):
            membership_repository.update(
                db_session,
                internal,
                memberships[0].id,
                MembershipCreate(org_id=uuid.uuid4(), user_id=uuid.uuid4()),
            )

    def test_delete(self, db_session, internal, memberships):
        target = memberships[0].id
        membership_service.delete(db_session, internal, target)

        with pytest.raises(NotFoundError):
            membership_service.get(db_session, internal, target)
        with pytest.raises(NoRowsAffectedError):
            membership_service.delete(db_session, internal, target)
