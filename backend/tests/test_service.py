"""Tests for the service layer seam.

The repository is replaced with a MagicMock: these tests check that the
service validates before forwarding, forwards unchanged, and logs every
operation at debug level.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from boilerplate.crud.caller import NIL_UUID, Caller
from boilerplate.crud.repository import Repository
from boilerplate.crud.service import ResourceService
from boilerplate.exceptions import (
    InvalidFiltersError,
    InvalidIDError,
    InvalidOptionsError,
    InvalidOwnerError,
    InvalidTitleError,
)
from boilerplate.organisation.schemas import (
    OrganisationCreate,
    OrganisationListOptions,
    OrganisationUpdate,
)
from boilerplate.organisation.service import organisation_resource


@pytest.fixture
def fake_repository():
    repository = MagicMock(spec=Repository)
    repository.resource = organisation_resource
    return repository


@pytest.fixture
def fake_logger():
    return MagicMock()


@pytest.fixture
def service(fake_repository, fake_logger):
    return ResourceService(fake_repository, logger=fake_logger)


@pytest.fixture
def caller():
    return Caller.user(uuid.uuid4())


class TestValidationBeforeForwarding:
    def test_create_none(self, service, fake_repository, caller):
        with pytest.raises(InvalidOptionsError):
            service.create(None, caller, None)
        fake_repository.create.assert_not_called()

    def test_create_empty_title(self, service, fake_repository, caller):
        with pytest.raises(InvalidTitleError):
            service.create(None, caller, OrganisationCreate(title="", owner_id=caller.owner_id))
        fake_repository.create.assert_not_called()

    def test_create_missing_owner(self, service, fake_repository, caller):
        with pytest.raises(InvalidOwnerError):
            service.create(None, caller, OrganisationCreate(title="Acme"))
        fake_repository.create.assert_not_called()

    def test_list_bad_limit(self, service, fake_repository, caller):
        with pytest.raises(InvalidFiltersError):
            service.list(None, caller, OrganisationListOptions(limit=101))
        fake_repository.list.assert_not_called()

    @pytest.mark.parametrize("bad_id", [None, NIL_UUID])
    def test_get_nil_id(self, service, fake_repository, caller, bad_id):
        with pytest.raises(InvalidIDError):
            service.get(None, caller, bad_id)
        fake_repository.get.assert_not_called()

    def test_update_none_options(self, service, fake_repository, caller):
        with pytest.raises(InvalidOptionsError):
            service.update(None, caller, uuid.uuid4(), None)
        fake_repository.update.assert_not_called()

    def test_update_empty_title(self, service, fake_repository, caller):
        with pytest.raises(InvalidTitleError):
            service.update(None, caller, uuid.uuid4(), OrganisationUpdate(title=""))
        fake_repository.update.assert_not_called()

    def test_delete_nil_id(self, service, fake_repository, caller):
        with pytest.raises(InvalidIDError):
            service.delete(None, caller, None)
        fake_repository.delete.assert_not_called()


class TestForwarding:
    def test_create_forwards_unchanged(self, service, fake_repository, caller):
        db = MagicMock()
        options = OrganisationCreate(title="Acme", owner_id=caller.owner_id)
        result = service.create(db, caller, options)

        fake_repository.create.assert_called_once_with(db, caller, options)
        assert result is fake_repository.create.return_value

    def test_list_none_forwards_none(self, service, fake_repository, caller):
        db = MagicMock()
        service.list(db, caller, None)
        fake_repository.list.assert_called_once_with(db, caller, None)

    def test_get_update_delete_forward(self, service, fake_repository, caller):
        db = MagicMock()
        entity_id = uuid.uuid4()
        options = OrganisationUpdate(title="Renamed")

        service.get(db, caller, entity_id)
        service.update(db, caller, entity_id, options)
        service.delete(db, caller, entity_id)

        fake_repository.get.assert_called_once_with(db, caller, entity_id)
        fake_repository.update.assert_called_once_with(db, caller, entity_id, options)
        fake_repository.delete.assert_called_once_with(db, caller, entity_id)

    def test_repository_errors_propagate(self, service, fake_repository, caller):
        fake_repository.get.side_effect = RuntimeError("store down")
        with pytest.raises(RuntimeError, match="store down"):
            service.get(MagicMock(), caller, uuid.uuid4())


class TestLogging:
    @pytest.mark.parametrize(
        "operation, args, function",
        [
            ("list", (None,), "list"),
            ("get", (uuid.uuid4(),), "get"),
            ("delete", (uuid.uuid4(),), "delete"),
        ],
    )
    def test_operation_logged_at_debug(
        self, service, fake_logger, caller, operation, args, function
    ):
        getattr(service, operation)(MagicMock(), caller, *args)

        fake_logger.debug.assert_called_once()
        _, kwargs = fake_logger.debug.call_args
        assert kwargs["function"] == function
        assert kwargs["resource"] == "organisation"
        assert kwargs["layer"] == "service"

    def test_logged_even_when_validation_fails(self, service, fake_logger, caller):
        with pytest.raises(InvalidOptionsError):
            service.create(MagicMock(), caller, None)
        fake_logger.debug.assert_called_once()
