"""Organisation REST API router.

Every endpoint requires a bearer token. The token's user becomes the owner
on create and narrows list/get/update/delete to that owner's organisations;
someone else's organisation answers 404, the same as a missing one.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boilerplate.api.auth import require_caller
from boilerplate.api.dependencies import get_session
from boilerplate.api.responses import Envelope, error_response, parse_id
from boilerplate.crud.caller import Caller
from boilerplate.exceptions import BoilerplateError
from boilerplate.organisation.schemas import (
    OrganisationCreate,
    OrganisationCreateRequest,
    OrganisationListOptions,
    OrganisationResponse,
    OrganisationUpdate,
)
from boilerplate.organisation.service import organisation_service

router = APIRouter(prefix="/api/organisations/v1", tags=["organisations"])


@router.post(
    "",
    status_code=201,
    response_model=Envelope[OrganisationResponse],
    response_model_exclude_none=True,
)
def create_organisation(
    body: Optional[OrganisationCreateRequest] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Create an organisation owned by the caller."""
    options = None
    if body is not None:
        options = OrganisationCreate(title=body.title, owner_id=caller.owner_id)
    try:
        organisation = organisation_service.create(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(
        data=OrganisationResponse.model_validate(organisation),
        message="organisation created",
    )


@router.get(
    "",
    response_model=Envelope[list[OrganisationResponse]],
    response_model_exclude_none=True,
)
def list_organisations(
    title: str = Query("", description="Exact-match title filter"),
    skip: int = Query(0),
    limit: int = Query(0),
    order_by: str = Query(""),
    order_direction: str = Query(""),
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """List the caller's organisations."""
    options = OrganisationListOptions(
        title=title,
        skip=skip,
        limit=limit,
        order_by=order_by,
        order_direction=order_direction,
    )
    try:
        organisations = organisation_service.list(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=[OrganisationResponse.model_validate(o) for o in organisations])


@router.get(
    "/{organisation_id}",
    response_model=Envelope[OrganisationResponse],
    response_model_exclude_none=True,
)
def get_organisation(
    organisation_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Get one of the caller's organisations."""
    try:
        organisation = organisation_service.get(db, caller, parse_id(organisation_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=OrganisationResponse.model_validate(organisation))


@router.patch(
    "/{organisation_id}",
    response_model=Envelope[OrganisationResponse],
    response_model_exclude_none=True,
)
def update_organisation(
    organisation_id: str,
    body: Optional[OrganisationUpdate] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Rename one of the caller's organisations."""
    try:
        organisation = organisation_service.update(
            db, caller, parse_id(organisation_id), body
        )
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(
        data=OrganisationResponse.model_validate(organisation),
        message="organisation updated",
    )


@router.delete(
    "/{organisation_id}",
    response_model=Envelope[OrganisationResponse],
    response_model_exclude_none=True,
)
def delete_organisation(
    organisation_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Soft-delete one of the caller's organisations."""
    try:
        organisation_service.delete(db, caller, parse_id(organisation_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(message="organisation deleted")
