"""Membership REST API router.

Memberships are not owner-scoped and cannot be updated: there is no PATCH.
Adding a member to an organisation that does not exist violates the foreign
key and answers 409.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boilerplate.api.auth import optional_caller
from boilerplate.api.dependencies import get_session
from boilerplate.api.responses import Envelope, error_response, parse_id
from boilerplate.crud.caller import Caller
from boilerplate.exceptions import BoilerplateError
from boilerplate.membership.schemas import (
    MembershipCreate,
    MembershipListOptions,
    MembershipResponse,
)
from boilerplate.membership.service import membership_service

router = APIRouter(prefix="/api/memberships/v1", tags=["memberships"])


@router.post(
    "",
    status_code=201,
    response_model=Envelope[MembershipResponse],
    response_model_exclude_none=True,
)
def create_membership(
    body: Optional[MembershipCreate] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Add a user to an organisation."""
    try:
        membership = membership_service.create(db, caller, body)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(
        data=MembershipResponse.model_validate(membership),
        message="membership created",
    )


@router.get(
    "",
    response_model=Envelope[list[MembershipResponse]],
    response_model_exclude_none=True,
)
def list_memberships(
    org_id: Optional[uuid.UUID] = Query(None),
    user_id: Optional[uuid.UUID] = Query(None),
    skip: int = Query(0),
    limit: int = Query(0),
    order_by: str = Query(""),
    order_direction: str = Query(""),
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """List memberships of an organisation, of a user, or both."""
    options = MembershipListOptions(
        org_id=org_id,
        user_id=user_id,
        skip=skip,
        limit=limit,
        order_by=order_by,
        order_direction=order_direction,
    )
    try:
        memberships = membership_service.list(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=[MembershipResponse.model_validate(m) for m in memberships])


@router.get(
    "/{membership_id}",
    response_model=Envelope[MembershipResponse],
    response_model_exclude_none=True,
)
def get_membership(
    membership_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Get a membership by id."""
    try:
        membership = membership_service.get(db, caller, parse_id(membership_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=MembershipResponse.model_validate(membership))


@router.delete(
    "/{membership_id}",
    response_model=Envelope[MembershipResponse],
    response_model_exclude_none=True,
)
def delete_membership(
    membership_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Remove a membership (soft delete)."""
    try:
        membership_service.delete(db, caller, parse_id(membership_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(message="membership deleted")
