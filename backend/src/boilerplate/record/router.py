"""Record REST API router.

Every endpoint requires a bearer token. The token's user becomes the owner
on create and narrows list/get/update/delete to that owner's records;
someone else's record answers 404, the same as a missing one.
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
from boilerplate.record.schemas import (
    RecordCreate,
    RecordCreateRequest,
    RecordListOptions,
    RecordResponse,
    RecordUpdate,
)
from boilerplate.record.service import record_service

router = APIRouter(prefix="/api/records/v1", tags=["records"])


@router.post(
    "",
    status_code=201,
    response_model=Envelope[RecordResponse],
    response_model_exclude_none=True,
)
def create_record(
    body: Optional[RecordCreateRequest] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Create a record owned by the caller."""
    options = None
    if body is not None:
        options = RecordCreate(title=body.title, owner_id=caller.owner_id)
    try:
        record = record_service.create(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(
        data=RecordResponse.model_validate(record),
        message="record created",
    )


@router.get(
    "",
    response_model=Envelope[list[RecordResponse]],
    response_model_exclude_none=True,
)
def list_records(
    title: str = Query("", description="Exact-match title filter"),
    skip: int = Query(0),
    limit: int = Query(0),
    order_by: str = Query(""),
    order_direction: str = Query(""),
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """List the caller's records."""
    options = RecordListOptions(
        title=title,
        skip=skip,
        limit=limit,
        order_by=order_by,
        order_direction=order_direction,
    )
    try:
        records = record_service.list(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=[RecordResponse.model_validate(r) for r in records])


@router.get(
    "/{record_id}",
    response_model=Envelope[RecordResponse],
    response_model_exclude_none=True,
)
def get_record(
    record_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Get one of the caller's records."""
    try:
        record = record_service.get(db, caller, parse_id(record_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=RecordResponse.model_validate(record))


@router.patch(
    "/{record_id}",
    response_model=Envelope[RecordResponse],
    response_model_exclude_none=True,
)
def update_record(
    record_id: str,
    body: Optional[RecordUpdate] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Change the title of one of the caller's records."""
    try:
        record = record_service.update(db, caller, parse_id(record_id), body)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(
        data=RecordResponse.model_validate(record),
        message="record updated",
    )


@router.delete(
    "/{record_id}",
    response_model=Envelope[RecordResponse],
    response_model_exclude_none=True,
)
def delete_record(
    record_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(require_caller),
):
    """Soft-delete one of the caller's records."""
    try:
        record_service.delete(db, caller, parse_id(record_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(message="record deleted")
