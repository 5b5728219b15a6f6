"""Todo REST API router.

Todos are not owner-scoped: a bearer token is accepted but not required.
Error handling: validation errors -> 400, missing todo -> 404.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boilerplate.api.auth import optional_caller
from boilerplate.api.dependencies import get_session
from boilerplate.api.responses import Envelope, error_response, parse_id
from boilerplate.crud.caller import Caller
from boilerplate.exceptions import BoilerplateError
from boilerplate.todo.schemas import (
    TodoCreate,
    TodoListOptions,
    TodoResponse,
    TodoUpdate,
)
from boilerplate.todo.service import todo_service

router = APIRouter(prefix="/api/todos/v1", tags=["todos"])


@router.post(
    "",
    status_code=201,
    response_model=Envelope[TodoResponse],
    response_model_exclude_none=True,
)
def create_todo(
    body: Optional[TodoCreate] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Create a todo."""
    try:
        todo = todo_service.create(db, caller, body)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=TodoResponse.model_validate(todo), message="todo created")


@router.get(
    "",
    response_model=Envelope[list[TodoResponse]],
    response_model_exclude_none=True,
)
def list_todos(
    title: str = Query("", description="Exact-match title filter"),
    skip: int = Query(0),
    limit: int = Query(0),
    order_by: str = Query(""),
    order_direction: str = Query(""),
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """List todos with optional title filter, pagination, and ordering."""
    options = TodoListOptions(
        title=title,
        skip=skip,
        limit=limit,
        order_by=order_by,
        order_direction=order_direction,
    )
    try:
        todos = todo_service.list(db, caller, options)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=[TodoResponse.model_validate(t) for t in todos])


@router.get(
    "/{todo_id}",
    response_model=Envelope[TodoResponse],
    response_model_exclude_none=True,
)
def get_todo(
    todo_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Get a todo by id."""
    try:
        todo = todo_service.get(db, caller, parse_id(todo_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=TodoResponse.model_validate(todo))


@router.patch(
    "/{todo_id}",
    response_model=Envelope[TodoResponse],
    response_model_exclude_none=True,
)
def update_todo(
    todo_id: str,
    body: Optional[TodoUpdate] = None,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Update a todo's title."""
    try:
        todo = todo_service.update(db, caller, parse_id(todo_id), body)
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(data=TodoResponse.model_validate(todo), message="todo updated")


@router.delete(
    "/{todo_id}",
    response_model=Envelope[TodoResponse],
    response_model_exclude_none=True,
)
def delete_todo(
    todo_id: str,
    db: Session = Depends(get_session),
    caller: Caller = Depends(optional_caller),
):
    """Soft-delete a todo."""
    try:
        todo_service.delete(db, caller, parse_id(todo_id))
    except (BoilerplateError, SQLAlchemyError) as e:
        return error_response(e)
    return Envelope(message="todo deleted")
