"""Pydantic schemas for todos.

Options are validated by boilerplate.crud.validators, not by pydantic
constraints, so that failures carry the domain error types.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from boilerplate.crud.options import (
    TitleCreateOptions,
    TitleListOptions,
    TitleUpdateOptions,
)


class TodoCreate(TitleCreateOptions):
    """Schema for creating a todo."""


class TodoListOptions(TitleListOptions):
    """Filters and pagination for listing todos."""


class TodoUpdate(TitleUpdateOptions):
    """Schema for updating a todo."""


class TodoResponse(BaseModel):
    """Todo as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
