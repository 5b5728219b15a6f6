"""Pydantic schemas for records."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from boilerplate.crud.options import (
    OwnedCreateOptions,
    TitleListOptions,
    TitleUpdateOptions,
)


class RecordCreateRequest(BaseModel):
    """Request body for creating a record. The owner comes from the token."""

    title: str = ""


class RecordCreate(OwnedCreateOptions):
    """Create options for a record."""


class RecordListOptions(TitleListOptions):
    """Filters and pagination for listing records."""


class RecordUpdate(TitleUpdateOptions):
    """Schema for updating a record."""


class RecordResponse(BaseModel):
    """Record as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
