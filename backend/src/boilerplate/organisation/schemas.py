"""Pydantic schemas for organisations.

OrganisationCreateRequest is the request body and has no owner field;
OrganisationCreate is what the service receives, with owner_id taken from
the caller's token.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from boilerplate.crud.options import (
    OwnedCreateOptions,
    TitleListOptions,
    TitleUpdateOptions,
)


class OrganisationCreateRequest(BaseModel):
    """Request body for creating an organisation."""

    title: str = ""


class OrganisationCreate(OwnedCreateOptions):
    """Create options for an organisation: title and owner."""


class OrganisationListOptions(TitleListOptions):
    """Filters and pagination for listing organisations."""


class OrganisationUpdate(TitleUpdateOptions):
    """Schema for updating an organisation."""


class OrganisationResponse(BaseModel):
    """Organisation as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
