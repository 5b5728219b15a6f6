"""Pydantic schemas for memberships.

Memberships are immutable once created: there is no update schema.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from boilerplate.crud.options import ListOptions


class MembershipCreate(BaseModel):
    """Schema for adding a user to an organisation."""

    org_id: Optional[uuid.UUID] = None
    user_id: Optional[uuid.UUID] = None


class MembershipListOptions(ListOptions):
    """Filters by organisation and/or user, plus pagination."""

    org_id: Optional[uuid.UUID] = None
    user_id: Optional[uuid.UUID] = None


class MembershipResponse(BaseModel):
    """Membership as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    org_id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
