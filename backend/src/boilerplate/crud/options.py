"""Option schemas shared by the title-bearing resources.

Options carry no pydantic constraints. An empty title or an out-of-range
limit surfaces as a domain error from boilerplate.crud.validators.
"""

import uuid
from typing import Optional

from pydantic import BaseModel


class TitleCreateOptions(BaseModel):
    """Create options for a resource without an owner."""

    title: str = ""


class OwnedCreateOptions(TitleCreateOptions):
    """Create options for an ownership-bearing resource.

    owner_id is filled in by the caller's layer from the authenticated
    identity, never from a request body.
    """

    owner_id: Optional[uuid.UUID] = None


class ListOptions(BaseModel):
    """Pagination and ordering common to every list operation.

    limit=0 means no limit; skip=0 means no offset. An empty order_by keeps
    store order; an empty order_direction means ascending.
    """

    skip: int = 0
    limit: int = 0
    order_by: str = ""
    order_direction: str = ""


class TitleListOptions(ListOptions):
    """List options with an optional equality filter on title."""

    title: str = ""


class TitleUpdateOptions(BaseModel):
    """Update options. title is the only updatable field."""

    title: str = ""
