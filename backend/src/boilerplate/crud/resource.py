"""Resource descriptor: everything the generic repository needs to know about a model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from boilerplate.crud.validators import validate_list_options

Validator = Callable[[Any], None]


@dataclass(frozen=True)
class Resource:
    """Static description of one CRUD resource.

    - owner_field: column compared against Caller.owner_id, or None when the
      resource has no ownership semantics
    - filter_fields: list option fields applied as equality filters when set
    - update_fields: the only columns an update may write
    - order_fields: columns accepted as ListOptions.order_by
    """

    name: str
    model: type
    validate_create: Validator
    validate_update: Optional[Validator] = None
    owner_field: Optional[str] = None
    filter_fields: tuple[str, ...] = ()
    update_fields: tuple[str, ...] = ()
    order_fields: tuple[str, ...] = ("created_at", "updated_at")

    @property
    def owned(self) -> bool:
        return self.owner_field is not None

    @property
    def owner_column(self):
        if self.owner_field is None:
            return None
        return getattr(self.model, self.owner_field)

    def validate_list(self, options) -> None:
        validate_list_options(options, self.order_fields)
