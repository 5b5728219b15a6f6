"""Pure option validators.

No I/O. Every function either returns None or raises a ValidationError
subclass, and repositories call them before touching the session.
"""

from typing import Iterable

from boilerplate.crud.caller import is_nil_id
from boilerplate.crud.options import (
    ListOptions,
    OwnedCreateOptions,
    TitleCreateOptions,
    TitleUpdateOptions,
)
from boilerplate.exceptions import (
    InvalidFiltersError,
    InvalidOwnerError,
    InvalidTitleError,
)

MAX_LIMIT = 100
ORDER_DIRECTIONS = ("asc", "desc")


def validate_title(title: str) -> None:
    if not title:
        raise InvalidTitleError(detail="title must not be empty")


def validate_create_options(options: TitleCreateOptions) -> None:
    """Create rule for resources without an owner."""
    validate_title(options.title)


def validate_owned_create_options(options: OwnedCreateOptions) -> None:
    """Create rule for ownership-bearing resources: title, then owner."""
    validate_title(options.title)
    if is_nil_id(options.owner_id):
        raise InvalidOwnerError(detail="owner_id must be a non-zero UUID")


def validate_list_options(
    options: ListOptions, orderable: Iterable[str] = ()
) -> None:
    """Pagination bounds, ordering direction, and ordering column."""
    if options.skip < 0:
        raise InvalidFiltersError(detail=f"skip={options.skip} is negative")
    if options.limit < 0 or options.limit > MAX_LIMIT:
        raise InvalidFiltersError(
            detail=f"limit={options.limit} is outside 0..{MAX_LIMIT}"
        )
    if options.order_direction and options.order_direction.lower() not in ORDER_DIRECTIONS:
        raise InvalidFiltersError(
            detail=f"order_direction={options.order_direction!r}",
            suggestion="Use 'asc' or 'desc'",
        )
    orderable = tuple(orderable)
    if options.order_by and options.order_by not in orderable:
        raise InvalidFiltersError(
            detail=f"order_by={options.order_by!r}",
            suggestion=f"Order by one of: {', '.join(orderable)}",
        )


def validate_update_options(options: TitleUpdateOptions) -> None:
    validate_title(options.title)
