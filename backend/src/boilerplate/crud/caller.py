"""Explicit caller identity passed to every data-access call.

A Caller is either an authenticated user, whose reads and writes on
ownership-bearing resources are narrowed to rows they own, or the internal
caller, which sees and affects every row. There is no implicit fallback:
code that wants unscoped access has to ask for Caller.internal() by name.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from boilerplate.exceptions import InvalidIDError

NIL_UUID = uuid.UUID(int=0)


def is_nil_id(value: Optional[uuid.UUID]) -> bool:
    """True for None and the all-zero UUID."""
    return value is None or value == NIL_UUID


@dataclass(frozen=True)
class Caller:
    """Identity on whose behalf a repository operation runs."""

    owner_id: Optional[uuid.UUID]

    @classmethod
    def user(cls, user_id: Optional[uuid.UUID]) -> Caller:
        """An authenticated principal. Ownership filtering applies."""
        if is_nil_id(user_id):
            raise InvalidIDError(
                message="invalid user id",
                detail="Caller.user() requires a non-zero UUID",
            )
        return cls(owner_id=user_id)

    @classmethod
    def internal(cls) -> Caller:
        """Trusted in-process caller. No ownership filtering.

        Security-sensitive: only use for migrations, admin tooling, tests,
        and resources without ownership semantics.
        """
        return cls(owner_id=None)

    @property
    def is_internal(self) -> bool:
        return self.owner_id is None
