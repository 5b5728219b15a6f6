"""Organisation ORM model.

owner_id is written once, at creation, from the authenticated caller and is
not part of any update whitelist.
"""

import uuid

from sqlalchemy import CheckConstraint, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from boilerplate.db.base import Base, EntityMixin, SoftDeleteMixin, TimestampMixin


class Organisation(EntityMixin, TimestampMixin, SoftDeleteMixin, Base):
    """An organisation owned by the user who created it."""

    __tablename__ = "organisations"

    title: Mapped[str] = mapped_column(String, nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_organisations_title_not_empty"),
        Index("ix_organisations_owner_id", "owner_id"),
    )
