"""Record ORM model. Same shape as Organisation: a title plus an owner."""

import uuid

from sqlalchemy import CheckConstraint, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from boilerplate.db.base import Base, EntityMixin, SoftDeleteMixin, TimestampMixin


class Record(EntityMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A titled record owned by the user who created it."""

    __tablename__ = "records"

    title: Mapped[str] = mapped_column(String, nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_records_title_not_empty"),
        Index("ix_records_owner_id", "owner_id"),
    )
