"""Membership ORM model: links a user to an organisation."""

import uuid

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from boilerplate.db.base import Base, EntityMixin, SoftDeleteMixin, TimestampMixin


class Membership(EntityMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A user's membership of an organisation."""

    __tablename__ = "memberships"

    org_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("organisations.id"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)

    __table_args__ = (
        Index("ix_memberships_org_id", "org_id"),
        Index("ix_memberships_user_id", "user_id"),
    )
