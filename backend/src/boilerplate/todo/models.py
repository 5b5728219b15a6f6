"""Todo ORM model. Todos have no owner; every caller sees every live todo."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from boilerplate.db.base import Base, EntityMixin, SoftDeleteMixin, TimestampMixin


class Todo(EntityMixin, TimestampMixin, SoftDeleteMixin, Base):
    """A titled todo item."""

    __tablename__ = "todos"

    title: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_todos_title_not_empty"),
    )
