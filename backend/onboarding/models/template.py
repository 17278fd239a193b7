"""Template ORM — a reusable, named list of onboarding task definitions.

Invariants:
    - At most one row has is_default=True (partial unique index uq_templates_default)
    - cascade delete for template tasks: a template owns its definitions

Design Decisions:
    - set_default_template clears the old default before flagging the new one, so the
      index holds at every statement; a concurrent swap that loses the race fails the
      commit instead of leaving two defaults
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from onboarding.db.base import Base


class Template(Base):
    """Template aggregate root — owns its TemplateTasks."""
    __tablename__ = "templates"
    __table_args__ = (
        Index(
            "uq_templates_default", "is_default", unique=True,
            postgresql_where=text("is_default"),
            sqlite_where=text("is_default"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_default: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    tasks: Mapped[list["TemplateTask"]] = relationship(
        "TemplateTask", back_populates="template",
        cascade="all, delete-orphan",
        lazy="selectin", order_by="TemplateTask.created_at.desc()",
    )
