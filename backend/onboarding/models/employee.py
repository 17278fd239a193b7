"""Employee ORM — a person being onboarded; aggregate root for their tasks.

Invariants:
    - id is UUID primary key
    - name and email are non-nullable; department is optional
    - onboarded defaults to False
    - updated_at refreshed on every UPDATE

Design Decisions:
    - tasks ordered newest first at the relationship level: every read path agrees
    - cascade delete for tasks: removing an employee removes their onboarding items
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from onboarding.db.base import Base


class Employee(Base):
    """Employee aggregate root — owns all onboarding tasks."""
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    department: Mapped[str | None] = mapped_column(
        String(200), nullable=True,
    )
    onboarded: Mapped[bool] = mapped_column(
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

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="employee",
        cascade="all, delete-orphan",
        lazy="selectin", order_by="Task.created_at.desc()",
    )
