"""Task Schemas — per-employee onboarding items.

Invariants:
    - TaskCreate.title and employee_id are required; title stripped, non-empty
    - TaskUpdate is partial: only fields sent by the client are applied
    - Explicit null for is_complete is rejected; blank description becomes None
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from onboarding.schemas._fields import reject_null, strip_optional, strip_required


class TaskCreate(BaseModel):
    """Create a task for an existing employee."""
    title: str = Field(min_length=1, max_length=300)
    description: str | None = Field(None, max_length=5000)
    employee_id: UUID

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_required(v, "title")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TaskUpdate(BaseModel):
    """Partial task update."""
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = Field(None, max_length=5000)
    is_complete: bool | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else strip_required(v, "title")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("is_complete")
    @classmethod
    def is_complete_not_null(cls, v: bool | None) -> bool:
        return reject_null(v, "is_complete")


class TaskResponse(BaseModel):
    """Task as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    is_complete: bool
    employee_id: UUID
    created_at: datetime
    updated_at: datetime
