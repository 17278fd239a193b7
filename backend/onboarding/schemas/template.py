"""Template Schemas — reusable task lists and their definitions.

Invariants:
    - TemplateCreate.name and TemplateTaskCreate.title required, stripped, non-empty
    - AssignTemplateRequest.employee_id required
    - is_default is never set through create/update (only via set-default)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from onboarding.schemas._fields import strip_optional, strip_required


class TemplateCreate(BaseModel):
    """Template creation — name required."""
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v, "name")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TemplateUpdate(BaseModel):
    """Partial template update."""
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=5000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else strip_required(v, "name")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TemplateTaskCreate(BaseModel):
    """Template task creation — title required."""
    title: str = Field(min_length=1, max_length=300)
    description: str | None = Field(None, max_length=5000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_required(v, "title")

    @field_validator("description")
    @classmethod
    def strip_description(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TemplateTaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str | None
    template_id: UUID
    created_at: datetime
    updated_at: datetime


class TemplateResponse(BaseModel):
    """Template including its task definitions, newest first."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    is_default: bool
    created_at: datetime
    updated_at: datetime
    tasks: list[TemplateTaskResponse] = []


class AssignTemplateRequest(BaseModel):
    employee_id: UUID


class AssignTemplateResponse(BaseModel):
    """Result of copying a template onto an employee."""
    template_id: UUID
    employee_id: UUID
    count: int
