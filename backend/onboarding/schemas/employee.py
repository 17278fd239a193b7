"""Employee Schemas — request validation and response shapes.

Invariants:
    - EmployeeCreate.name and .email are required, stripped, non-empty
    - EmployeeUpdate is partial: unset fields are left untouched
    - Explicit null for onboarded is rejected; blank department becomes None
    - EmployeeCreated.auto_assigned is null when no default template exists
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from onboarding.schemas._fields import reject_null, strip_optional, strip_required
from onboarding.schemas.task import TaskResponse


class EmployeeCreate(BaseModel):
    """Employee creation — name and email required."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=1, max_length=320)
    department: str | None = Field(None, max_length=200)

    @field_validator("name", "email")
    @classmethod
    def strip_required_fields(cls, v: str, info: ValidationInfo) -> str:
        return strip_required(v, info.field_name)

    @field_validator("department")
    @classmethod
    def strip_department(cls, v: str | None) -> str | None:
        return strip_optional(v)


class EmployeeUpdate(BaseModel):
    """Partial employee update."""
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, min_length=1, max_length=320)
    department: str | None = Field(None, max_length=200)
    onboarded: bool | None = None

    @field_validator("name", "email")
    @classmethod
    def strip_required_fields(cls, v: str | None, info: ValidationInfo) -> str | None:
        return None if v is None else strip_required(v, info.field_name)

    @field_validator("department")
    @classmethod
    def strip_department(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("onboarded")
    @classmethod
    def onboarded_not_null(cls, v: bool | None) -> bool:
        return reject_null(v, "onboarded")


class EmployeeResponse(BaseModel):
    """Employee without tasks."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    department: str | None
    onboarded: bool
    created_at: datetime
    updated_at: datetime


class EmployeeWithTasks(EmployeeResponse):
    """Employee including tasks, newest first."""
    tasks: list[TaskResponse] = []


class AutoAssigned(BaseModel):
    """Summary of the default template copied onto a new employee."""
    template: str
    tasks_created: int


class EmployeeCreated(BaseModel):
    """Response for POST /employees."""
    employee: EmployeeResponse
    auto_assigned: AutoAssigned | None = None
