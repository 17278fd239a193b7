"""Employee Routes — CRUD endpoints; creation auto-assigns the default template.

Invariants:
    - POST returns 201 with {employee, auto_assigned}
    - auto_assigned is null when no default template exists
    - Unknown ids → 404 via ResourceNotFoundError (global handler)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import EmployeeId
from onboarding.infrastructure.database import get_db
from onboarding.schemas.employee import (
    AutoAssigned,
    EmployeeCreate,
    EmployeeCreated,
    EmployeeResponse,
    EmployeeUpdate,
    EmployeeWithTasks,
)
from onboarding.services import employees as employee_service

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeWithTasks])
async def list_employees(db: AsyncSession = Depends(get_db)):
    """All employees with their tasks, newest first."""
    employees = await employee_service.list_employees_with_tasks(db)
    return [EmployeeWithTasks.model_validate(e) for e in employees]


@router.post(
    "", response_model=EmployeeCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate, db: AsyncSession = Depends(get_db),
):
    """Create an employee and auto-assign the default template."""
    employee, auto = await employee_service.create_employee(
        db, name=body.name, email=body.email, department=body.department,
    )
    return EmployeeCreated(
        employee=EmployeeResponse.model_validate(employee),
        auto_assigned=(
            AutoAssigned(
                template=auto.template_name,
                tasks_created=auto.tasks_created,
            )
            if auto else None
        ),
    )


@router.get("/{employee_id}", response_model=EmployeeWithTasks)
async def get_employee(employee_id: UUID, db: AsyncSession = Depends(get_db)):
    employee = await employee_service.get_employee(db, EmployeeId(employee_id))
    return EmployeeWithTasks.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeWithTasks)
async def update_employee(
    employee_id: UUID,
    body: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partial update — only fields present in the body are changed."""
    employee = await employee_service.update_employee(
        db, EmployeeId(employee_id), body.model_dump(exclude_unset=True),
    )
    return EmployeeWithTasks.model_validate(employee)


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: UUID, db: AsyncSession = Depends(get_db),
):
    await employee_service.delete_employee(db, EmployeeId(employee_id))
    return {"success": True}
