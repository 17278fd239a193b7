"""Employee Data Access — CRUD over employees, with default-template auto-assign on create.

Invariants:
    - Reads always return tasks newest first (relationship order_by)
    - create_employee and its auto-assign commit in ONE transaction
    - Reads use populate_existing so tasks added in the same session are visible

Design Decisions:
    - Module-level async functions over a repository class: each op is one round trip
    - update_employee takes a dict of changes: the schema's exclude_unset dump maps 1:1
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import AutoAssignResult, EmployeeId
from onboarding.core.errors import ResourceNotFoundError
from onboarding.core.validation import require_fields
from onboarding.models.employee import Employee
from onboarding.services.templates import auto_assign_default_template

logger = logging.getLogger(__name__)

_REQUIRED_ON_UPDATE = ("name", "email")


async def list_employees_with_tasks(db: AsyncSession) -> list[Employee]:
    """All employees, newest first, each with their tasks."""
    result = await db.execute(
        select(Employee)
        .order_by(Employee.created_at.desc())
        .execution_options(populate_existing=True),
    )
    return list(result.scalars().all())


async def get_employee(db: AsyncSession, employee_id: EmployeeId) -> Employee:
    """Employee with tasks, or ResourceNotFoundError."""
    result = await db.execute(
        select(Employee)
        .where(Employee.id == employee_id)
        .execution_options(populate_existing=True),
    )
    employee = result.scalar_one_or_none()
    if not employee:
        raise ResourceNotFoundError("Employee", str(employee_id))
    return employee


async def create_employee(
    db: AsyncSession,
    name: str,
    email: str,
    department: str | None = None,
) -> tuple[Employee, AutoAssignResult | None]:
    """Create an employee and copy the default template's tasks onto them."""
    require_fields(name=name, email=email)
    employee = Employee(name=name, email=email, department=department)
    db.add(employee)
    await db.flush()

    auto_assigned = await auto_assign_default_template(
        db, employee.id, commit=False,
    )
    await db.commit()
    logger.info(
        "Employee created",
        extra={
            "employee_id": employee.id,
            "tasks_created": auto_assigned.tasks_created if auto_assigned else 0,
        },
    )
    return await get_employee(db, employee.id), auto_assigned


async def update_employee(
    db: AsyncSession, employee_id: EmployeeId, changes: dict,
) -> Employee:
    """Apply a partial update. Keys: name, email, department, onboarded."""
    require_fields(**{
        k: changes[k] for k in _REQUIRED_ON_UPDATE if k in changes
    })
    employee = await get_employee(db, employee_id)
    for key, value in changes.items():
        setattr(employee, key, value)
    await db.commit()
    return await get_employee(db, employee_id)


async def delete_employee(db: AsyncSession, employee_id: EmployeeId) -> None:
    """Delete an employee and, by cascade, their tasks."""
    employee = await get_employee(db, employee_id)
    await db.delete(employee)
    await db.commit()
    logger.info("Employee deleted", extra={"employee_id": employee_id})
