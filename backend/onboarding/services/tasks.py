"""Task Data Access — CRUD and completion toggle for per-employee tasks."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import EmployeeId, TaskId
from onboarding.core.errors import ResourceNotFoundError
from onboarding.core.validation import require_fields
from onboarding.models.employee import Employee
from onboarding.models.task import Task

logger = logging.getLogger(__name__)


async def create_task(
    db: AsyncSession,
    title: str,
    employee_id: EmployeeId,
    description: str | None = None,
) -> Task:
    """Create an incomplete task for an existing employee."""
    require_fields(title=title)
    if await db.get(Employee, employee_id) is None:
        raise ResourceNotFoundError("Employee", str(employee_id))
    task = Task(title=title, description=description, employee_id=employee_id)
    db.add(task)
    await db.commit()
    await db.refresh(task)
    return task


async def get_task(db: AsyncSession, task_id: TaskId) -> Task:
    task = await db.get(Task, task_id)
    if task is None:
        raise ResourceNotFoundError("Task", str(task_id))
    return task


async def update_task(db: AsyncSession, task_id: TaskId, changes: dict) -> Task:
    """Apply a partial update. Keys: title, description, is_complete."""
    if "title" in changes:
        require_fields(title=changes["title"])
    task = await get_task(db, task_id)
    for key, value in changes.items():
        setattr(task, key, value)
    await db.commit()
    await db.refresh(task)
    return task


async def toggle_task_complete(db: AsyncSession, task_id: TaskId) -> Task:
    """Flip is_complete."""
    task = await get_task(db, task_id)
    task.is_complete = not task.is_complete
    await db.commit()
    await db.refresh(task)
    return task


async def delete_task(db: AsyncSession, task_id: TaskId) -> None:
    task = await get_task(db, task_id)
    await db.delete(task)
    await db.commit()
    logger.info("Task deleted", extra={"task_id": task_id})
