"""Task Routes — per-employee onboarding items."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import EmployeeId, TaskId
from onboarding.infrastructure.database import get_db
from onboarding.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from onboarding.services import tasks as task_service

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    task = await task_service.create_task(
        db,
        title=body.title,
        employee_id=EmployeeId(body.employee_id),
        description=body.description,
    )
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: UUID, db: AsyncSession = Depends(get_db)):
    task = await task_service.get_task(db, TaskId(task_id))
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID, body: TaskUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update — title, description and/or is_complete."""
    task = await task_service.update_task(
        db, TaskId(task_id), body.model_dump(exclude_unset=True),
    )
    return TaskResponse.model_validate(task)


@router.post("/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(task_id: UUID, db: AsyncSession = Depends(get_db)):
    """Flip the completion flag."""
    task = await task_service.toggle_task_complete(db, TaskId(task_id))
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}")
async def delete_task(task_id: UUID, db: AsyncSession = Depends(get_db)):
    await task_service.delete_task(db, TaskId(task_id))
    return {"success": True}
