"""Template Task Routes — deletion of a single task definition."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import TemplateTaskId
from onboarding.infrastructure.database import get_db
from onboarding.services import templates as template_service

router = APIRouter(prefix="/api/v1/template-tasks", tags=["templates"])


@router.delete("/{template_task_id}")
async def delete_template_task(
    template_task_id: UUID, db: AsyncSession = Depends(get_db),
):
    await template_service.delete_template_task(
        db, TemplateTaskId(template_task_id),
    )
    return {"success": True}
