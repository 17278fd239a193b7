"""Template Routes — templates, their task definitions, assignment, and default flag.

Invariants:
    - POST /{id}/assign returns 201 with the number of tasks copied
    - POST /{id}/set-default returns the template, now the only default
    - Template task deletion lives in template_tasks.py (own resource path)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import EmployeeId, TemplateId
from onboarding.infrastructure.database import get_db
from onboarding.schemas.template import (
    AssignTemplateRequest,
    AssignTemplateResponse,
    TemplateCreate,
    TemplateResponse,
    TemplateTaskCreate,
    TemplateTaskResponse,
    TemplateUpdate,
)
from onboarding.services import templates as template_service

router = APIRouter(prefix="/api/v1/templates", tags=["templates"])


@router.get("", response_model=list[TemplateResponse])
async def list_templates(db: AsyncSession = Depends(get_db)):
    templates = await template_service.list_templates_with_tasks(db)
    return [TemplateResponse.model_validate(t) for t in templates]


@router.post(
    "", response_model=TemplateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_template(
    body: TemplateCreate, db: AsyncSession = Depends(get_db),
):
    template = await template_service.create_template(
        db, name=body.name, description=body.description,
    )
    return TemplateResponse.model_validate(template)


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(template_id: UUID, db: AsyncSession = Depends(get_db)):
    template = await template_service.get_template(db, TemplateId(template_id))
    return TemplateResponse.model_validate(template)


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: UUID,
    body: TemplateUpdate,
    db: AsyncSession = Depends(get_db),
):
    template = await template_service.update_template(
        db, TemplateId(template_id), body.model_dump(exclude_unset=True),
    )
    return TemplateResponse.model_validate(template)


@router.delete("/{template_id}")
async def delete_template(
    template_id: UUID, db: AsyncSession = Depends(get_db),
):
    await template_service.delete_template(db, TemplateId(template_id))
    return {"success": True}


@router.post(
    "/{template_id}/tasks", response_model=TemplateTaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_template_task(
    template_id: UUID,
    body: TemplateTaskCreate,
    db: AsyncSession = Depends(get_db),
):
    template_task = await template_service.create_template_task(
        db, TemplateId(template_id), title=body.title, description=body.description,
    )
    return TemplateTaskResponse.model_validate(template_task)


@router.post(
    "/{template_id}/assign", response_model=AssignTemplateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def assign_template(
    template_id: UUID,
    body: AssignTemplateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Copy the template's tasks onto an employee."""
    count = await template_service.assign_template_to_employee(
        db, TemplateId(template_id), EmployeeId(body.employee_id),
    )
    return AssignTemplateResponse(
        template_id=template_id, employee_id=body.employee_id, count=count,
    )


@router.post("/{template_id}/set-default", response_model=TemplateResponse)
async def set_default_template(
    template_id: UUID, db: AsyncSession = Depends(get_db),
):
    """Flag this template as default, clearing every other default."""
    template = await template_service.set_default_template(db, TemplateId(template_id))
    return TemplateResponse.model_validate(template)
