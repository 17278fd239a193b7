"""Template Data Access — templates, their task definitions, assignment, and the default flag.

Invariants:
    - assign_template_to_employee creates exactly len(template.tasks) incomplete tasks
    - The template and its TemplateTasks are never modified by assignment
    - set_default_template clears every other default and sets the target in ONE commit
    - auto_assign_default_template returns None when no template is flagged default

Design Decisions:
    - Copy rule delegated to core.template_assignment (pure, unit-tested separately)
    - commit=False on auto-assign lets create_employee wrap both writes in one transaction
    - Employee existence checked before copying: a dangling employee_id is a 404, not a
      database integrity failure
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.domain_types import (
    AutoAssignResult, EmployeeId, TemplateId, TemplateTaskId,
)
from onboarding.core.errors import ResourceNotFoundError
from onboarding.core.template_assignment import tasks_from_template
from onboarding.core.validation import require_fields
from onboarding.models.employee import Employee
from onboarding.models.task import Task
from onboarding.models.template import Template
from onboarding.models.template_task import TemplateTask

logger = logging.getLogger(__name__)


# ─── Templates ──────────────────────────────────────────────────

async def list_templates_with_tasks(db: AsyncSession) -> list[Template]:
    """All templates, newest first, each with their task definitions."""
    result = await db.execute(
        select(Template)
        .order_by(Template.created_at.desc())
        .execution_options(populate_existing=True),
    )
    return list(result.scalars().all())


async def get_template(db: AsyncSession, template_id: TemplateId) -> Template:
    """Template with task definitions, or ResourceNotFoundError."""
    result = await db.execute(
        select(Template)
        .where(Template.id == template_id)
        .execution_options(populate_existing=True),
    )
    template = result.scalar_one_or_none()
    if not template:
        raise ResourceNotFoundError("Template", str(template_id))
    return template


async def create_template(
    db: AsyncSession, name: str, description: str | None = None,
) -> Template:
    require_fields(name=name)
    template = Template(name=name, description=description)
    db.add(template)
    await db.commit()
    return await get_template(db, template.id)


async def update_template(
    db: AsyncSession, template_id: TemplateId, changes: dict,
) -> Template:
    """Apply a partial update. Keys: name, description."""
    if "name" in changes:
        require_fields(name=changes["name"])
    template = await get_template(db, template_id)
    for key, value in changes.items():
        setattr(template, key, value)
    await db.commit()
    return await get_template(db, template_id)


async def delete_template(db: AsyncSession, template_id: TemplateId) -> None:
    """Delete a template and, by cascade, its task definitions."""
    template = await get_template(db, template_id)
    await db.delete(template)
    await db.commit()
    logger.info("Template deleted", extra={"template_id": template_id})


# ─── Template tasks ─────────────────────────────────────────────

async def create_template_task(
    db: AsyncSession,
    template_id: TemplateId,
    title: str,
    description: str | None = None,
) -> TemplateTask:
    """Add a task definition to an existing template."""
    require_fields(title=title)
    if await db.get(Template, template_id) is None:
        raise ResourceNotFoundError("Template", str(template_id))
    template_task = TemplateTask(
        title=title, description=description, template_id=template_id,
    )
    db.add(template_task)
    await db.commit()
    await db.refresh(template_task)
    return template_task


async def delete_template_task(
    db: AsyncSession, template_task_id: TemplateTaskId,
) -> None:
    template_task = await db.get(TemplateTask, template_task_id)
    if template_task is None:
        raise ResourceNotFoundError("TemplateTask", str(template_task_id))
    await db.delete(template_task)
    await db.commit()


# ─── Default flag ───────────────────────────────────────────────

async def get_default_template(db: AsyncSession) -> Template | None:
    result = await db.execute(
        select(Template)
        .where(Template.is_default.is_(True))
        .order_by(Template.updated_at.desc())
        .limit(1)
        .execution_options(populate_existing=True),
    )
    return result.scalars().first()


async def set_default_template(db: AsyncSession, template_id: TemplateId) -> Template:
    """Make template_id the only default template."""
    template = await get_template(db, template_id)
    await db.execute(
        update(Template)
        .where(Template.is_default.is_(True), Template.id != template.id)
        .values(is_default=False)
        .execution_options(synchronize_session="fetch"),
    )
    template.is_default = True
    await db.commit()
    logger.info("Default template set", extra={"template_id": template_id})
    return await get_template(db, template_id)


# ─── Assignment ─────────────────────────────────────────────────

def _copy_template_tasks(
    db: AsyncSession, template: Template, employee_id: EmployeeId,
) -> int:
    """Stage one Task per TemplateTask; caller commits."""
    drafts = tasks_from_template(template.tasks, employee_id)
    db.add_all([
        Task(
            title=d.title,
            description=d.description,
            employee_id=d.employee_id,
            is_complete=d.is_complete,
        )
        for d in drafts
    ])
    return len(drafts)


async def _require_employee(db: AsyncSession, employee_id: EmployeeId) -> None:
    if await db.get(Employee, employee_id) is None:
        raise ResourceNotFoundError("Employee", str(employee_id))


async def assign_template_to_employee(
    db: AsyncSession, template_id: TemplateId, employee_id: EmployeeId,
) -> int:
    """Copy every task definition of the template onto the employee.

    Returns the number of tasks created.
    """
    template = await get_template(db, template_id)
    await _require_employee(db, employee_id)
    count = _copy_template_tasks(db, template, employee_id)
    await db.commit()
    logger.info(
        "Template assigned",
        extra={
            "template_id": template_id,
            "employee_id": employee_id,
            "tasks_created": count,
        },
    )
    return count


async def auto_assign_default_template(
    db: AsyncSession, employee_id: EmployeeId, commit: bool = True,
) -> AutoAssignResult | None:
    """Copy the default template onto the employee, if a default exists."""
    template = await get_default_template(db)
    if template is None:
        return None
    await _require_employee(db, employee_id)
    count = _copy_template_tasks(db, template, employee_id)
    if commit:
        await db.commit()
    logger.info(
        "Default template auto-assigned",
        extra={
            "template_id": template.id,
            "employee_id": employee_id,
            "tasks_created": count,
        },
    )
    return AutoAssignResult(template_name=template.name, tasks_created=count)
