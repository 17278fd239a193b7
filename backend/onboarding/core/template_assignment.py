"""Template Assignment — pure copy rule from template tasks to employee tasks.

Invariants:
    - One TaskDraft per template task, in the template's order
    - Every draft starts incomplete (is_complete=False)
    - Title and description copied verbatim; the template is never mutated

Design Decisions:
    - Structural Protocol for the input: works with ORM rows, schemas, or test doubles
    - Pure function, no IO: services persist the drafts
"""

from typing import Iterable, Protocol

from onboarding.core.domain_types import EmployeeId, TaskDraft


class TemplateTaskLike(Protocol):
    """Anything with a title and optional description."""
    title: str
    description: str | None


def tasks_from_template(
    template_tasks: Iterable[TemplateTaskLike], employee_id: EmployeeId,
) -> list[TaskDraft]:
    """Copy template task definitions into drafts owned by employee_id."""
    return [
        TaskDraft(
            title=t.title,
            description=t.description,
            employee_id=employee_id,
            is_complete=False,
        )
        for t in template_tasks
    ]
