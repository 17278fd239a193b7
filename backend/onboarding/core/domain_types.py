"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId, TaskId, TemplateId, TemplateTaskId wrap UUIDs
    - TaskDraft is an unsaved task: the output of copying a template
    - AutoAssignResult is only produced when a default template exists

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Frozen dataclasses for value objects: drafts never mutate after construction
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", UUID)
TaskId = NewType("TaskId", UUID)
TemplateId = NewType("TemplateId", UUID)
TemplateTaskId = NewType("TemplateTaskId", UUID)


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class TaskDraft:
    """A per-employee task that has not been persisted yet."""
    title: str
    description: str | None
    employee_id: EmployeeId
    is_complete: bool = False


@dataclass(frozen=True)
class AutoAssignResult:
    """Outcome of copying the default template onto a new employee."""
    template_name: str
    tasks_created: int
