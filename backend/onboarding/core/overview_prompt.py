"""Overview Prompt — turns employee/task state into the AI overview prompt.

Invariants:
    - Employees serialized as {name, department, onboarded, tasks[{title, completed}]}
    - Missing department rendered as "Not assigned"
    - Empty employee list never reaches the AI API (EMPTY_OVERVIEW returned instead)
    - Pure functions only: no IO, no client

Design Decisions:
    - JSON block inside the prompt (indent=2): the model reads structure reliably
    - Protocol inputs: accepts ORM rows or plain test doubles
"""

import json
from typing import Iterable, Protocol

EMPTY_OVERVIEW = "No employees found. Add employees to get started with onboarding!"
UNASSIGNED_DEPARTMENT = "Not assigned"

_PROMPT_TEMPLATE = """You are an HR onboarding assistant analyzing employee progress. Here is the current status of all employees:

{status_json}

Please provide a concise, actionable overview of the onboarding status. For each employee with incomplete tasks:
1. Address them by name
2. List their specific pending tasks
3. Provide priority recommendations

Keep the tone professional but friendly. Format your response in clear paragraphs, not bullet points. Focus on what needs to be done next."""


class TaskLike(Protocol):
    title: str
    is_complete: bool


class EmployeeLike(Protocol):
    name: str
    department: str | None
    onboarded: bool
    tasks: list


def summarize_employee(employee: EmployeeLike) -> dict:
    """Reduce an employee to the fields the overview needs."""
    return {
        "name": employee.name,
        "department": employee.department or UNASSIGNED_DEPARTMENT,
        "onboarded": employee.onboarded,
        "tasks": [
            {"title": t.title, "completed": t.is_complete}
            for t in employee.tasks
        ],
    }


def build_overview_prompt(employees: Iterable[EmployeeLike]) -> str:
    """Build the full prompt for a non-empty set of employees."""
    status = [summarize_employee(e) for e in employees]
    return _PROMPT_TEMPLATE.format(
        status_json=json.dumps(status, indent=2, ensure_ascii=False),
    )
