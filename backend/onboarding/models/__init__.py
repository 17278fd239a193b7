"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employee owns Tasks; Template owns TemplateTasks

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from onboarding.models.employee import Employee  # noqa: F401
from onboarding.models.task import Task  # noqa: F401
from onboarding.models.template import Template  # noqa: F401
from onboarding.models.template_task import TemplateTask  # noqa: F401
