"""Initial schema — employees, tasks, templates, template_tasks.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("department", sa.String(200), nullable=True),
        sa.Column("onboarded", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "tasks",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_complete", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "employee_id", UUID(as_uuid=True),
            sa.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_tasks_employee_id", "tasks", ["employee_id"])

    op.create_table(
        "templates",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index(
        "uq_templates_default", "templates", ["is_default"], unique=True,
        postgresql_where=sa.text("is_default"),
    )

    op.create_table(
        "template_tasks",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column(
            "template_id", UUID(as_uuid=True),
            sa.ForeignKey("templates.id", ondelete="CASCADE"), nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_template_tasks_template_id", "template_tasks", ["template_id"])


def downgrade() -> None:
    op.drop_index("ix_template_tasks_template_id", table_name="template_tasks")
    op.drop_table("template_tasks")
    op.drop_index("uq_templates_default", table_name="templates")
    op.drop_table("templates")
    op.drop_index("ix_tasks_employee_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("employees")
