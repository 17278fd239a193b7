"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager patched to the test engine, so get_db, its rollback and its
      error mapping run exactly as in production
    - get_anthropic_client overridden per test via the mock_ai fixture

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Seed fixtures write through test_db and commit; assertions go through the API
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from onboarding.api.routes.ai_overview import get_anthropic_client
from onboarding.db.base import Base
from onboarding.infrastructure.database import DatabaseSessionManager
import onboarding.infrastructure.database as db_module
from onboarding.main import app
from onboarding.models.employee import Employee
from onboarding.models.task import Task
from onboarding.models.template import Template
from onboarding.models.template_task import TemplateTask

from tests.services.mock_anthropic import MockAnthropicClient


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client; requests go through the real get_db and session manager."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def mock_ai():
    """Install a MockAnthropicClient as the overview client.

    Configure with mock_ai.responses / mock_ai.error before calling the route.
    """
    mock = MockAnthropicClient()
    app.dependency_overrides[get_anthropic_client] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_anthropic_client, None)


@pytest.fixture
def no_ai():
    """Simulate a deployment with no Anthropic API key."""
    app.dependency_overrides[get_anthropic_client] = lambda: None
    yield
    app.dependency_overrides.pop(get_anthropic_client, None)


@pytest.fixture
async def seed_employee(test_db):
    """Employee with two tasks, one complete."""
    employee = Employee(
        name="John Doe", email="john.doe@company.com", department="Engineering",
    )
    test_db.add(employee)
    await test_db.flush()
    test_db.add_all([
        Task(
            title="Complete HR paperwork",
            description="Fill out all required HR forms",
            employee_id=employee.id,
        ),
        Task(
            title="Meet with manager",
            employee_id=employee.id,
            is_complete=True,
        ),
    ])
    await test_db.commit()
    return employee


@pytest.fixture
async def seed_template(test_db):
    """Template with three task definitions, not default."""
    template = Template(name="Engineering Onboarding", description="New engineers")
    test_db.add(template)
    await test_db.flush()
    test_db.add_all([
        TemplateTask(
            title="Set up development environment",
            description="Install necessary software and tools",
            template_id=template.id,
        ),
        TemplateTask(title="Complete security training", template_id=template.id),
        TemplateTask(title="Review design system", template_id=template.id),
    ])
    await test_db.commit()
    return template
