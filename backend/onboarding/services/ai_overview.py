"""AI Overview Service — summarizes onboarding status through the Anthropic API.

Invariants:
    - Missing client (no API key) → AIConfigurationError, checked before any DB work
    - No employees → EMPTY_OVERVIEW, the API is never called
    - Raw model text returned unchanged

Design Decisions:
    - Client injected (None when unconfigured): route decides how it is built, tests pass a mock
    - Prompt built by core.overview_prompt (pure)
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.core.errors import AIConfigurationError
from onboarding.core.overview_prompt import EMPTY_OVERVIEW, build_overview_prompt
from onboarding.infrastructure.anthropic_client import ResilientAnthropicClient
from onboarding.services.employees import list_employees_with_tasks

logger = logging.getLogger(__name__)


class OverviewService:
    """Builds the onboarding status prompt and asks the model for an overview."""

    def __init__(
        self,
        db: AsyncSession,
        client: ResilientAnthropicClient | None,
        model: str,
        max_tokens: int,
    ):
        self.db = db
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    async def generate(self) -> str:
        if self.client is None:
            raise AIConfigurationError()

        employees = await list_employees_with_tasks(self.db)
        if not employees:
            return EMPTY_OVERVIEW

        prompt = build_overview_prompt(employees)
        overview = await self.client.generate_text(
            prompt, model=self.model, max_tokens=self.max_tokens,
        )
        logger.info(f"AI overview generated for {len(employees)} employees")
        return overview
