"""AI Overview Route — natural-language onboarding status summary.

Invariants:
    - POST /ai-overview returns {"overview": str}
    - No API key configured → 500 AI_NOT_CONFIGURED
    - Anthropic failures surface as ANTHROPIC_API_ERROR (401 for bad key, else 503)

Design Decisions:
    - Anthropic client is a lazily built singleton: AsyncAnthropic is stateless and
      connection-pool-safe, so one instance serves every request
    - get_anthropic_client is a FastAPI dependency so tests can override it
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from onboarding.config import get_settings
from onboarding.infrastructure.anthropic_client import ResilientAnthropicClient
from onboarding.infrastructure.database import get_db
from onboarding.schemas.overview import OverviewResponse
from onboarding.services.ai_overview import OverviewService

router = APIRouter(prefix="/api/v1/ai-overview", tags=["ai"])

_anthropic_client: ResilientAnthropicClient | None = None


def get_anthropic_client() -> ResilientAnthropicClient | None:
    """Singleton Anthropic client, or None when no API key is configured."""
    global _anthropic_client
    settings = get_settings()
    if not settings.anthropic_api_key:
        return None
    if _anthropic_client is None:
        _anthropic_client = ResilientAnthropicClient(
            api_key=settings.anthropic_api_key,
            max_retries=settings.anthropic_max_retries,
            base_delay_ms=settings.anthropic_base_delay_ms,
            max_delay_ms=settings.anthropic_max_delay_ms,
            timeout_seconds=settings.anthropic_timeout_seconds,
        )
    return _anthropic_client


@router.post("", response_model=OverviewResponse)
async def generate_overview(
    db: AsyncSession = Depends(get_db),
    client: ResilientAnthropicClient | None = Depends(get_anthropic_client),
):
    """Summarize every employee's onboarding progress."""
    settings = get_settings()
    service = OverviewService(
        db, client,
        model=settings.overview_model,
        max_tokens=settings.overview_max_tokens,
    )
    return OverviewResponse(overview=await service.generate())
