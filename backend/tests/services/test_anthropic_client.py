"""Resilient Anthropic Client — retry, backoff and error mapping.

Invariants:
    - Transient errors retried up to max_retries, then AnthropicAPIError(connection_error)
    - 429 retried; exhausted retries → rate_limit with retry_after_ms from header
    - 401 → authentication, no retry
    - Other 4xx → client_error, no retry
    - Timeout → timeout, no retry
    - Text blocks joined; non-text blocks ignored

Design Decisions:
    - base_delay_ms=0 so retries sleep for 0ms (no real waiting, no patched asyncio)
    - Errors built from real SDK classes over httpx.Response objects
"""

from unittest.mock import AsyncMock

import httpx
import pytest
from anthropic import (
    APIConnectionError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    InternalServerError,
    RateLimitError,
)

from onboarding.core.errors import AnthropicAPIError
from onboarding.infrastructure.anthropic_client import (
    ResilientAnthropicClient, extract_text,
)

from tests.services.mock_anthropic import _Block, _Message, text_message

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _response(status: int, headers: dict | None = None) -> httpx.Response:
    return httpx.Response(status, request=_REQUEST, headers=headers or {})


def _client(max_retries=2) -> ResilientAnthropicClient:
    c = ResilientAnthropicClient(
        api_key="sk-ant-test-fake-key", max_retries=max_retries, base_delay_ms=0,
    )
    c.client.messages.create = AsyncMock()
    return c


async def test_generate_text_returns_joined_text():
    c = _client()
    c.client.messages.create.return_value = text_message("Hello ", "team")
    text = await c.generate_text("prompt", model="m", max_tokens=10)
    assert text == "Hello team"


async def test_generate_text_sends_single_user_message():
    c = _client()
    c.client.messages.create.return_value = text_message("ok")
    await c.generate_text("status please", model="m", max_tokens=10)
    kwargs = c.client.messages.create.call_args.kwargs
    assert kwargs["messages"] == [{"role": "user", "content": "status please"}]
    assert "system" not in kwargs


async def test_system_prompt_forwarded_when_given():
    c = _client()
    c.client.messages.create.return_value = text_message("ok")
    await c.generate_text("p", model="m", max_tokens=10, system="You are HR")
    assert c.client.messages.create.call_args.kwargs["system"] == "You are HR"


async def test_transient_error_retried_then_succeeds():
    c = _client()
    c.client.messages.create.side_effect = [
        InternalServerError("down", response=_response(500), body=None),
        text_message("recovered"),
    ]
    assert await c.generate_text("p", model="m", max_tokens=10) == "recovered"
    assert c.client.messages.create.call_count == 2


async def test_connection_error_exhausts_retries():
    c = _client(max_retries=2)
    c.client.messages.create.side_effect = APIConnectionError(request=_REQUEST)
    with pytest.raises(AnthropicAPIError) as exc:
        await c.generate_text("p", model="m", max_tokens=10)
    assert exc.value.api_error_type == "connection_error"
    assert c.client.messages.create.call_count == 3


async def test_overloaded_529_is_retried():
    c = _client()
    overloaded = InternalServerError("overloaded", response=_response(529), body=None)
    c.client.messages.create.side_effect = [overloaded, text_message("ok")]
    assert await c.generate_text("p", model="m", max_tokens=10) == "ok"


async def test_rate_limit_exhausted_reports_retry_after():
    c = _client(max_retries=0)
    c.client.messages.create.side_effect = RateLimitError(
        "slow down", response=_response(429, {"retry-after": "2"}), body=None,
    )
    with pytest.raises(AnthropicAPIError) as exc:
        await c.generate_text("p", model="m", max_tokens=10)
    assert exc.value.api_error_type == "rate_limit"
    assert exc.value.context.retry_after_ms == 2000


async def test_rate_limit_retried_without_header():
    c = _client()
    c.client.messages.create.side_effect = [
        RateLimitError("slow down", response=_response(429), body=None),
        text_message("ok"),
    ]
    assert await c.generate_text("p", model="m", max_tokens=10) == "ok"


async def test_authentication_error_not_retried():
    c = _client()
    c.client.messages.create.side_effect = AuthenticationError(
        "bad key", response=_response(401), body=None,
    )
    with pytest.raises(AnthropicAPIError) as exc:
        await c.generate_text("p", model="m", max_tokens=10)
    assert exc.value.api_error_type == "authentication"
    assert exc.value.http_status == 401
    assert c.client.messages.create.call_count == 1


async def test_bad_request_is_client_error():
    c = _client()
    c.client.messages.create.side_effect = BadRequestError(
        "bad", response=_response(400), body=None,
    )
    with pytest.raises(AnthropicAPIError) as exc:
        await c.generate_text("p", model="m", max_tokens=10)
    assert exc.value.api_error_type == "client_error"
    assert exc.value.http_status == 503
    assert c.client.messages.create.call_count == 1


async def test_timeout_not_retried():
    c = _client()
    c.client.messages.create.side_effect = APITimeoutError(request=_REQUEST)
    with pytest.raises(AnthropicAPIError) as exc:
        await c.generate_text("p", model="m", max_tokens=10)
    assert exc.value.api_error_type == "timeout"
    assert c.client.messages.create.call_count == 1


def test_extract_text_skips_non_text_blocks():
    message = _Message([
        _Block(type="text", text="A"),
        _Block(type="tool_use", id="t1", name="x", input={}),
        _Block(type="text", text="B"),
    ])
    assert extract_text(message) == "AB"


def test_backoff_bounded_by_max_delay():
    c = ResilientAnthropicClient(
        api_key="k", base_delay_ms=1000, max_delay_ms=4000,
    )
    for attempt in range(6):
        assert c._backoff(attempt) <= 4000 * 1.25
