# tests/adapters/test_llm_adapter.py
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from hook_studio.adapters.llm_adapter import OpenAIAdapter
from hook_studio.core.domain.exceptions import ProviderError
from hook_studio.shared.config import settings

MESSAGES = [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}]


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _status_error(error_cls, status_code, code):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status_code, request=request)
    return error_cls("provider failure", response=response, body={"code": code, "type": "requests"})


@pytest.fixture
def adapter():
    """An adapter whose OpenAI client is replaced with a mock."""
    instance = OpenAIAdapter(api_key="sk-test")
    instance.client = MagicMock()
    instance.client.chat.completions.create = AsyncMock(return_value=_completion("hello"))
    return instance


@pytest.mark.asyncio
class TestOpenAIAdapter:

    async def test_chat_returns_content(self, adapter):
        result = await adapter.chat(MESSAGES, model="gpt-4", max_tokens=1000, temperature=0.8)

        assert result == "hello"
        adapter.client.chat.completions.create.assert_awaited_once_with(
            model="gpt-4", messages=MESSAGES, max_tokens=1000, temperature=0.8
        )

    async def test_empty_choices_yield_empty_text(self, adapter):
        adapter.client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        assert await adapter.chat(MESSAGES, model="m", max_tokens=1, temperature=0) == ""

    async def test_null_content_yields_empty_text(self, adapter):
        adapter.client.chat.completions.create.return_value = _completion(None)

        assert await adapter.chat(MESSAGES, model="m", max_tokens=1, temperature=0) == ""

    @pytest.mark.parametrize(
        "error_cls, status_code, code",
        [
            (openai.RateLimitError, 429, "insufficient_quota"),
            (openai.RateLimitError, 429, "rate_limit_exceeded"),
            (openai.AuthenticationError, 401, "invalid_api_key"),
        ],
    )
    async def test_provider_code_is_preserved(self, adapter, error_cls, status_code, code):
        adapter.client.chat.completions.create.side_effect = _status_error(error_cls, status_code, code)

        with pytest.raises(ProviderError) as excinfo:
            await adapter.chat(MESSAGES, model="m", max_tokens=1, temperature=0)

        assert excinfo.value.code == code

    async def test_type_is_used_without_code(self, adapter):
        adapter.client.chat.completions.create.side_effect = _status_error(openai.InternalServerError, 500, None)

        with pytest.raises(ProviderError) as excinfo:
            await adapter.chat(MESSAGES, model="m", max_tokens=1, temperature=0)

        assert excinfo.value.code == "requests"

    async def test_missing_key(self, monkeypatch):
        """
        Scenario: No API key in arguments or settings.
        Expected: The adapter reports itself unconfigured and calls fail as invalid_api_key.
        """
        monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
        instance = OpenAIAdapter()

        assert instance.is_configured is False
        with pytest.raises(ProviderError) as excinfo:
            await instance.chat(MESSAGES, model="m", max_tokens=1, temperature=0)

        assert excinfo.value.code == "invalid_api_key"

    async def test_configured_with_key(self):
        instance = OpenAIAdapter(api_key="sk-test")
        assert instance.is_configured is True
