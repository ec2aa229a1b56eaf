# hook_studio/adapters/llm_adapter.py
from typing import Any, Dict, List, Optional

import openai
import structlog

from hook_studio.core.domain.exceptions import ProviderError
from hook_studio.core.ports.llm_port import ILanguageModel
from hook_studio.shared.config import settings

logger = structlog.get_logger()

# Code used when the service itself has no key to send.
MISSING_KEY_CODE = "invalid_api_key"


class OpenAIAdapter(ILanguageModel):
    """
    Driven Adapter for the OpenAI Chat Completions API.

    A missing key is not fatal at startup: the adapter logs a warning and
    every call then fails with an 'invalid_api_key' ProviderError, which the
    API reports as 401.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client: Optional[openai.AsyncOpenAI] = None
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.base_url = base_url or settings.OPENAI_BASE_URL
        self.timeout = timeout or settings.OPENAI_TIMEOUT

        if not self.api_key:
            logger.warning("llm_init_skipped", msg="No OpenAI API key found. Generation will fail with 401.")
            return

        self.client = openai.AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def chat(
        self,
        messages: List[Dict[str, str]],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        if self.client is None:
            raise ProviderError("OpenAI API key is not configured", code=MISSING_KEY_CODE)

        try:
            completion = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except openai.APIError as e:
            code = self._error_code(e)
            logger.error("llm_call_failed", model=model, code=code, error=str(e))
            raise ProviderError(str(e), code=code) from e

        return self._extract_content(completion)

    @staticmethod
    def _error_code(error: openai.APIError) -> Optional[str]:
        """
        The provider's classification of the failure.
        Quota errors arrive as 429s whose code is 'insufficient_quota', so the
        code is preferred over the HTTP status.
        """
        code = getattr(error, "code", None)
        if code:
            return str(code)
        error_type = getattr(error, "type", None)
        return str(error_type) if error_type else None

    @staticmethod
    def _extract_content(completion: Any) -> str:
        choices = getattr(completion, "choices", None) or []
        if not choices:
            return ""
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content or ""
