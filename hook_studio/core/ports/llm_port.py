# hook_studio/core/ports/llm_port.py
from abc import ABC, abstractmethod
from typing import Dict, List


class ILanguageModel(ABC):
    """
    Port (Interface) for Language Model interactions.
    Adapters (like OpenAIAdapter) must implement this.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the adapter holds credentials and can reach its provider."""

    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, str]],
        *,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """
        Runs one chat completion and returns the assistant's text.

        Implementations raise ProviderError on any provider failure, with
        the provider's error code attached when one is available.
        """
        raise NotImplementedError
