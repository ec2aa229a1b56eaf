# tests/conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from hook_studio.core.ports.llm_port import ILanguageModel
from hook_studio.shared.container import container as app_container


@pytest.fixture(scope="function")
def mock_llm():
    """Returns a mock implementation of the Language Model port."""
    llm = MagicMock(spec=ILanguageModel)
    # Async methods must be mocked with AsyncMock
    llm.chat = AsyncMock(return_value='["Hook one", "Hook two"]')
    llm.is_configured = True
    return llm


@pytest.fixture(scope="function")
def container(mock_llm):
    """
    The application container with the LLM provider replaced by the mock.
    The API resolves its dependencies from the same global container.
    """
    app_container.llm.override(mock_llm)

    yield app_container

    # Clean up overrides after test
    app_container.llm.reset_override()


@pytest.fixture
def hooks_payload():
    """Provides a valid hooks request body."""
    return {
        "kind": "hooks",
        "topic": "morning routines",
        "style": "energetic",
        "targetAudience": "students",
        "platform": "TikTok",
    }


@pytest.fixture
def script_payload():
    """Provides a valid script request body."""
    return {
        "kind": "script",
        "text": "Why sleep matters",
        "style": "Educational",
        "length": 45,
        "tone": "Friendly",
        "ctaInclusion": True,
    }
