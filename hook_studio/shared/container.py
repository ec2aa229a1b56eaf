# hook_studio/shared/container.py
from dependency_injector import containers, providers

from hook_studio.adapters.llm_adapter import OpenAIAdapter
from hook_studio.core.use_cases.generate_content import GenerateContent, ModelSettings
from hook_studio.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Gateways (Infrastructure Adapters)

    # LLM client (Singleton: one HTTP connection pool shared across requests)
    llm = providers.Singleton(
        OpenAIAdapter,
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
        timeout=settings.OPENAI_TIMEOUT,
    )

    model_settings = providers.Singleton(
        ModelSettings,
        hook_model=settings.HOOK_MODEL,
        script_model=settings.SCRIPT_MODEL,
    )

    # 2. Use Cases (Application Logic)

    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.
    generate_content_use_case = providers.Factory(
        GenerateContent,
        llm=llm,
        models=model_settings,
        default_language=settings.DEFAULT_LANGUAGE,
    )


# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
