# hook_studio/shared/config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "hook-studio"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "hook-studio-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- LLM Provider ---
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_TIMEOUT: float = 60.0

    # Hooks use the stronger model; scripts are longer so they run on the cheaper one.
    HOOK_MODEL: str = "gpt-4"
    SCRIPT_MODEL: str = "gpt-4o-mini"

    # --- Localization ---
    DEFAULT_LANGUAGE: str = "en"

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == AppEnv.PRODUCTION

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
