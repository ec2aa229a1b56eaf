# hook_studio/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hook_studio import __version__
from hook_studio.adapters.api.dependencies import REQUEST_ID_HEADER, bind_request_context
from hook_studio.adapters.api.responses import error_response
from hook_studio.adapters.api.routers import generation_router, health_router, languages_router
from hook_studio.core.domain.locales import get_default_locale, resolve_locale
from hook_studio.core.domain.messages import MessageKey
from hook_studio.shared.config import settings
from hook_studio.shared.logging_config import configure_logging
from hook_studio.shared.telemetry import instrument_fastapi, setup_telemetry

configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (Telemetry) and shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    logger.info("app_startup", app=settings.APP_NAME, env=settings.APP_ENV.value, version=__version__)

    yield

    logger.info("app_shutdown")


def _body_locale(body):
    """Best-effort locale from a request body that failed validation."""
    if isinstance(body, dict):
        return resolve_locale(body.get("language"), default=settings.DEFAULT_LANGUAGE)
    return get_default_locale(settings.DEFAULT_LANGUAGE)


def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    app = FastAPI(
        title="Hook Studio",
        version=__version__,
        description="Localized video hook and script generation backed by a chat-completion LLM",
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # 1. CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # 2. Request-scoped logging context
    app.middleware("http")(bind_request_context)

    # 3. Auto-Instrument FastAPI for Tracing
    instrument_fastapi(app)

    # 4. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors into the `{"error": ...}` envelope.
        Wrong methods get the localized message in the default language.
        """
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(
                exc.status_code,
                get_default_locale(settings.DEFAULT_LANGUAGE),
                MessageKey.METHOD_NOT_ALLOWED,
                headers=getattr(exc, "headers", None),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Malformed JSON or wrongly-typed fields.
        Reported as 400 like every other client input error.
        """
        logger.warning("request_validation_failed", errors=str(exc.errors()))
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            _body_locale(exc.body),
            MessageKey.INVALID_REQUEST,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent crashing and leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", error=str(exc), exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            get_default_locale(settings.DEFAULT_LANGUAGE),
            MessageKey.GENERATION_FAILED,
            details=str(exc),
        )

    # 5. Mount Routes
    app.include_router(health_router)
    app.include_router(languages_router)
    app.include_router(generation_router)

    return app


# Entry point for Uvicorn
app = create_app()


def run() -> None:
    """Console entry point: serves the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "hook_studio.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
