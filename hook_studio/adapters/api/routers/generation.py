# hook_studio/adapters/api/routers/generation.py
from typing import Optional, Union

import structlog
from fastapi import APIRouter, Body, Depends, Response, status

from hook_studio.adapters.api.dependencies import get_generate_content_use_case
from hook_studio.adapters.api.responses import classify_provider_error, error_response
from hook_studio.core.domain.exceptions import InvalidRequestError, ProviderError
from hook_studio.core.domain.models import (
    ContentKind,
    ContentRequest,
    ErrorResponse,
    HookResult,
    ScriptResult,
)
from hook_studio.core.use_cases.generate_content import GenerateContent

logger = structlog.get_logger()

router = APIRouter(
    prefix="/api",
    tags=["Generation"],
)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
    status.HTTP_429_TOO_MANY_REQUESTS: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


async def _run(use_case: GenerateContent, payload: ContentRequest):
    """
    Executes the use case and maps domain errors to localized HTTP envelopes.
    One response per request; nothing is retried.
    """
    locale = use_case.resolve_locale(payload)

    try:
        return await use_case.execute(payload)

    except InvalidRequestError as e:
        # Map Validation Errors -> HTTP 400 (no provider call was made)
        return error_response(status.HTTP_400_BAD_REQUEST, locale, e.message_key)

    except ProviderError as e:
        status_code, key = classify_provider_error(e.code)
        logger.error("provider_error", code=e.code, status=status_code, error=e.message)
        return error_response(status_code, locale, key, details=e.message)


@router.post(
    "/generate-content",
    response_model=Union[HookResult, ScriptResult],
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Generate video hooks or a video script",
)
async def generate_content(
    payload: Optional[ContentRequest] = Body(None, description="Generation request; `kind` selects the flow"),
    use_case: GenerateContent = Depends(get_generate_content_use_case),
):
    """
    Generates content with the configured language model.

    **Body:**
    * `kind` (or `type`): `hooks` or `script`.
    * hooks: `topic`, `style`, optional `targetAudience`, `platform`.
    * script: `text`, `style`, optional `length` (seconds), `tone`, `ctaInclusion`.
    * `language`: optional code or name; defaults to English.

    **Returns:**
    * `{success, hooks, metadata}` or `{success, result, metadata}`.
    """
    return await _run(use_case, payload or ContentRequest())


@router.post(
    "/hook-generator",
    response_model=HookResult,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Generate video hooks (legacy endpoint)",
)
async def generate_hooks(
    payload: Optional[ContentRequest] = Body(None),
    use_case: GenerateContent = Depends(get_generate_content_use_case),
):
    """
    Hooks-only endpoint kept for clients that predate `kind`.
    Any `kind` in the body is ignored.
    """
    request = (payload or ContentRequest()).model_copy(update={"kind": ContentKind.HOOKS.value})
    return await _run(use_case, request)


@router.options("/generate-content", include_in_schema=False)
@router.options("/hook-generator", include_in_schema=False)
async def preflight() -> Response:
    """Answers bare OPTIONS requests; CORS preflights are handled by the middleware."""
    return Response(status_code=status.HTTP_200_OK)
