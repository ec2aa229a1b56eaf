# hook_studio/adapters/api/responses.py
"""
Error envelopes and provider error classification for the HTTP layer.

Every failure leaves the API as `{"error": ..., "details"?: ...}`, with the
message taken from the catalog in the caller's language.
"""

from typing import Dict, Optional, Tuple

from fastapi import status
from fastapi.responses import JSONResponse

from hook_studio.core.domain.messages import MessageKey, get_message
from hook_studio.core.domain.models import ErrorResponse, LocaleDescriptor
from hook_studio.shared.config import settings

PROVIDER_ERRORS: Dict[str, Tuple[int, MessageKey]] = {
    "insufficient_quota": (status.HTTP_429_TOO_MANY_REQUESTS, MessageKey.QUOTA_EXCEEDED),
    "rate_limit_exceeded": (status.HTTP_429_TOO_MANY_REQUESTS, MessageKey.RATE_LIMITED),
    "invalid_api_key": (status.HTTP_401_UNAUTHORIZED, MessageKey.INVALID_CREDENTIAL),
}


def classify_provider_error(code: Optional[str]) -> Tuple[int, MessageKey]:
    """Maps a provider error code to an HTTP status and a catalog message."""
    if code and code in PROVIDER_ERRORS:
        return PROVIDER_ERRORS[code]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, MessageKey.GENERATION_FAILED


def error_response(
    status_code: int,
    locale: LocaleDescriptor,
    key: MessageKey,
    details: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Builds the localized error envelope.
    `details` is dropped in production.
    """
    body = ErrorResponse(
        error=get_message(locale, key),
        details=None if settings.is_production else details,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )
