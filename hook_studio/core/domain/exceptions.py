# hook_studio/core/domain/exceptions.py
from typing import Optional

from hook_studio.core.domain.messages import MessageKey


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class InvalidRequestError(DomainError):
    """
    Raised when a generation request is rejected before any provider call.

    Carries the catalog key of the user-facing message so the API layer can
    render it in the caller's language.
    """
    message_key: MessageKey = MessageKey.INVALID_REQUEST

    def __init__(self, reason: str, message_key: Optional[MessageKey] = None):
        if message_key is not None:
            self.message_key = message_key
        super().__init__(reason)

class InvalidContentTypeError(InvalidRequestError):
    """Raised when `kind` is missing or is not one of the supported content kinds."""
    message_key = MessageKey.INVALID_TYPE

    def __init__(self, kind: Optional[str]):
        self.kind = kind
        super().__init__(f"Unsupported content kind: {kind!r}")

class MissingFieldsError(InvalidRequestError):
    """Raised when kind-specific required fields are absent or blank."""
    def __init__(self, kind: str, fields: list[str], message_key: MessageKey):
        self.kind = kind
        self.fields = fields
        super().__init__(
            f"Missing required fields for '{kind}': {', '.join(fields)}",
            message_key=message_key,
        )

# --- Provider Errors ---

class ProviderError(DomainError):
    """
    Raised when the language model provider call fails.

    `code` is the provider's own error classification (e.g. 'insufficient_quota');
    it is None for transport failures and unexpected errors.
    """
    def __init__(self, message: str, code: Optional[str] = None):
        self.code = code
        super().__init__(message)
