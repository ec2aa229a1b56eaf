# hook_studio/core/domain/models.py
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums ---

class ContentKind(str, Enum):
    """The two generation flows offered by the service."""
    HOOKS = "hooks"    # a short list of attention-grabbing opening lines
    SCRIPT = "script"  # one read-aloud video script

class LengthTier(str, Enum):
    """Script length buckets; each tier gets its own token ceiling."""
    SHORT = "short"    # up to 60 seconds
    MEDIUM = "medium"  # up to 2 minutes
    LONG = "long"

# --- Base ---

class CamelModel(BaseModel):
    """
    Base for models that cross the HTTP boundary.
    Fields are snake_case in Python and camelCase on the wire.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# --- Value Objects ---

class LocaleDescriptor(BaseModel):
    """
    A target natural language for generated text.
    Instances are created once in the locale registry and never mutated.
    """
    code: str = Field(..., description="Short identifier (e.g., 'ko')")
    name: str = Field(..., description="Lowercase canonical name (e.g., 'korean')")
    display_name: str = Field(..., description="Human-readable name (e.g., 'Korean')")

    model_config = ConfigDict(frozen=True)

# --- Requests ---

class ContentRequest(CamelModel):
    """
    Body of a generation request.

    Every field is optional at the schema level: required-ness depends on
    `kind` and is enforced by the use case, after the caller's language has
    been resolved, so rejections can be localized.
    """
    kind: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("kind", "type"),
        description="'hooks' or 'script' ('type' is accepted for older clients)",
    )
    language: Optional[str] = Field(None, description="Language code or name (e.g., 'ko', 'Korean')")

    # hooks
    topic: Optional[str] = None
    style: Optional[str] = None
    target_audience: Optional[str] = None
    platform: Optional[str] = None

    # script
    text: Optional[str] = None
    length: Optional[float] = Field(None, allow_inf_nan=False, description="Target duration in seconds")
    tone: Optional[str] = None
    cta_inclusion: Optional[bool] = None

# --- Results ---

def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

class HookMetadata(CamelModel):
    type: ContentKind = ContentKind.HOOKS
    topic: str
    style: str
    target_audience: str
    platform: str
    language: str
    language_code: str
    generated_at: str = Field(default_factory=utc_timestamp)
    model: str
    count: int

class ScriptMetadata(CamelModel):
    type: ContentKind = ContentKind.SCRIPT
    topic: str
    style: str
    length: str
    tone: str
    language: str
    language_code: str
    cta_included: bool
    generated_at: str = Field(default_factory=utc_timestamp)
    model: str
    word_count: int

class HookResult(CamelModel):
    """Successful hooks generation; at most five hooks."""
    success: bool = True
    hooks: List[str]
    metadata: HookMetadata

class ScriptResult(CamelModel):
    """Successful script generation."""
    success: bool = True
    result: str
    metadata: ScriptMetadata

class ErrorResponse(CamelModel):
    """
    Error envelope for every non-2xx response.
    `details` is only populated outside production.
    """
    error: str
    details: Optional[str] = None
