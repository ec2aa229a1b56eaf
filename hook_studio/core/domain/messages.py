# hook_studio/core/domain/messages.py
"""
Localized message catalog.

Every user-facing string (prompt openings, system prompts, error messages)
is looked up here by `MessageKey`. A locale with its own table is used
directly; any other locale, and any key a locale table lacks, falls back to
the generic table whose entries are templates of the locale's display name.
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from hook_studio.core.domain.models import LocaleDescriptor


class MessageKey(str, Enum):
    HOOK_OPENING = "hook_opening"
    SCRIPT_OPENING = "script_opening"
    HOOK_SYSTEM_PROMPT = "hook_system_prompt"
    SCRIPT_SYSTEM_PROMPT = "script_system_prompt"
    MISSING_FIELDS_HOOKS = "missing_fields_hooks"
    MISSING_FIELDS_SCRIPT = "missing_fields_script"
    INVALID_TYPE = "invalid_type"
    INVALID_REQUEST = "invalid_request"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMITED = "rate_limited"
    INVALID_CREDENTIAL = "invalid_credential"
    GENERATION_FAILED = "generation_failed"


UNKNOWN_MESSAGE = "An unknown error occurred."

Message = Union[str, Callable[[str], str]]

_KO: Mapping[MessageKey, Message] = MappingProxyType({
    MessageKey.HOOK_OPENING: "다음 조건에 맞는 매력적인 영상 훅(Hook) 5개를 한국어로 생성해주세요:",
    MessageKey.SCRIPT_OPENING: "다음 조건에 맞는 매력적인 영상 스크립트를 한국어로 생성해주세요:",
    MessageKey.HOOK_SYSTEM_PROMPT: (
        "당신은 전문적인 영상 콘텐츠 크리에이터입니다. 시청자의 관심을 즉시 끄는 강력한 훅을 "
        "만드는 전문가입니다. 모든 응답은 한국어로 해주세요."
    ),
    MessageKey.SCRIPT_SYSTEM_PROMPT: (
        "당신은 전문적인 영상 콘텐츠 크리에이터입니다. 시청자의 관심을 끄는 강력한 스크립트를 "
        "만드는 전문가입니다. 모든 응답은 한국어로 해주세요."
    ),
    MessageKey.MISSING_FIELDS_HOOKS: "필수 정보가 누락되었습니다. (주제, 스타일)",
    MessageKey.MISSING_FIELDS_SCRIPT: "필수 정보가 누락되었습니다. (텍스트, 스타일)",
    MessageKey.INVALID_TYPE: "지원하지 않는 콘텐츠 타입입니다. (hooks 또는 script만 가능)",
    MessageKey.INVALID_REQUEST: "요청 형식이 올바르지 않습니다.",
    MessageKey.METHOD_NOT_ALLOWED: "허용되지 않은 메서드입니다.",
    MessageKey.QUOTA_EXCEEDED: "API 사용량 한도에 도달했습니다.",
    MessageKey.RATE_LIMITED: "요청 속도 제한에 걸렸습니다. 잠시 후 다시 시도해주세요.",
    MessageKey.INVALID_CREDENTIAL: "API 키가 올바르지 않습니다.",
    MessageKey.GENERATION_FAILED: "콘텐츠 생성 중 오류가 발생했습니다.",
})

_EN: Mapping[MessageKey, Message] = MappingProxyType({
    MessageKey.HOOK_OPENING: "Generate 5 engaging video hooks in English that meet the following conditions:",
    MessageKey.SCRIPT_OPENING: "Generate an engaging video script in English that meets the following conditions:",
    MessageKey.HOOK_SYSTEM_PROMPT: (
        "You are a professional video content creator who specializes in writing "
        "compelling hooks that instantly capture viewers' attention."
    ),
    MessageKey.SCRIPT_SYSTEM_PROMPT: (
        "You are a professional video content creator who specializes in writing "
        "compelling scripts that capture viewers' attention."
    ),
})

# Generic entries. English-only keys above resolve here as well.
_GENERIC: Mapping[MessageKey, Message] = MappingProxyType({
    MessageKey.HOOK_OPENING: lambda lang: (
        f"Generate 5 engaging video hooks in {lang} that meet the following conditions:"
    ),
    MessageKey.SCRIPT_OPENING: lambda lang: (
        f"Generate an engaging video script in {lang} that meets the following conditions:"
    ),
    MessageKey.HOOK_SYSTEM_PROMPT: lambda lang: (
        "You are a professional video content creator who specializes in writing "
        "compelling hooks that instantly capture viewers' attention. "
        f"Please respond entirely in {lang}."
    ),
    MessageKey.SCRIPT_SYSTEM_PROMPT: lambda lang: (
        "You are a professional video content creator who specializes in writing "
        "compelling scripts that capture viewers' attention. "
        f"Please respond entirely in {lang}."
    ),
    MessageKey.MISSING_FIELDS_HOOKS: "Missing required fields: topic, style.",
    MessageKey.MISSING_FIELDS_SCRIPT: "Missing required fields: text, style.",
    MessageKey.INVALID_TYPE: "Unsupported content type. Only 'hooks' or 'script' allowed.",
    MessageKey.INVALID_REQUEST: "Invalid request body.",
    MessageKey.METHOD_NOT_ALLOWED: "Method not allowed",
    MessageKey.QUOTA_EXCEEDED: "API quota exceeded.",
    MessageKey.RATE_LIMITED: "Rate limit exceeded. Please try again later.",
    MessageKey.INVALID_CREDENTIAL: "Invalid API key.",
    MessageKey.GENERATION_FAILED: "An error occurred during content generation.",
})

CATALOG: Mapping[str, Mapping[MessageKey, Message]] = MappingProxyType({
    "ko": _KO,
    "en": _EN,
})


def get_message(locale: LocaleDescriptor, key: MessageKey) -> str:
    """
    Returns the text for `key` in `locale`.

    Never raises: a key missing from every table yields UNKNOWN_MESSAGE.
    """
    entry = CATALOG.get(locale.code, _GENERIC).get(key)
    if entry is None:
        entry = _GENERIC.get(key)
    if entry is None:
        return UNKNOWN_MESSAGE
    if callable(entry):
        return entry(locale.display_name)
    return entry
