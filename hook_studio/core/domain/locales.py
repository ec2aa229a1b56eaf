# hook_studio/core/domain/locales.py
# =========================================================================
# LANGUAGE RESOLUTION: registry of target languages for generated content
#
# Callers send free-form identifiers ("ko", "Korean", " KOREAN ") and get
# back one canonical LocaleDescriptor. Unknown input falls back to the
# default locale; resolution never raises.
# =========================================================================

from types import MappingProxyType
from typing import List, Mapping, Optional

import structlog

from hook_studio.core.domain.models import LocaleDescriptor

logger = structlog.get_logger()

DEFAULT_LANGUAGE = "en"

# --- 1. CORE DATA MAPPING ---
# Structure: { code : LocaleDescriptor }
LANGUAGE_MAP: Mapping[str, LocaleDescriptor] = MappingProxyType({
    "ko": LocaleDescriptor(code="ko", name="korean", display_name="Korean"),
    "en": LocaleDescriptor(code="en", name="english", display_name="English"),
    "ja": LocaleDescriptor(code="ja", name="japanese", display_name="Japanese"),
    "zh": LocaleDescriptor(code="zh", name="chinese", display_name="Chinese"),
    "es": LocaleDescriptor(code="es", name="spanish", display_name="Spanish"),
    "fr": LocaleDescriptor(code="fr", name="french", display_name="French"),
    "de": LocaleDescriptor(code="de", name="german", display_name="German"),
    "pt": LocaleDescriptor(code="pt", name="portuguese", display_name="Portuguese"),
    "ru": LocaleDescriptor(code="ru", name="russian", display_name="Russian"),
    "ar": LocaleDescriptor(code="ar", name="arabic", display_name="Arabic"),
    "it": LocaleDescriptor(code="it", name="italian", display_name="Italian"),
    "nl": LocaleDescriptor(code="nl", name="dutch", display_name="Dutch"),
})

# --- 2. REVERSE LOOKUP TABLES ---
NAME_TO_CODE_MAP: Mapping[str, str] = MappingProxyType({
    locale.name: code for code, locale in LANGUAGE_MAP.items()
})

# --- PUBLIC FUNCTIONS ---

def get_default_locale(default: str = DEFAULT_LANGUAGE) -> LocaleDescriptor:
    """Returns the descriptor for `default`, or English if that code is unknown."""
    return LANGUAGE_MAP.get(default.strip().lower(), LANGUAGE_MAP[DEFAULT_LANGUAGE])


def find_locale(identifier: str) -> Optional[LocaleDescriptor]:
    """
    Looks up a locale by code or canonical name.
    Example: 'ko', 'KO', ' korean ' -> Korean. Returns None when unknown.
    """
    ident = identifier.strip().lower()

    # 1. Codes win over names
    if ident in LANGUAGE_MAP:
        return LANGUAGE_MAP[ident]

    # 2. Canonical lowercase names
    code = NAME_TO_CODE_MAP.get(ident)
    if code:
        return LANGUAGE_MAP[code]

    return None


def resolve_locale(value: Optional[object], default: str = DEFAULT_LANGUAGE) -> LocaleDescriptor:
    """
    Maps any language identifier to a LocaleDescriptor, falling back to the
    default locale for empty or unsupported input.
    """
    if value is None or value == "":
        return get_default_locale(default)

    locale = find_locale(str(value))
    if locale is not None:
        return locale

    fallback = get_default_locale(default)
    logger.debug("unsupported_language", requested=str(value), fallback=fallback.code)
    return fallback


def get_supported_locales() -> List[LocaleDescriptor]:
    """Returns all supported locales, ordered by code."""
    return sorted(LANGUAGE_MAP.values(), key=lambda locale: locale.code)
