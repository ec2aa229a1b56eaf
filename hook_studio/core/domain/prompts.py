# hook_studio/core/domain/prompts.py
"""
Prompt assembly for hooks and scripts.

Prompts are deterministic: the same arguments always produce the same
string. Timestamps and other per-request values belong in the response
metadata, never in the prompt.
"""

import math
from typing import Any, Mapping, Optional

from hook_studio.core.domain.locales import DEFAULT_LANGUAGE
from hook_studio.core.domain.messages import MessageKey, get_message
from hook_studio.core.domain.models import ContentKind, LocaleDescriptor

DEFAULT_TARGET_AUDIENCE = "general audience"
DEFAULT_PLATFORM = "short-form video (Reels/Shorts/TikTok)"
DEFAULT_SCRIPT_LENGTH = 45
DEFAULT_TONE = "Neutral"

HOOK_COUNT = 5


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_duration(seconds: float) -> str:
    """
    Human-readable duration: under a minute in seconds, otherwise whole minutes.
    Example: 45 -> '45 seconds', 150 -> '3 minutes'
    """
    if seconds < 60:
        return f"{_round_half_up(seconds)} seconds"
    return f"{_round_half_up(seconds / 60)} minutes"


def language_directive(locale: LocaleDescriptor, default_code: str = DEFAULT_LANGUAGE) -> Optional[str]:
    """
    Explicit 'respond in' line, only for locales other than the default one.

    The default locale never gets the line, even when its catalog text is
    already localized.
    """
    if locale.code == default_code:
        return None
    return f"Please respond entirely in {locale.display_name}."


def build_hook_prompt(
    topic: str,
    style: str,
    target_audience: str,
    platform: str,
    locale: LocaleDescriptor,
    default_code: str = DEFAULT_LANGUAGE,
) -> str:
    """Returns the user prompt asking for five hooks as a JSON array."""
    lines = [
        get_message(locale, MessageKey.HOOK_OPENING),
        "",
        f"Topic: {topic}",
        f"Style: {style}",
        f"Target Audience: {target_audience}",
        f"Platform: {platform}",
        "",
        "Requirements:",
        "1. Hook must capture attention within the first 3 seconds",
        f"2. Tone and manner suitable for {platform}",
        f"3. Relevant to the interests of {target_audience}",
        f"4. Written in a {style} style",
        "",
        f"Each hook should be under 15 seconds. Return ONLY a JSON array of {HOOK_COUNT} strings "
        "(no numbering, no extra text).",
    ]

    directive = language_directive(locale, default_code)
    if directive:
        lines += ["", directive]

    return "\n".join(lines)


def build_script_prompt(
    text: str,
    style: str,
    length: float,
    tone: str,
    cta_inclusion: bool,
    locale: LocaleDescriptor,
    default_code: str = DEFAULT_LANGUAGE,
) -> str:
    """Returns the user prompt asking for one plain-text script."""
    duration = format_duration(length)
    cta_line = (
        "7. Include a clear call-to-action at the end"
        if cta_inclusion
        else "7. Natural conclusion without forced CTA"
    )

    lines = [
        get_message(locale, MessageKey.SCRIPT_OPENING),
        "",
        f"Topic/Keyword: {text}",
        f"Video Style: {style}",
        f"Script Length: {duration}",
        f"Tone: {tone}",
        f"Language: {locale.display_name}",
        f"Include CTA: {'Yes' if cta_inclusion else 'No'}",
        "",
        "Requirements:",
        "1. Create a compelling video script for short-form content",
        "2. Hook viewers within the first 3 seconds",
        f"3. Maintain {tone.lower()} tone throughout",
        f"4. Keep the script to approximately {duration}",
        f"5. Focus on the topic: {text}",
        f"6. Use {style.lower()} video style approach",
        cta_line,
        "",
        "Please write a complete, engaging script that can be read aloud. "
        "Include natural pauses and emphasis where appropriate.",
    ]

    directive = language_directive(locale, default_code)
    if directive:
        lines += ["", directive]

    lines += ["", "Return the script as plain text (no JSON formatting needed)."]
    return "\n".join(lines)


def build_prompt(
    kind: ContentKind,
    fields: Mapping[str, Any],
    locale: LocaleDescriptor,
    default_code: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Dispatches to the kind-specific builder.

    `fields` uses the snake_case request field names; optional fields that are
    absent take the same defaults the API reports in its metadata.
    """
    kind = ContentKind(kind)
    if kind == ContentKind.HOOKS:
        return build_hook_prompt(
            topic=fields["topic"],
            style=fields["style"],
            target_audience=fields.get("target_audience") or DEFAULT_TARGET_AUDIENCE,
            platform=fields.get("platform") or DEFAULT_PLATFORM,
            locale=locale,
            default_code=default_code,
        )

    return build_script_prompt(
        text=fields["text"],
        style=fields["style"],
        length=fields.get("length") or DEFAULT_SCRIPT_LENGTH,
        tone=fields.get("tone") or DEFAULT_TONE,
        cta_inclusion=bool(fields.get("cta_inclusion")),
        locale=locale,
        default_code=default_code,
    )


def get_system_prompt(kind: ContentKind, locale: LocaleDescriptor) -> str:
    """Localized system message for the given content kind."""
    key = MessageKey.HOOK_SYSTEM_PROMPT if ContentKind(kind) == ContentKind.HOOKS else MessageKey.SCRIPT_SYSTEM_PROMPT
    return get_message(locale, key)
