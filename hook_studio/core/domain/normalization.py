# hook_studio/core/domain/normalization.py
"""
Normalization of raw model output.

Models do not always follow the requested format: hooks may come back as a
JSON array, a numbered list, or prose wrapped in markdown fences. These
helpers coerce whatever arrives into the shape the API promises and never
raise.
"""

import json
import re
from typing import List, Tuple

MAX_HOOKS = 5
MAX_HOOK_LENGTH = 300

# Returned when nothing usable can be extracted from the model output.
FALLBACK_HOOKS: Tuple[str, ...] = (
    "You won't believe what happens next.",
    "Stop scrolling: this changes everything.",
    "Here's the one thing nobody tells you.",
    "Watch this before you make the same mistake.",
    "I tried this so you don't have to.",
)

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)
# "1.", "2)", "- ", "* ", "• " at the start of a line
_ENUMERATION_RE = re.compile(r"^\s*(?:\d+[.)]|[-*•])\s*")
_QUOTES = "\"'“”‘’"


def strip_code_fences(text: str) -> str:
    """Removes a surrounding ```lang ... ``` block if present."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def _clean_items(items) -> List[str]:
    cleaned = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, str):
            value = item
        elif isinstance(item, (dict, list)):
            value = json.dumps(item, ensure_ascii=False)
        else:
            value = str(item)
        value = value.strip()
        if value:
            cleaned.append(value)
    return cleaned


def _parse_json_hooks(text: str):
    """Returns the parsed list, or None if `text` is not a JSON array."""
    if not text.startswith("["):
        return None
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, list):
        return None
    return _clean_items(data[:MAX_HOOKS])


def _split_lines(text: str) -> List[str]:
    hooks = []
    for line in text.splitlines():
        line = _ENUMERATION_RE.sub("", line).strip()
        line = line.strip(_QUOTES).strip()
        if not line or len(line) > MAX_HOOK_LENGTH:
            continue
        hooks.append(line)
        if len(hooks) == MAX_HOOKS:
            break
    return hooks


def normalize_hooks(raw) -> List[str]:
    """
    Extracts up to five hooks from raw model output.

    JSON arrays are preferred; anything else is read line by line with list
    markers removed. An empty outcome yields FALLBACK_HOOKS.
    """
    text = strip_code_fences(raw or "")

    hooks = _parse_json_hooks(text)
    if hooks is None:
        hooks = _split_lines(text)

    return hooks or list(FALLBACK_HOOKS)


def count_words(text: str) -> int:
    return len(text.split())


def normalize_script(raw) -> Tuple[str, int]:
    """Returns the trimmed script text and its whitespace-delimited word count."""
    text = (raw or "").strip()
    return text, count_words(text)
