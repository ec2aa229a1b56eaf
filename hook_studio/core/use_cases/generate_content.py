# hook_studio/core/use_cases/generate_content.py
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import structlog

from hook_studio.core.domain import normalization, prompts
from hook_studio.core.domain.exceptions import (
    DomainError,
    InvalidContentTypeError,
    MissingFieldsError,
    ProviderError,
)
from hook_studio.core.domain.locales import DEFAULT_LANGUAGE, get_default_locale, resolve_locale
from hook_studio.core.domain.messages import MessageKey
from hook_studio.core.domain.models import (
    ContentKind,
    ContentRequest,
    HookMetadata,
    HookResult,
    LengthTier,
    LocaleDescriptor,
    ScriptMetadata,
    ScriptResult,
)
from hook_studio.core.ports.llm_port import ILanguageModel
from hook_studio.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

REQUIRED_FIELDS: Dict[ContentKind, Tuple[str, ...]] = {
    ContentKind.HOOKS: ("topic", "style"),
    ContentKind.SCRIPT: ("text", "style"),
}

MISSING_FIELDS_MESSAGES: Dict[ContentKind, MessageKey] = {
    ContentKind.HOOKS: MessageKey.MISSING_FIELDS_HOOKS,
    ContentKind.SCRIPT: MessageKey.MISSING_FIELDS_SCRIPT,
}

TOKEN_CEILINGS: Dict[LengthTier, int] = {
    LengthTier.SHORT: 600,
    LengthTier.MEDIUM: 1000,
    LengthTier.LONG: 1500,
}

HOOK_MAX_TOKENS = 1000
TEMPERATURE = 0.8


@dataclass(frozen=True)
class ModelSettings:
    """Model identifiers per content kind."""
    hook_model: str = "gpt-4"
    script_model: str = "gpt-4o-mini"


def length_tier(seconds: float) -> LengthTier:
    if seconds <= 60:
        return LengthTier.SHORT
    if seconds <= 120:
        return LengthTier.MEDIUM
    return LengthTier.LONG


def _format_seconds(seconds: float) -> str:
    value = int(seconds) if float(seconds).is_integer() else seconds
    return f"{value} seconds"


def parse_kind(value: Optional[str]) -> ContentKind:
    """Maps the request's `kind` to a ContentKind, rejecting anything else."""
    try:
        return ContentKind((value or "").strip().lower())
    except ValueError:
        raise InvalidContentTypeError(value) from None


class GenerateContent:
    """
    Use Case: Turns a content request into hooks or a script.

    Responsibilities:
    1. Resolves the caller's locale (before validation, so rejections are localized).
    2. Validates the kind and the kind-specific required fields.
    3. Builds the prompt and makes exactly one call through the LLM Port.
    4. Normalizes the raw model text into the promised result shape.
    """

    def __init__(
        self,
        llm: ILanguageModel,
        models: Optional[ModelSettings] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self.llm = llm
        self.models = models or ModelSettings()
        # Normalized code of the locale unknown or empty requests resolve to
        self.default_language = get_default_locale(default_language).code

    def resolve_locale(self, request: ContentRequest) -> LocaleDescriptor:
        return resolve_locale(request.language, default=self.default_language)

    async def execute(self, request: ContentRequest) -> Union[HookResult, ScriptResult]:
        """
        Executes the generation flow.

        Raises:
            InvalidContentTypeError / MissingFieldsError: before any provider call.
            ProviderError: when the model call fails, or on any unexpected error.
        """
        locale = self.resolve_locale(request)
        kind = parse_kind(request.kind)
        self._validate(kind, request)

        with tracer.start_as_current_span("use_case.generate_content") as span:
            span.set_attribute("app.kind", kind.value)
            span.set_attribute("app.lang_code", locale.code)

            logger.info("generation_started", kind=kind.value, lang=locale.code)

            try:
                if kind == ContentKind.HOOKS:
                    result = await self._generate_hooks(request, locale)
                else:
                    result = await self._generate_script(request, locale)
            except DomainError:
                raise
            except Exception as e:
                logger.error("generation_failed", kind=kind.value, error=str(e), exc_info=True)
                raise ProviderError(f"Unexpected generation failure: {e}") from e

            logger.info("generation_success", kind=kind.value, lang=locale.code, model=result.metadata.model)
            return result

    def _validate(self, kind: ContentKind, request: ContentRequest) -> None:
        missing: List[str] = []
        for field in REQUIRED_FIELDS[kind]:
            value = getattr(request, field)
            if value is None or not str(value).strip():
                missing.append(field)

        if missing:
            logger.warning("generation_bad_request", kind=kind.value, missing=missing)
            raise MissingFieldsError(kind.value, missing, MISSING_FIELDS_MESSAGES[kind])

    async def _complete(
        self,
        kind: ContentKind,
        prompt: str,
        locale: LocaleDescriptor,
        model: str,
        max_tokens: int,
    ) -> str:
        messages = [
            {"role": "system", "content": prompts.get_system_prompt(kind, locale)},
            {"role": "user", "content": prompt},
        ]
        return await self.llm.chat(
            messages,
            model=model,
            max_tokens=max_tokens,
            temperature=TEMPERATURE,
        )

    async def _generate_hooks(self, request: ContentRequest, locale: LocaleDescriptor) -> HookResult:
        topic = request.topic.strip()
        style = request.style.strip()
        target_audience = (request.target_audience or "").strip() or prompts.DEFAULT_TARGET_AUDIENCE
        platform = (request.platform or "").strip() or prompts.DEFAULT_PLATFORM

        prompt = prompts.build_hook_prompt(
            topic, style, target_audience, platform, locale, default_code=self.default_language
        )
        model = self.models.hook_model
        raw = await self._complete(ContentKind.HOOKS, prompt, locale, model, HOOK_MAX_TOKENS)
        hooks = normalization.normalize_hooks(raw)

        return HookResult(
            hooks=hooks,
            metadata=HookMetadata(
                topic=topic,
                style=style,
                target_audience=target_audience,
                platform=platform,
                language=locale.display_name,
                language_code=locale.code,
                model=model,
                count=len(hooks),
            ),
        )

    async def _generate_script(self, request: ContentRequest, locale: LocaleDescriptor) -> ScriptResult:
        text = request.text.strip()
        style = request.style.strip()
        length = request.length or prompts.DEFAULT_SCRIPT_LENGTH
        tone = (request.tone or "").strip() or prompts.DEFAULT_TONE
        cta_inclusion = bool(request.cta_inclusion)

        prompt = prompts.build_script_prompt(
            text, style, length, tone, cta_inclusion, locale, default_code=self.default_language
        )
        model = self.models.script_model
        max_tokens = TOKEN_CEILINGS[length_tier(length)]
        raw = await self._complete(ContentKind.SCRIPT, prompt, locale, model, max_tokens)
        script, word_count = normalization.normalize_script(raw)

        return ScriptResult(
            result=script,
            metadata=ScriptMetadata(
                topic=text,
                style=style,
                length=_format_seconds(length),
                tone=tone,
                language=locale.display_name,
                language_code=locale.code,
                cta_included=cta_inclusion,
                model=model,
                word_count=word_count,
            ),
        )
