# tests/core/test_domain_models.py
import re

import pytest
from pydantic import ValidationError

from hook_studio.core.domain.models import (
    ContentKind,
    ContentRequest,
    ErrorResponse,
    HookMetadata,
    HookResult,
    LocaleDescriptor,
    utc_timestamp,
)


class TestContentRequest:
    def test_camel_case_fields_are_accepted(self):
        request = ContentRequest.model_validate(
            {"kind": "hooks", "targetAudience": "gamers", "ctaInclusion": True}
        )
        assert request.target_audience == "gamers"
        assert request.cta_inclusion is True

    def test_type_is_accepted_as_kind(self):
        """Older clients send `type` instead of `kind`."""
        request = ContentRequest.model_validate({"type": "script"})
        assert request.kind == "script"

    def test_all_fields_are_optional(self):
        request = ContentRequest()
        assert request.kind is None
        assert request.topic is None

    def test_length_must_be_numeric(self):
        with pytest.raises(ValidationError):
            ContentRequest.model_validate({"length": "forever"})


class TestLocaleDescriptor:
    def test_is_immutable(self):
        locale = LocaleDescriptor(code="ko", name="korean", display_name="Korean")
        with pytest.raises(ValidationError):
            locale.code = "en"


class TestResults:
    def test_hook_result_serializes_camel_case(self):
        result = HookResult(
            hooks=["a"],
            metadata=HookMetadata(
                topic="t",
                style="s",
                target_audience="aud",
                platform="p",
                language="English",
                language_code="en",
                model="gpt-4",
                count=1,
            ),
        )
        data = result.model_dump(by_alias=True, mode="json")

        assert data["success"] is True
        assert data["metadata"]["type"] == ContentKind.HOOKS.value
        assert data["metadata"]["targetAudience"] == "aud"
        assert data["metadata"]["languageCode"] == "en"
        assert "generatedAt" in data["metadata"]

    def test_error_response_omits_empty_details(self):
        data = ErrorResponse(error="boom").model_dump(by_alias=True, exclude_none=True)
        assert data == {"error": "boom"}

    def test_utc_timestamp_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestContentRequestLength:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_length_is_rejected(self, value):
        with pytest.raises(ValidationError):
            ContentRequest.model_validate({"kind": "script", "length": value})

    def test_finite_length_is_accepted(self):
        assert ContentRequest.model_validate({"length": 90.5}).length == 90.5
