# tests/core/test_normalization.py
from hook_studio.core.domain.normalization import (
    FALLBACK_HOOKS,
    normalize_hooks,
    normalize_script,
    strip_code_fences,
)


class TestNormalizeHooks:
    def test_json_array(self):
        assert normalize_hooks('["A", "B", "C"]') == ["A", "B", "C"]

    def test_json_array_is_capped_at_five(self):
        raw = '["1", "2", "3", "4", "5", "6", "7"]'
        assert normalize_hooks(raw) == ["1", "2", "3", "4", "5"]

    def test_json_items_are_trimmed_and_blank_ones_dropped(self):
        assert normalize_hooks('["  A ", "", "   ", 7]') == ["A", "7"]

    def test_fenced_json(self):
        raw = '```json\n["Fenced one", "Fenced two"]\n```'
        assert normalize_hooks(raw) == ["Fenced one", "Fenced two"]

    def test_numbered_lines(self):
        assert normalize_hooks("1. Foo\n2) Bar") == ["Foo", "Bar"]

    def test_bulleted_and_quoted_lines(self):
        raw = '- "First"\n* Second\n\n• Third'
        assert normalize_hooks(raw) == ["First", "Second", "Third"]

    def test_over_long_lines_are_skipped(self):
        raw = "x" * 301 + "\nShort hook"
        assert normalize_hooks(raw) == ["Short hook"]

    def test_lines_are_capped_at_five(self):
        raw = "\n".join(f"Hook {i}" for i in range(10))
        assert len(normalize_hooks(raw)) == 5

    def test_empty_output_yields_fallback(self):
        assert normalize_hooks("") == list(FALLBACK_HOOKS)
        assert normalize_hooks(None) == list(FALLBACK_HOOKS)
        assert normalize_hooks("[]") == list(FALLBACK_HOOKS)

    def test_structured_items_are_rendered_as_json(self):
        raw = '[{"hook": "Wait for it"}, ["a", "b"], 3.5]'
        assert normalize_hooks(raw) == ['{"hook": "Wait for it"}', '["a", "b"]', "3.5"]

    def test_broken_json_is_read_as_lines(self):
        assert normalize_hooks('["unterminated') == ['["unterminated']


class TestStripCodeFences:
    def test_plain_text_is_untouched(self):
        assert strip_code_fences("  hello ") == "hello"

    def test_fence_without_language(self):
        assert strip_code_fences("```\nbody\n```") == "body"


class TestNormalizeScript:
    def test_trims_and_counts_words(self):
        assert normalize_script("  Hello there,\n  world!  ") == ("Hello there,\n  world!", 3)

    def test_empty(self):
        assert normalize_script(None) == ("", 0)
