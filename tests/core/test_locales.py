# tests/core/test_locales.py
import pytest

from hook_studio.core.domain.locales import (
    LANGUAGE_MAP,
    find_locale,
    get_default_locale,
    get_supported_locales,
    resolve_locale,
)


class TestResolveLocale:
    @pytest.mark.parametrize("value", ["ko", "KO", " ko ", "korean", "Korean", " KOREAN "])
    def test_codes_and_names_resolve(self, value):
        assert resolve_locale(value).code == "ko"

    @pytest.mark.parametrize("value", [None, "", "klingon", "xx", 42])
    def test_unknown_falls_back_to_default(self, value):
        assert resolve_locale(value).code == "en"

    def test_custom_default(self):
        assert resolve_locale("klingon", default="ja").code == "ja"

    def test_unknown_default_falls_back_to_english(self):
        assert get_default_locale("xx").code == "en"

    def test_resolution_is_idempotent(self):
        locale = resolve_locale("japanese")
        assert resolve_locale(locale.code) == locale
        assert resolve_locale(locale.name) == locale


class TestRegistry:
    def test_find_locale_returns_none_for_unknown(self):
        assert find_locale("elvish") is None

    def test_supported_locales_sorted_by_code(self):
        codes = [locale.code for locale in get_supported_locales()]
        assert codes == sorted(codes)
        assert set(codes) == set(LANGUAGE_MAP)

    def test_names_are_lowercase_and_unique(self):
        names = [locale.name for locale in LANGUAGE_MAP.values()]
        assert all(name == name.lower() for name in names)
        assert len(names) == len(set(names))
