"""Unit tests for Translator."""

import json

import pytest

from userhub.infrastructure.i18n import LOCALES_DIR, Translator


@pytest.fixture
def translator() -> Translator:
    return Translator(
        {
            "en": {"greeting": "Hello", "only_en": "English only"},
            "ru": {"greeting": "Привет"},
        },
        default_language="en",
    )


class TestNegotiate:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            (None, "en"),
            ("", "en"),
            ("ru", "ru"),
            ("ru-RU", "ru"),
            ("RU", "ru"),
            ("de", "en"),
            ("de, ru;q=0.8", "ru"),
            ("en;q=0.5, ru;q=0.9", "ru"),
            ("ru;q=0, en", "en"),
            ("*", "en"),
            ("ru;q=abc, en;q=0.1", "en"),
        ],
    )
    def test_negotiate(self, translator, header, expected):
        assert translator.negotiate(header) == expected


class TestTranslate:
    def test_translates_into_requested_language(self, translator):
        assert translator.translate("greeting", "ru") == "Привет"

    def test_missing_key_falls_back_to_default_language(self, translator):
        assert translator.translate("only_en", "ru") == "English only"

    def test_unknown_key_falls_back_to_key(self, translator):
        assert translator.translate("nope", "ru") == "nope"

    def test_unknown_language_uses_default(self, translator):
        assert translator.translate("greeting", "fr") == "Hello"

    def test_none_language_uses_default(self, translator):
        assert translator.translate("greeting") == "Hello"

    def test_default_language_must_have_catalog(self):
        with pytest.raises(ValueError):
            Translator({"ru": {}}, default_language="en")


class TestShippedCatalogs:
    def test_from_directory_loads_shipped_catalogs(self):
        translator = Translator.from_directory()

        assert translator.translate("user_create_success", "en") == "User created"
        assert translator.negotiate("ru-RU") == "ru"

    def test_catalogs_define_the_same_keys(self):
        en = json.loads((LOCALES_DIR / "en.json").read_text(encoding="utf-8"))
        ru = json.loads((LOCALES_DIR / "ru.json").read_text(encoding="utf-8"))

        assert set(en) == set(ru)

    def test_every_error_code_has_a_message(self):
        from userhub.domain.shared.exceptions import ErrorCode

        en = json.loads((LOCALES_DIR / "en.json").read_text(encoding="utf-8"))

        assert {code.value for code in ErrorCode} <= set(en)
