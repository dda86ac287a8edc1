from pathlib import Path

from agri_sakha.translations import LANGUAGES, language_name, normalize_language, translations, ui_translator


def test_languages_are_ordered_with_native_names():
    assert list(LANGUAGES.items()) == [("en", "English"), ("hi", "हिन्दी"), ("gu", "ગુજરાતી")]


def test_every_language_has_ui_strings():
    assert set(translations) == set(LANGUAGES)


def test_ui_translator_formats_arguments():
    assert ui_translator("tts_button_tooltip", "en", lang="Hindi") == "Read aloud in Hindi"


def test_ui_translator_falls_back_to_english_key():
    assert ui_translator("send_button_busy", "gu") == "..."


def test_ui_translator_unknown_language_uses_english():
    assert ui_translator("input_placeholder", "fr") == "Type your message..."


def test_ui_translator_missing_key():
    assert ui_translator("no_such_key", "hi", default="fallback") == "fallback"
    assert ui_translator("no_such_key", "hi") == "[no_such_key NOT FOUND in hi or en]"


def test_ui_translator_missing_format_argument_returns_template():
    assert ui_translator("tts_button_tooltip", "en") == "Read aloud in {lang}"


def test_normalize_language():
    assert normalize_language("gu") == "gu"
    assert normalize_language("de") == "en"
    assert language_name("hi") == "हिन्दी"


def test_audio_error_message_is_fully_translated():
    for language in LANGUAGES:
        message = ui_translator("tts_error_generation", language)
        assert "{" not in message
    assert ui_translator("tts_error_generation", "hi") != ui_translator("tts_error_generation", "en")


def test_every_ui_string_is_used_by_the_app():
    source = (Path(__file__).resolve().parent.parent / "app.py").read_text(encoding="utf-8")
    unused = [key for key in translations["en"] if f'"{key}"' not in source]
    assert unused == []
    for language in LANGUAGES:
        assert set(translations[language]) <= set(translations["en"])
