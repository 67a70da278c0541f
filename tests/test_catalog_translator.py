import pytest

from l10n import CatalogTranslator, MissingKeyError, Translator


def _translator():
    trans = CatalogTranslator(locale="en", default_locale="en")
    trans.register_catalog("en", {"greeting.hello": "Hello", "greeting.bye": "Bye"})
    return trans


def test_basic_translation_and_fallback():
    trans = _translator()
    assert trans.get("greeting.hello") == "Hello"
    # Register a second locale with a subset of keys.
    trans.register_catalog("de", {"greeting.hello": "Hallo"})
    trans.set_locale("de")
    assert trans.locale == "de"
    assert trans.get("greeting.hello") == "Hallo"
    # Missing in de, fallback to en
    assert trans.get("greeting.bye") == "Bye"


def test_missing_key_raises_with_locale():
    trans = _translator()
    trans.set_locale("fr")
    with pytest.raises(MissingKeyError) as excinfo:
        trans.get("nope")
    assert excinfo.value.key == "nope"
    assert excinfo.value.locale == "fr"
    assert str(excinfo.value) == "Key 'nope' could not be found for locale 'fr'"


def test_last_registration_wins():
    trans = _translator()
    trans.register_catalog("en", {"greeting.hello": "Hi"})
    assert trans.get("greeting.hello") == "Hi"
    assert trans.keys() == ["greeting.bye", "greeting.hello"]


def test_has_key_and_locales():
    trans = _translator()
    trans.register_catalog("de", {})
    trans.set_locale("de")
    assert trans.has_key("greeting.bye")
    assert not trans.has_key("nope")
    assert trans.locales() == ["de", "en"]
    assert trans.keys("de") == []


def test_satisfies_translator_protocol():
    assert isinstance(_translator(), Translator)


def test_fallback_locale_is_english_regardless_of_active_locale():
    trans = CatalogTranslator(locale="de")
    trans.register_catalog("en", {"close": "Close"})
    assert trans.default_locale == "en"
    assert trans.get("close") == "Close"
