import pytest

from l10n import ClassBasedTranslator, MissingKeyError
from l10n.qt import QtTranslator


def _fake_translate(table):
    calls = []

    def translate(context, key):
        calls.append((context, key))
        return table.get((context, key), key)

    return translate, calls


def test_translated_text_returned():
    translate, calls = _fake_translate({("MainWindow", "File"): "Datei"})
    trans = QtTranslator("MainWindow", translate=translate)
    assert trans.get("File") == "Datei"
    assert calls == [("MainWindow", "File")]


def test_untranslated_text_is_missing():
    translate, _ = _fake_translate({})
    trans = QtTranslator("MainWindow", translate=translate)
    with pytest.raises(MissingKeyError) as excinfo:
        trans.get("File")
    assert "MainWindow" in str(excinfo.value)


def test_as_delegate_of_class_based_translator():
    translate, calls = _fake_translate({("app", "File"): "Datei"})
    scoped = ClassBasedTranslator(QtTranslator("app", translate=translate), "Menu")
    assert scoped.get("File") == "Datei"
    assert calls == [("app", "Menu.File"), ("app", "File")]


def test_real_qt_without_installed_translators():
    pytest.importorskip("PyQt6.QtCore")
    trans = QtTranslator("NoSuchContext")
    with pytest.raises(MissingKeyError):
        trans.get("untranslated.key")
