import logging

import pytest

from tests.factories import BrokenCatalogError, RecordingTranslator
from l10n import (
    ClassBasedTranslator,
    DebugTranslator,
    ExceptionSuppressingTranslator,
    MissingKeyError,
)


def test_suppressing_returns_value_when_present():
    trans = ExceptionSuppressingTranslator(RecordingTranslator({"k": "v"}))
    assert trans.get("k") == "v"
    assert trans.missing_keys() == []


def test_suppressing_returns_key_and_logs_once(caplog):
    trans = ExceptionSuppressingTranslator(RecordingTranslator())
    with caplog.at_level(logging.WARNING, logger="l10n.wrappers"):
        assert trans.get("missing.key") == "missing.key"
        assert trans.get("missing.key") == "missing.key"
    warnings = [r for r in caplog.records if r.name == "l10n.wrappers"]
    assert len(warnings) == 1
    assert "missing.key" in warnings[0].getMessage()
    assert trans.missing_keys() == ["missing.key"]


def test_suppressing_does_not_hide_other_failures():
    trans = ExceptionSuppressingTranslator(RecordingTranslator({"k": BrokenCatalogError("bad")}))
    with pytest.raises(BrokenCatalogError):
        trans.get("k")


def test_suppressing_around_class_based_returns_bare_key():
    scoped = ClassBasedTranslator(RecordingTranslator(), "Foo")
    trans = ExceptionSuppressingTranslator(scoped)
    assert trans.get("k") == "k"
    assert trans.missing_keys() == ["k"]


def test_debug_marks_values():
    trans = DebugTranslator(RecordingTranslator({"k": "v"}), marker="#")
    assert trans.get("k") == "#v#"


def test_debug_propagates_missing():
    trans = DebugTranslator(RecordingTranslator())
    with pytest.raises(MissingKeyError):
        trans.get("k")


def test_debug_marker_is_visible_through_scoped_lookup():
    delegate = DebugTranslator(RecordingTranslator({"Foo.title": "Title"}), marker="*")
    assert ClassBasedTranslator(delegate, "Foo").get("title") == "*Title*"
