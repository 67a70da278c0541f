"""Translator backed by Qt's translation system.

No Qt dependency at import time: ``PyQt6`` is imported lazily on the first
lookup unless a ``translate`` callable is injected (tests, headless tools).
Qt hands back the source text when no installed ``QTranslator`` knows the
key, so an unchanged result is reported as ``MissingKeyError``.
"""

from __future__ import annotations

from typing import Callable, Optional

from .errors import MissingKeyError

__all__ = ["QtTranslator"]

TranslateFn = Callable[[str, str], str]


def _qt_translate() -> TranslateFn:
    from PyQt6.QtCore import QCoreApplication  # type: ignore

    return QCoreApplication.translate


class QtTranslator:
    """Look keys up in a Qt translation ``context``."""

    def __init__(self, context: str, translate: Optional[TranslateFn] = None) -> None:
        self._context = context
        self._translate = translate

    @property
    def context(self) -> str:
        return self._context

    def get(self, key: str) -> str:
        if self._translate is None:
            self._translate = _qt_translate()
        text = self._translate(self._context, key)
        if not text or text == key:
            raise MissingKeyError(
                key, message=f"Key '{key}' has no translation in Qt context '{self._context}'"
            )
        return text

    def __repr__(self) -> str:
        return f"QtTranslator(context={self._context!r})"
