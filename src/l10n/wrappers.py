"""Translator decorators.

 - ``ExceptionSuppressingTranslator``: keeps the UI usable when strings are
   missing by returning the key itself (easy to spot during audits). Each
   missing key is logged once.
 - ``DebugTranslator``: marks every resolved string so untranslated literals
   stand out in a running application.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import List, Set

from .errors import MissingKeyError
from .settings import DEBUG_MARKER
from .translator import Translator

log = logging.getLogger(__name__)

__all__ = ["ExceptionSuppressingTranslator", "DebugTranslator"]


class ExceptionSuppressingTranslator:
    """Return the key instead of raising ``MissingKeyError``.

    Other exceptions from the delegate are not suppressed.
    """

    def __init__(self, translator: Translator) -> None:
        self._translator = translator
        self._lock = RLock()
        self._reported: Set[str] = set()

    def get(self, key: str) -> str:
        try:
            return self._translator.get(key)
        except MissingKeyError as e:
            with self._lock:
                first = key not in self._reported
                self._reported.add(key)
            if first:
                log.warning("Missing translation: %s", e)
            return key

    def missing_keys(self) -> List[str]:
        with self._lock:
            return sorted(self._reported)

    def __repr__(self) -> str:
        return f"ExceptionSuppressingTranslator({self._translator!r})"


class DebugTranslator:
    """Surround every resolved string with ``marker``."""

    def __init__(self, translator: Translator, marker: str = DEBUG_MARKER) -> None:
        self._translator = translator
        self._marker = marker

    def get(self, key: str) -> str:
        value = self._translator.get(key)
        return f"{self._marker}{value}{self._marker}"

    def __repr__(self) -> str:
        return f"DebugTranslator({self._translator!r}, marker={self._marker!r})"
