"""Class-scoped localization helpers.

Modules:
 - ``translator``: the ``Translator`` contract and ``CatalogTranslator``.
 - ``class_based``: ``ClassBasedTranslator`` (keys scoped by component name
   with fallback to the bare key).
 - ``scope``: scope name resolution (explicit tokens or call depth).
 - ``wrappers``: exception suppressing and debug decorators.
 - ``application``: process-wide base translator.
 - ``qt``: adapter over Qt's translation system (lazy PyQt6 import).
"""

from __future__ import annotations

from .class_based import ClassBasedTranslator
from .errors import (
    CombinedKeyNotFoundError,
    InvalidKeyError,
    MissingKeyError,
    NoDelegateError,
    StackDepthError,
)
from .translator import CatalogTranslator, Translator
from .wrappers import DebugTranslator, ExceptionSuppressingTranslator

__all__ = [
    "Translator",
    "CatalogTranslator",
    "ClassBasedTranslator",
    "ExceptionSuppressingTranslator",
    "DebugTranslator",
    "MissingKeyError",
    "CombinedKeyNotFoundError",
    "StackDepthError",
    "NoDelegateError",
    "InvalidKeyError",
]
