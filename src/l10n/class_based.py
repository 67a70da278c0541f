"""Class-scoped translator.

Wraps another translator and prefixes every key with the name of the owning
component: ``trans.get("title")`` inside ``MainWindow`` first asks the
delegate for ``"MainWindow.title"`` and only falls back to the bare
``"title"`` when the scoped key is missing.

Usage pattern:
    class MainWindow:
        def __init__(self, base):
            self.trans = ClassBasedTranslator(base)        # scope "MainWindow"
            self.other = ClassBasedTranslator(base, self)  # same, explicit

Only ``MissingKeyError`` triggers the fallback. Any other failure raised by
the delegate propagates unchanged from whichever lookup raised it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .errors import (
    CombinedKeyNotFoundError,
    InvalidKeyError,
    MissingKeyError,
    NoDelegateError,
)
from .scope import resolve_by_depth, resolve_explicit, short_name
from .translator import Translator

log = logging.getLogger(__name__)

__all__ = ["ClassBasedTranslator"]


class ClassBasedTranslator:
    """Translator scoping keys by the component that created it.

    Parameters
    ----------
    translator : Translator | None
        Delegate used for lookups. May be ``None`` when only the scope name is
        needed; ``get`` then raises ``NoDelegateError``.
    scope : int | str | type | object
        ``int``: call depth above the constructor's caller (0 = the caller).
        ``str``: explicit scope name, used verbatim.
        class or instance: its (type's) short name.
    """

    __slots__ = ("_translator", "_class_name")

    def __init__(self, translator: Optional[Translator], scope: Any = 0) -> None:
        if scope is None or isinstance(scope, bool):
            raise TypeError(f"Invalid scope: {scope!r}")
        if isinstance(scope, int):
            # must be called directly from here: depth is relative to our caller
            name = resolve_by_depth(scope)
        elif isinstance(scope, str):
            name = resolve_explicit(scope)
        else:
            name = short_name(scope)
        self._translator = translator
        self._class_name = name

    @property
    def class_name(self) -> str:
        return self._class_name

    def get_class_name(self) -> str:
        return self._class_name

    @property
    def translator(self) -> Optional[Translator]:
        return self._translator

    def get(self, key: str) -> str:
        """Return text for ``<scope>.<key>``, falling back to ``key``.

        Raises:
            InvalidKeyError: key or scope name is empty.
            NoDelegateError: no translator bound.
            CombinedKeyNotFoundError: neither key could be found.
        """
        if not key:
            raise InvalidKeyError("Lookup key must not be empty")
        if not self._class_name:
            raise InvalidKeyError(f"Cannot scope key '{key}' with an empty scope name")
        translator = self._translator
        if translator is None:
            raise NoDelegateError(
                f"No translator bound to scope '{self._class_name}' (lookup of '{key}')"
            )

        scoped_key = f"{self._class_name}.{key}"
        try:
            return translator.get(scoped_key)
        except MissingKeyError:
            log.debug("Scoped key %r missing, falling back to %r", scoped_key, key)

        try:
            return translator.get(key)
        except MissingKeyError as e:
            raise CombinedKeyNotFoundError(scoped_key, key, e.locale) from e

    def __repr__(self) -> str:
        return f"ClassBasedTranslator(scope={self._class_name!r}, translator={self._translator!r})"
