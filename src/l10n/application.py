"""Application-wide base translator.

Components obtain their translator once, at initialization:

    from l10n.application import get_translator

    class SettingsDialog:
        def __init__(self):
            self.trans = get_translator()   # scope "SettingsDialog"

The base translator is set during startup, either explicitly with
``set_base_translator`` or from environment variables via ``init_from_env``:

 - ``L10N_LOCALE``: locale of the catalog translator (default ``en``).
 - ``L10N_DEBUG``: truthy value wraps lookups in ``DebugTranslator``.
 - ``L10N_STRICT``: truthy value disables the exception suppressing wrapper,
   so missing keys raise instead of rendering as the key.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from .class_based import ClassBasedTranslator
from .errors import NoDelegateError
from .settings import (
    DEFAULT_LOCALE,
    DEBUG_MARKER,
    ENV_DEBUG,
    ENV_DEBUG_MARKER,
    ENV_LOCALE,
    ENV_STRICT,
    env_flag,
)
from .translator import CatalogTranslator, Translator
from .wrappers import DebugTranslator, ExceptionSuppressingTranslator

log = logging.getLogger(__name__)

__all__ = [
    "set_base_translator",
    "get_base_translator",
    "get_translator",
    "init_from_env",
    "reset",
]

_base_translator: Optional[Translator] = None
_suppress_missing = False


def set_base_translator(translator: Translator, *, suppress_missing: bool = False) -> None:
    """Install the base translator.

    With ``suppress_missing`` the translators handed out by ``get_translator``
    return the bare key instead of raising when a string is missing.
    """
    global _base_translator, _suppress_missing
    _base_translator = translator
    _suppress_missing = suppress_missing


def get_base_translator() -> Translator:
    if _base_translator is None:
        raise NoDelegateError("Base translator has not been initialized")
    return _base_translator


def reset() -> None:
    """Forget the base translator (tests and shutdown)."""
    global _base_translator, _suppress_missing
    _base_translator = None
    _suppress_missing = False


def get_translator(scope: Any = 0) -> Translator:
    """Return a class-scoped translator bound to the base translator.

    An integer ``scope`` is a call depth relative to the caller of this
    function, same as for ``ClassBasedTranslator`` itself. When missing
    strings are suppressed the scoped translator comes wrapped in
    ``ExceptionSuppressingTranslator`` (the scoped fallback still runs first).
    """
    base = get_base_translator()
    if isinstance(scope, int) and not isinstance(scope, bool):
        # one extra frame: this function sits between the caller and __init__
        scoped = ClassBasedTranslator(base, scope + 1)
    else:
        scoped = ClassBasedTranslator(base, scope)
    if _suppress_missing:
        return ExceptionSuppressingTranslator(scoped)
    return scoped


def init_from_env(
    env: "Mapping[str, str] | None" = None,
    catalogs: "Mapping[str, Mapping[str, str]] | None" = None,
) -> Translator:
    """Build and install the base translator from environment settings.

    ``catalogs`` maps locale -> {key: text} and is registered on the
    underlying ``CatalogTranslator``. Returns the installed base translator.
    """
    if env is None:
        env = os.environ
    locale = env.get(ENV_LOCALE) or DEFAULT_LOCALE
    catalog = CatalogTranslator(locale=locale)
    for loc, mapping in (catalogs or {}).items():
        catalog.register_catalog(loc, mapping)

    translator: Translator = catalog
    debug = env_flag(env, ENV_DEBUG)
    strict = env_flag(env, ENV_STRICT)
    if debug:
        translator = DebugTranslator(translator, env.get(ENV_DEBUG_MARKER) or DEBUG_MARKER)
    log.info("l10n initialized: locale=%s debug=%s strict=%s", locale, debug, strict)
    set_base_translator(translator, suppress_missing=not strict)
    return translator
