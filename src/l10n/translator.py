"""Translator contract and an in-memory catalog implementation.

A *translator* maps a string key to localized text. Every translator exposes a
single ``get(key)`` method and raises ``MissingKeyError`` when the active
locale has no mapping for the key. Other failures (broken catalog state, I/O
in a file-backed implementation) must use a different exception type so that
callers can tell them apart.

Design decisions / assumptions:
 - A *default locale* always exists and is consulted after the current locale.
 - Missing key after fallback raises (the suppressing wrapper in
   ``l10n.wrappers`` restores the "return the key" behaviour when wanted).
 - Catalog mutation is guarded by a lock; lookups only read.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict, List, Mapping, Optional, Protocol, runtime_checkable

from .errors import MissingKeyError
from .settings import DEFAULT_LOCALE, FALLBACK_LOCALE

__all__ = ["Translator", "CatalogTranslator"]


@runtime_checkable
class Translator(Protocol):
    """Key to text lookup service."""

    def get(self, key: str) -> str:  # pragma: no cover - protocol
        ...


class CatalogTranslator:
    """Translator backed by per-locale dictionaries registered at runtime."""

    def __init__(self, locale: str = DEFAULT_LOCALE, default_locale: str = FALLBACK_LOCALE) -> None:
        self._lock = RLock()
        self._catalogs: Dict[str, Dict[str, str]] = {}
        self._locale = locale
        self._default_locale = default_locale

    # Catalog management -------------------------------------------------
    def register_catalog(self, locale: str, catalog: Mapping[str, str]) -> None:
        """Register or extend a catalog for a locale.

        Existing keys are updated (last registration wins). Empty catalogs allowed.
        """
        with self._lock:
            existing = self._catalogs.setdefault(locale, {})
            existing.update(catalog)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def locales(self) -> List[str]:
        with self._lock:
            return sorted(self._catalogs)

    def keys(self, locale: Optional[str] = None) -> List[str]:
        with self._lock:
            catalog = self._catalogs.get(locale or self._locale, {})
            return sorted(catalog)

    # Lookup -------------------------------------------------------------
    def _lookup(self, locale: str, key: str) -> Optional[str]:
        catalog = self._catalogs.get(locale)
        if not catalog:
            return None
        return catalog.get(key)

    def has_key(self, key: str) -> bool:
        return self._lookup(self._locale, key) is not None or (
            self._locale != self._default_locale
            and self._lookup(self._default_locale, key) is not None
        )

    def get(self, key: str) -> str:
        locale = self._locale
        text = self._lookup(locale, key)
        if text is None and locale != self._default_locale:
            text = self._lookup(self._default_locale, key)
        if text is None:
            raise MissingKeyError(key, locale)
        return text

    def __repr__(self) -> str:
        return f"CatalogTranslator(locale={self._locale!r}, default_locale={self._default_locale!r})"
