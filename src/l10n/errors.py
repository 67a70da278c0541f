"""Exception types raised by the l10n layer.

Only ``MissingKeyError`` is treated as recoverable by the scoped resolver;
everything else surfaces to the caller unchanged.
"""

from __future__ import annotations

__all__ = [
    "MissingKeyError",
    "CombinedKeyNotFoundError",
    "StackDepthError",
    "NoDelegateError",
    "InvalidKeyError",
]


class MissingKeyError(LookupError):
    """Raised by a translator when ``key`` has no mapping in the active locale."""

    def __init__(self, key: str, locale: str | None = None, message: str | None = None) -> None:
        if message is None:
            if locale is None:
                message = f"Key '{key}' could not be found"
            else:
                message = f"Key '{key}' could not be found for locale '{locale}'"
        super().__init__(message)
        self.key = key
        self.locale = locale

    def __str__(self) -> str:
        return str(self.args[0])

    def __reduce__(self):
        return (self.__class__, (self.key, self.locale, str(self)))


class CombinedKeyNotFoundError(MissingKeyError):
    """Neither the scoped nor the bare key resolved."""

    def __init__(self, scoped_key: str, key: str, locale: str | None = None) -> None:
        super().__init__(
            key,
            locale,
            message=f"Neither key '{scoped_key}' nor '{key}' could be found",
        )
        self.scoped_key = scoped_key

    def __reduce__(self):
        return (self.__class__, (self.scoped_key, self.key, self.locale))


class StackDepthError(RuntimeError):
    """Requested call depth has no corresponding frame (programming error)."""


class NoDelegateError(RuntimeError):
    """A lookup was attempted on a resolver with no translator bound."""


class InvalidKeyError(ValueError):
    """Empty key or empty scope name at lookup time."""
