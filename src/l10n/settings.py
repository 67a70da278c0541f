"""Environment-driven configuration for the l10n layer."""

from __future__ import annotations

import os
from typing import Final, Mapping

ENV_LOCALE: Final = "L10N_LOCALE"
ENV_DEBUG: Final = "L10N_DEBUG"
ENV_DEBUG_MARKER: Final = "L10N_DEBUG_MARKER"
ENV_STRICT: Final = "L10N_STRICT"

FALLBACK_LOCALE: Final = "en"
DEFAULT_LOCALE: Final = os.environ.get(ENV_LOCALE, FALLBACK_LOCALE)
DEBUG_MARKER: Final = os.environ.get(ENV_DEBUG_MARKER, "*")

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(env: Mapping[str, str], name: str) -> bool:
    """Return True if ``name`` is set to a truthy value ("1", "true", "yes", "on")."""
    raw = env.get(name)
    if not raw:
        return False
    return raw.strip().lower() in _TRUTHY
