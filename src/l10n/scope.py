"""Scope name resolution for class-scoped translators.

A scope name is the short identifier prepended to lookup keys
(``"<scope>.<key>"``). It is produced once, when the translator is built,
either from an explicit token or by inspecting the live call stack.

Explicit tokens are preferred: components pass ``self`` (or their class, or
a literal string) and the scope follows from it. Depth-based resolution is a
convenience layered on top; it assumes the translator is constructed
directly by the component to be identified. Constructing it through a
factory or subclass ``__init__`` shifts the effective depth and callers must
account for that themselves.
"""

from __future__ import annotations

import inspect
from types import FrameType
from typing import Any, Optional

from .errors import StackDepthError

__all__ = [
    "resolve_explicit",
    "resolve_by_depth",
    "short_name",
    "frame_component_name",
]


def resolve_explicit(name: str) -> str:
    """Return ``name`` verbatim (``None`` is rejected)."""
    if name is None:
        raise TypeError("Explicit scope name must not be None")
    return name


def short_name(token: Any) -> str:
    """Return the scope name for an explicit identity token.

    Strings are used verbatim, classes give their ``__name__`` and any other
    object gives the name of its type.
    """
    if token is None:
        raise TypeError("Scope token must not be None")
    if isinstance(token, str):
        return token
    if isinstance(token, type):
        return token.__name__
    return type(token).__name__


def _class_from_qualname(qualname: str) -> Optional[str]:
    # "Foo.method" -> "Foo"; "Foo.method.<locals>.inner" -> "Foo"; "func" -> None
    parts = qualname.split(".")[:-1]
    while parts and parts[-1] == "<locals>":
        parts = parts[:-2]
    return parts[-1] if parts else None


def _is_class_body(frame: FrameType) -> bool:
    code = frame.f_code
    if code.co_argcount or code.co_name != code.co_qualname.rsplit(".", 1)[-1]:
        return False
    local_names = frame.f_locals
    return "__module__" in local_names and "__qualname__" in local_names


def frame_component_name(frame: FrameType) -> str:
    """Return the short name of the component owning ``frame``.

    A class body frame names its own class; a function frame names the class
    declaring it (or enclosing it, for closures); module-level code names the
    last segment of its module.
    """
    code = frame.f_code
    if _is_class_body(frame):
        return code.co_qualname.rsplit(".", 1)[-1]
    owner = _class_from_qualname(code.co_qualname)
    if owner:
        return owner
    module = frame.f_globals.get("__name__") or "__main__"
    return module.rsplit(".", 1)[-1]


def resolve_by_depth(depth: int) -> str:
    """Return the component name ``depth`` frames above the caller's caller.

    The function calling ``resolve_by_depth`` is the *entry point* (normally
    ``ClassBasedTranslator.__init__``); depth 0 names whoever invoked that
    entry point.

    Raises:
        ValueError: if depth is negative.
        StackDepthError: if the stack has fewer frames than requested.
    """
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"Depth must be an int, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")
    frame = inspect.currentframe()
    if frame is None:  # pragma: no cover - interpreters without frame support
        raise StackDepthError("Call stack introspection is not available")
    try:
        # skip resolve_by_depth itself and the entry point
        for _ in range(depth + 2):
            frame = frame.f_back
            if frame is None:
                raise StackDepthError(f"Call stack is not deep enough for depth {depth}")
        return frame_component_name(frame)
    finally:
        del frame
