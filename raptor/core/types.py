"""Core data types for Raptor views.

The rendering context is plain Python data: strings, numbers, booleans,
None, sequences, mappings, or arbitrary objects (dataclasses, pydantic
models) read by attribute.

MISSING marks a path that did not resolve. It is distinct from None, which
is an explicit null supplied by the caller.
"""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, Final


class _Missing:
    """Sentinel type for an unresolved context path."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()

# Values a context may hold. Anything else is treated as an opaque object.
ContextValue = str | int | float | bool | None | Sequence[Any] | Mapping[str, Any] | object

# The mapping passed to a render call
Context = Mapping[str, Any]

# Helpers take resolved positional arguments; the result is coerced to str
HelperFunction = Callable[..., Any]

# Path resolver handed to the helper registry by the renderer
Resolver = Callable[[str, Context], Any]

# Async text reader for template files
TemplateReader = Callable[[Path], Awaitable[str]]


def is_missing(value: Any) -> bool:
    """True if value is the MISSING sentinel."""
    return value is MISSING


def to_display(value: Any) -> str:
    """Convert a context value to the text that lands in the output.

    None and MISSING become an empty string, booleans are lowercase,
    integral floats drop their fractional part, and sequences are
    comma-joined.
    """
    if value is None or value is MISSING:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_display(item) for item in value)
    return str(value)
