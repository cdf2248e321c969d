"""Context access for template rendering.

Dot-separated paths are resolved against the render context. Resolution
never raises: anything that cannot be found comes back as MISSING.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from raptor.core.types import MISSING, Context

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def _lookup(value: Any, part: str) -> Any:
    """Look up one path segment on a mapping, sequence or object."""
    if isinstance(value, Mapping):
        return value[part] if part in value else MISSING

    if isinstance(value, str):
        return MISSING

    if isinstance(value, Sequence):
        if part == "length":
            return len(value)
        if part.isascii() and part.isdigit():
            index = int(part)
            return value[index] if index < len(value) else MISSING
        return MISSING

    # Objects: public attributes only (dataclasses, pydantic models)
    if part.startswith("_"):
        return MISSING
    return getattr(value, part, MISSING)


def resolve_path(path: str, context: Context) -> Any:
    """Resolve a dotted path like 'user.profile.name' against context.

    Args:
        path: Dot-separated path
        context: Render context

    Returns:
        The value found, None for an explicit null, or MISSING
    """
    value: Any = context
    for part in path.split("."):
        if value is None or value is MISSING:
            return MISSING
        value = _lookup(value, part)
    return value


def is_truthy(value: Any) -> bool:
    """Template truthiness.

    False, None, MISSING, "" and an empty list are falsy. Everything
    else is truthy, including 0 and empty mappings.
    """
    if value is False or value is None or value is MISSING:
        return False
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def is_sequence(value: Any) -> bool:
    """True for values #each iterates over (lists and tuples)."""
    return isinstance(value, (list, tuple))


def item_context(context: Context, item: Any, index: int, total: int) -> dict[str, Any]:
    """Build the per-iteration context for an #each body."""
    return {
        **context,
        "this": item,
        "@index": index,
        "@first": index == 0,
        "@last": index == total - 1,
    }


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for safe HTML output."""
    return "".join(_HTML_ESCAPES.get(char, char) for char in text)
