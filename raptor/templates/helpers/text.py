"""Text helpers: case folding and truncation."""

from raptor.core.types import to_display
from raptor.templates.helpers.registry import builtin_helper

DEFAULT_TRUNCATE_LENGTH = 50
ELLIPSIS = "..."


@builtin_helper(
    name="upper",
    description="Uppercase the value",
    example="{{ upper user.name }}",
)
def helper_upper(value) -> str:
    return to_display(value).upper()


@builtin_helper(
    name="lower",
    description="Lowercase the value",
    example="{{ lower user.email }}",
)
def helper_lower(value) -> str:
    return to_display(value).lower()


@builtin_helper(
    name="truncate",
    description="Cut the value to a length (default 50), appending '...' when cut",
    example="{{ truncate post.body 120 }}",
)
def helper_truncate(value, length=DEFAULT_TRUNCATE_LENGTH) -> str:
    text = to_display(value)
    length = int(length)
    if len(text) > length:
        return text[:length] + ELLIPSIS
    return text
