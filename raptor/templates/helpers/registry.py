"""Helper registry and built-in registration decorator.

Helpers are named functions callable from templates:

    {{ upper user.name }}
    {{ truncate post.body 120 }}

Built-in helpers are declared with the @builtin_helper decorator, which
records them at import time. Every HelperRegistry starts with its own copy
of the built-ins, so registering, removing or clearing on one registry
never affects another.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from raptor.core.exceptions import (
    HelperArgumentException,
    HelperExecutionException,
    HelperNotFoundException,
)
from raptor.core.types import Context, HelperFunction, Resolver, is_missing, to_display
from raptor.templates.arguments import classify, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HelperDefinition:
    """A built-in helper with its documentation."""

    name: str
    func: HelperFunction
    description: str = ""
    example: str | None = None  # template usage, e.g. '{{ upper user.name }}'


# Built-ins collected by @builtin_helper, in declaration order
_BUILTINS: dict[str, HelperDefinition] = {}


def builtin_helper(
    name: str,
    description: str = "",
    example: str | None = None,
) -> Callable[[HelperFunction], HelperFunction]:
    """Decorator to declare a built-in helper.

    Usage:
        @builtin_helper(
            name="upper",
            description="Uppercase the value",
            example="{{ upper user.name }}",
        )
        def helper_upper(value) -> str:
            return to_display(value).upper()
    """

    def decorator(func: HelperFunction) -> HelperFunction:
        _BUILTINS[name] = HelperDefinition(
            name=name,
            func=func,
            description=description,
            example=example,
        )
        return func

    return decorator


def builtin_helpers() -> list[HelperDefinition]:
    """Get all declared built-in helpers."""
    return list(_BUILTINS.values())


class HelperRegistry:
    """Name -> helper mapping used by the template renderer.

    Lookup is case-sensitive and exact. Registering an existing name
    replaces the previous helper.
    """

    def __init__(self, include_builtins: bool = True):
        self._helpers: dict[str, HelperFunction] = {}
        if include_builtins:
            for definition in builtin_helpers():
                self._helpers[definition.name] = definition.func

    def register(self, name: str, fn: HelperFunction) -> None:
        """Register a helper, replacing any helper with the same name."""
        if name in self._helpers:
            logger.debug("[HELPERS] Overwriting helper '%s'", name)
        self._helpers[name] = fn

    def get(self, name: str) -> HelperFunction | None:
        """Get a helper by name."""
        return self._helpers.get(name)

    def has(self, name: str) -> bool:
        """Check if a helper is registered."""
        return name in self._helpers

    def remove(self, name: str) -> bool:
        """Remove a helper. Returns False if it was not registered."""
        if name not in self._helpers:
            return False
        del self._helpers[name]
        return True

    def clear(self) -> None:
        """Remove every helper, built-ins included (for testing)."""
        self._helpers.clear()

    def names(self) -> list[str]:
        """Get the names of all registered helpers."""
        return list(self._helpers)

    def count(self) -> int:
        """Get total number of registered helpers."""
        return len(self._helpers)

    def to_api_format(self) -> dict:
        """Generate the response for the /helpers endpoint.

        Built-ins that are still registered with their original function
        carry their description and example; custom helpers (and
        overridden built-ins) are listed by name only.
        """
        helpers_list = []
        for name, fn in self._helpers.items():
            definition = _BUILTINS.get(name)
            builtin = definition is not None and definition.func is fn
            helpers_list.append(
                {
                    "name": name,
                    "builtin": builtin,
                    "description": definition.description if builtin else "",
                    "example": definition.example if builtin else None,
                }
            )

        # Sort by name for consistent output
        helpers_list.sort(key=lambda h: h["name"])

        return {
            "total_helpers": len(helpers_list),
            "helpers": helpers_list,
        }

    def parse_args(self, raw: str, context: Context, resolver: Resolver) -> list[Any]:
        """Tokenize raw argument text and resolve every token to a value.

        Args:
            raw: Argument text following the helper name
            context: Current render context
            resolver: Path resolver, called as resolver(path, context)

        Returns:
            List of argument values

        Raises:
            HelperArgumentException: A path token resolved to MISSING
        """
        return self._parse_args("", raw, context, resolver)

    def execute(self, name: str, raw: str, context: Context, resolver: Resolver) -> str:
        """Run a helper with arguments parsed from raw text.

        Raises:
            HelperNotFoundException: name is not registered
            HelperArgumentException: An argument path did not resolve
            HelperExecutionException: The helper itself raised
        """
        helper = self._helpers.get(name)
        if helper is None:
            raise HelperNotFoundException(name)

        args = self._parse_args(name, raw, context, resolver)

        try:
            result = helper(*args)
        except Exception as e:
            logger.error("[HELPERS] Helper '%s' failed with args %r: %s", name, args, e)
            raise HelperExecutionException(name, args, e) from e

        return to_display(result)

    def _parse_args(self, name: str, raw: str, context: Context, resolver: Resolver) -> list[Any]:
        args: list[Any] = []
        for token in tokenize(raw):
            is_literal, value = classify(token)
            if not is_literal:
                value = resolver(token, context)
                if is_missing(value):
                    raise HelperArgumentException(name, token)
            args.append(value)
        return args
