"""Exceptions raised by the view layer.

Missing views and layouts are hard failures. Helper failures are split by
cause so callers can tell a programming error (unknown helper, broken
helper body) from a data error (argument path not in the context).
"""

from typing import Any


class RaptorError(Exception):
    """Base exception for all view rendering errors."""

    pass


class FileNotExistsException(RaptorError):
    """Raised when a view or layout file cannot be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"View file not found: {path}")


class HelperException(RaptorError):
    """Base exception for helper lookup and execution errors."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class HelperNotFoundException(HelperException):
    """Raised when a template calls a helper that is not registered."""

    def __init__(self, name: str):
        super().__init__(name, f'Helper "{name}" not found')


class HelperArgumentException(HelperException):
    """Raised when a helper argument path does not resolve in the context."""

    def __init__(self, name: str, argument: str):
        self.argument = argument
        super().__init__(name, f'Helper "{name}" argument "{argument}" resolved to undefined')


class HelperExecutionException(HelperException):
    """Raised when a helper body fails. The original error is the __cause__."""

    def __init__(self, name: str, args: list[Any], error: Exception):
        self.helper_args = args
        self.error = error
        super().__init__(name, f'Error executing helper "{name}": {error}')
