"""Core types, interfaces and exceptions for Raptor views.

All context values are plain Python data read by key, index or attribute.
"""

from raptor.core.exceptions import (
    FileNotExistsException,
    HelperArgumentException,
    HelperException,
    HelperExecutionException,
    HelperNotFoundException,
    RaptorError,
)
from raptor.core.interfaces import TemplateEngine, View
from raptor.core.types import (
    MISSING,
    Context,
    ContextValue,
    HelperFunction,
    Resolver,
    TemplateReader,
    is_missing,
    to_display,
)

__all__ = [
    # Types
    "MISSING",
    "Context",
    "ContextValue",
    "HelperFunction",
    "Resolver",
    "TemplateReader",
    "is_missing",
    "to_display",
    # Interfaces
    "TemplateEngine",
    "View",
    # Exceptions
    "FileNotExistsException",
    "HelperArgumentException",
    "HelperException",
    "HelperExecutionException",
    "HelperNotFoundException",
    "RaptorError",
]
