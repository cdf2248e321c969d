"""Raptor - view rendering for a minimal web framework.

Usage:
    from raptor import ViewComposer

    views = ViewComposer("./views")
    html = await views.render("home", {"user": {"name": "Felipe"}})

ViewComposer composes views into layouts; TemplateRenderer interprets the
template language; HelperRegistry holds the helpers templates can call.
FastAPI integration lives in raptor.api.
"""

from raptor.config import ViewSettings, load_settings
from raptor.core import (
    MISSING,
    FileNotExistsException,
    HelperArgumentException,
    HelperException,
    HelperExecutionException,
    HelperNotFoundException,
    RaptorError,
)
from raptor.templates import HelperRegistry, TemplateRenderer
from raptor.views import ViewComposer

__version__ = "0.4.0"

__all__ = [
    # Main API
    "ViewComposer",
    "TemplateRenderer",
    "HelperRegistry",
    # Configuration
    "ViewSettings",
    "load_settings",
    # Types
    "MISSING",
    # Exceptions
    "FileNotExistsException",
    "HelperArgumentException",
    "HelperException",
    "HelperExecutionException",
    "HelperNotFoundException",
    "RaptorError",
]
