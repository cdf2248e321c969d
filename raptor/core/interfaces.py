"""Contracts for template engines and view engines.

A TemplateEngine turns template text plus a context into output text.
A View renders a named view inside a layout.
"""

from typing import Protocol, runtime_checkable

from raptor.core.types import Context


@runtime_checkable
class TemplateEngine(Protocol):
    """Renders in-memory template text."""

    async def render(self, template: str, context: Context | None = None) -> str:
        """Render template with context.

        Example:
            await engine.render("Hello {{ name }}", {"name": "Felipe"})
            # => "Hello Felipe"
        """
        ...


@runtime_checkable
class View(Protocol):
    """Renders a complete page from a view name and an optional layout."""

    async def render(
        self,
        view: str,
        params: Context | None = None,
        layout: str | None = None,
    ) -> str:
        """Render view inside layout and return final HTML."""
        ...
