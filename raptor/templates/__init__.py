"""Template language for Raptor views.

Usage:
    from raptor.templates import TemplateRenderer

    renderer = TemplateRenderer("./views")
    html = await renderer.render("<h1>{{ user.name }}</h1>", {"user": {"name": "Ana"}})

Supported syntax:
    {{ path }}                      escaped interpolation
    {{{ path }}}                    raw interpolation
    {{#if path}}A{{else}}B{{/if}}   conditional, else optional
    {{#each path}}...{{/each}}      iteration with this, @index, @first, @last
    {{> name}}                      partial from partials/name.html
    {{ helper arg "text" 42 true }} helper call
"""

from raptor.templates.context import escape_html, is_truthy, resolve_path
from raptor.templates.helpers import HelperDefinition, HelperRegistry, builtin_helper
from raptor.templates.renderer import DEFAULT_MAX_PARTIAL_DEPTH, TemplateRenderer

__all__ = [
    # Main API
    "TemplateRenderer",
    "DEFAULT_MAX_PARTIAL_DEPTH",
    # Helpers
    "HelperDefinition",
    "HelperRegistry",
    "builtin_helper",
    # Context access
    "escape_html",
    "is_truthy",
    "resolve_path",
]
