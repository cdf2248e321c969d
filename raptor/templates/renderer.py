"""Template renderer.

Runs a template through a fixed five-stage pipeline:

    1. Partials       {{> header }}
    2. Iteration      {{#each items}} ... {{/each}}
    3. Conditionals   {{#if user}} ... {{else}} ... {{/if}}
    4. Helpers        {{ upper user.name }}
    5. Interpolation  {{ user.name }} (escaped), {{{ html }}} (raw)

The order is part of the contract. Partials go first so their markup is
processed with the host template. Each #each iteration adds this, @index,
@first and @last to the context, and the body then goes through stages
3-5 with that context. Helpers run before interpolation because
'{{ name arg }}' would otherwise be read as a variable.

Output produced by partials, #each blocks and helpers is held aside until
the last stage has run, so later stages never read it as template text.
A value like "{{ secret }}" in the context is always emitted literally.

Only helpers can make render() fail. A missing partial renders as an empty
string, unresolved variables render as empty strings, and malformed tags
stay in the output as literal text.
"""

import logging
import re
import secrets
from pathlib import Path
from typing import Any

from raptor.core.types import Context, HelperFunction, TemplateReader, to_display
from raptor.templates.context import (
    escape_html,
    is_sequence,
    is_truthy,
    item_context,
    resolve_path,
)
from raptor.templates.helpers import HelperRegistry
from raptor.templates.loader import partial_path, read_template
from raptor.templates.scanner import (
    EACH_CLOSE,
    EACH_OPEN_RE,
    ELSE,
    ESCAPED_VAR_RE,
    HELPER_RE,
    IF_CLOSE,
    IF_OPEN_RE,
    LOOP_ESCAPED_VAR_RE,
    LOOP_IF_OPEN_RE,
    LOOP_RAW_VAR_RE,
    PARTIAL_RE,
    RAW_VAR_RE,
    Block,
    iter_blocks,
    iter_tags,
    substitute,
)

logger = logging.getLogger(__name__)

# Partials nested deeper than this render as an empty string (stops include cycles)
DEFAULT_MAX_PARTIAL_DEPTH = 32


class RenderedSlots:
    """Finished output kept out of the remaining pipeline stages.

    hold() swaps text for a placeholder that no stage recognises as a tag;
    release() puts the text back. Placeholders carry a random per-render
    token, so context data cannot forge one.
    """

    def __init__(self):
        self._prefix = f"\x00{secrets.token_hex(8)}:"
        self._pattern = re.compile(re.escape(self._prefix) + r"(\d+)\x00")
        self._values: list[str] = []

    def hold(self, text: str) -> str:
        if not text:
            return ""
        # Stored values never contain placeholders, so release() is one pass
        self._values.append(self.release(text))
        return f"{self._prefix}{len(self._values) - 1}\x00"

    def release(self, text: str) -> str:
        return self._pattern.sub(lambda match: self._values[int(match.group(1))], text)


class TemplateRenderer:
    """Renders template text against a context.

    Stateless between calls: every render() re-scans the template, so one
    renderer can serve any number of concurrent renders.
    """

    def __init__(
        self,
        views_directory: str | Path,
        helpers: HelperRegistry | None = None,
        loader: TemplateReader | None = None,
        max_partial_depth: int = DEFAULT_MAX_PARTIAL_DEPTH,
    ):
        self._views_directory = Path(views_directory)
        self._helpers = helpers if helpers is not None else HelperRegistry()
        self._loader = loader or read_template
        self._max_partial_depth = max_partial_depth

    @property
    def helpers(self) -> HelperRegistry:
        """The helper registry (for registering or inspecting helpers)."""
        return self._helpers

    @property
    def views_directory(self) -> Path:
        return self._views_directory

    def register_helper(self, name: str, fn: HelperFunction) -> None:
        """Register a custom helper."""
        self._helpers.register(name, fn)

    async def render(self, template: str, context: Context | None = None) -> str:
        """Render a template with a context.

        Args:
            template: Template text
            context: Data for the template (defaults to empty)

        Returns:
            Rendered text

        Raises:
            HelperArgumentException: A helper argument path did not resolve
            HelperExecutionException: A helper raised
        """
        return await self._render(template, context if context is not None else {}, 0)

    async def _render(self, template: str, context: Context, depth: int) -> str:
        slots = RenderedSlots()
        result = await self._process_partials(template, context, depth, slots)
        result = self._process_each(result, context, slots)
        result = self._process_if(result, context, IF_OPEN_RE)
        result = self._process_helpers(result, context, slots)
        result = self._process_interpolation(result, context, RAW_VAR_RE, ESCAPED_VAR_RE)
        return slots.release(result)

    # =========================================================================
    # Stage 1: partials
    # =========================================================================

    async def _process_partials(
        self,
        template: str,
        context: Context,
        depth: int,
        slots: RenderedSlots,
    ) -> str:
        """Expand {{> name }} tags one at a time, in document order."""
        pieces: list[str] = []
        last = 0
        for match in iter_tags(template, PARTIAL_RE):
            pieces.append(template[last:match.start()])
            rendered = await self._render_partial(match.group(1), context, depth + 1)
            pieces.append(slots.hold(rendered))
            last = match.end()
        pieces.append(template[last:])
        return "".join(pieces)

    async def _render_partial(self, name: str, context: Context, depth: int) -> str:
        if depth > self._max_partial_depth:
            logger.warning(
                "[PARTIAL] '%s' exceeds max depth %d, rendering empty",
                name,
                self._max_partial_depth,
            )
            return ""

        path = partial_path(self._views_directory, name)
        try:
            content = await self._loader(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("[PARTIAL] Could not load '%s' from %s: %s", name, path, e)
            return ""

        return await self._render(content, context, depth)

    # =========================================================================
    # Stage 2: iteration
    # =========================================================================

    def _process_each(self, template: str, context: Context, slots: RenderedSlots) -> str:
        blocks = iter_blocks(template, EACH_OPEN_RE, EACH_CLOSE)
        return substitute(
            template, blocks, lambda block: slots.hold(self._render_each(block, context, slots))
        )

    def _render_each(self, block: Block, context: Context, slots: RenderedSlots) -> str:
        items = resolve_path(block.path, context)
        if not is_sequence(items):
            return ""

        total = len(items)
        rendered: list[str] = []
        for index, item in enumerate(items):
            local = item_context(context, item, index, total)
            body = self._process_if(block.body, local, LOOP_IF_OPEN_RE)
            body = self._process_helpers(body, local, slots)
            body = self._process_interpolation(body, local, LOOP_RAW_VAR_RE, LOOP_ESCAPED_VAR_RE)
            rendered.append(body)
        return "".join(rendered)

    # =========================================================================
    # Stage 3: conditionals
    # =========================================================================

    def _process_if(self, template: str, context: Context, opening: re.Pattern) -> str:
        blocks = iter_blocks(template, opening, IF_CLOSE, ELSE)
        return substitute(template, blocks, lambda block: self._render_if(block, context))

    def _render_if(self, block: Block, context: Context) -> str:
        if is_truthy(resolve_path(block.path, context)):
            return block.body
        return block.alternate or ""

    # =========================================================================
    # Stage 4: helpers
    # =========================================================================

    def _process_helpers(self, template: str, context: Context, slots: RenderedSlots) -> str:
        def replace(match: re.Match) -> str:
            name, raw_args = match.group(1), match.group(2).strip()
            # Not a helper call (unknown name or no arguments): leave it for interpolation
            if not raw_args or not self._helpers.has(name):
                return match.group(0)
            return slots.hold(self._helpers.execute(name, raw_args, context, resolve_path))

        return substitute(template, iter_tags(template, HELPER_RE), replace)

    # =========================================================================
    # Stage 5: interpolation
    # =========================================================================

    def _process_interpolation(
        self,
        template: str,
        context: Context,
        raw_pattern: re.Pattern,
        escaped_pattern: re.Pattern,
    ) -> str:
        def replace(match: re.Match) -> str:
            value: Any = resolve_path(match.group(1), context)
            text = to_display(value)
            if match.re is raw_pattern:
                return text
            return escape_html(text)

        return substitute(template, iter_tags(template, raw_pattern, escaped_pattern), replace)
