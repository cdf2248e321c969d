"""View composer: views rendered inside layouts.

Directory layout:

    views/
      layouts/
        main.html      <html><body>@content</body></html>
      partials/
        header.html
      home.html
      profile.html

render("home", params) renders layouts/main.html and home.html with the
same params, then puts the rendered view where the layout's content
annotation (default "@content") appears. Template syntax is handled by
TemplateRenderer; this module only composes.

Raw file text is cached per absolute path for the life of the composer.
"""

import logging
import os
from pathlib import Path

from raptor.config import DEFAULT_CONTENT_ANNOTATION, DEFAULT_LAYOUT, ViewSettings
from raptor.core.exceptions import FileNotExistsException
from raptor.core.types import Context, HelperFunction, TemplateReader
from raptor.templates.loader import layout_path, read_template, view_path
from raptor.templates.renderer import TemplateRenderer

logger = logging.getLogger(__name__)


class ViewComposer:
    """Renders named views inside named layouts.

    Usage:
        views = ViewComposer("./views")
        html = await views.render("home", {"user": {"name": "Felipe"}})
        html = await views.render("plain", layout="alt")
    """

    def __init__(
        self,
        views_directory: str | Path,
        renderer: TemplateRenderer | None = None,
        default_layout: str = DEFAULT_LAYOUT,
        content_annotation: str = DEFAULT_CONTENT_ANNOTATION,
        reader: TemplateReader | None = None,
    ):
        self._views_directory = Path(views_directory).absolute()
        self._renderer = renderer or TemplateRenderer(self._views_directory)
        self.set_default_layout(default_layout)
        self.set_content_annotation(content_annotation)
        self._reader = reader or read_template
        self._cache: dict[str, str] = {}

    @classmethod
    def from_settings(cls, settings: ViewSettings) -> "ViewComposer":
        """Create a composer (and its renderer) from ViewSettings."""
        renderer = TemplateRenderer(
            settings.views_directory,
            max_partial_depth=settings.max_partial_depth,
        )
        return cls(
            settings.views_directory,
            renderer=renderer,
            default_layout=settings.default_layout,
            content_annotation=settings.content_annotation,
        )

    @property
    def renderer(self) -> TemplateRenderer:
        return self._renderer

    @property
    def default_layout(self) -> str:
        return self._default_layout

    @property
    def content_annotation(self) -> str:
        return self._content_annotation

    def set_default_layout(self, layout: str) -> None:
        """Set the layout used when render() gets none."""
        if not layout:
            raise ValueError("Default layout name cannot be empty")
        self._default_layout = layout

    def set_content_annotation(self, annotation: str) -> None:
        """Set the layout marker that is replaced by the view."""
        if not annotation:
            raise ValueError("Content annotation cannot be empty")
        self._content_annotation = annotation

    def register_helper(self, name: str, fn: HelperFunction) -> None:
        """Register a helper on the underlying renderer.

        Example:
            views.register_helper("bold", lambda text: f"<strong>{text}</strong>")

        In a template:
            {{{ bold user.name }}}
        """
        self._renderer.register_helper(name, fn)

    async def render(
        self,
        view: str,
        params: Context | None = None,
        layout: str | None = None,
    ) -> str:
        """Render a view inside a layout.

        Args:
            view: View name without extension (views/<view>.html)
            params: Data for both layout and view
            layout: Layout name (views/layouts/<layout>.html), default if None

        Returns:
            Final HTML. If the layout has no content annotation the layout
            is returned without the view.

        Raises:
            FileNotExistsException: The view or layout file cannot be read
        """
        params = params if params is not None else {}

        layout_content = await self._render_file(
            layout_path(self._views_directory, layout or self._default_layout), params
        )
        view_content = await self._render_file(view_path(self._views_directory, view), params)

        if self._content_annotation not in layout_content:
            logger.debug(
                "[VIEWS] Layout for view '%s' has no '%s' annotation",
                view,
                self._content_annotation,
            )
        return layout_content.replace(self._content_annotation, view_content, 1)

    async def _render_file(self, path: Path, params: Context) -> str:
        template = await self._load(path)
        return await self._renderer.render(template, params)

    async def _load(self, path: Path) -> str:
        """Get raw template text, reading the file only on first use."""
        key = os.path.normpath(path)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            content = await self._reader(path)
        except (OSError, UnicodeDecodeError):
            logger.warning("[VIEWS] View file not found: %s", path)
            raise FileNotExistsException(str(path)) from None

        self._cache[key] = content
        logger.debug("[VIEWS] Cached %s (%d chars)", key, len(content))
        return content
