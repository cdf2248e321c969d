"""FastAPI integration for Raptor views.

Usage:
    from fastapi import Depends
    from raptor.api import create_app, get_views, render_view

    app = create_app()

    @app.get("/")
    async def home(views=Depends(get_views)):
        return await render_view(views, "home", {"user": {"name": "Ana"}})
"""

import logging

from fastapi import FastAPI

from raptor.api.errors import install_exception_handlers
from raptor.api.responses import get_views, render_view
from raptor.api.routes import helpers_router
from raptor.config import ViewSettings, load_settings
from raptor.utilities.logging import setup_logging
from raptor.views import ViewComposer

logger = logging.getLogger(__name__)


def create_app(settings: ViewSettings | None = None) -> FastAPI:
    """Create a FastAPI app with a ViewComposer on app.state.views.

    Args:
        settings: View settings (default: read from the environment)

    Returns:
        App with view exception handlers and the /api/helpers route
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Raptor")
    app.state.views = ViewComposer.from_settings(settings)
    install_exception_handlers(app)
    app.include_router(helpers_router, prefix="/api")

    logger.info(
        "[API] Views from %s (layout=%s)",
        settings.views_directory,
        settings.default_layout,
    )
    return app


__all__ = [
    "create_app",
    "get_views",
    "install_exception_handlers",
    "render_view",
]
