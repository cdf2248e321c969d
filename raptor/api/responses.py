"""HTML responses for rendered views."""

from fastapi import Request, status
from fastapi.responses import HTMLResponse

from raptor.core.types import Context
from raptor.views import ViewComposer


def get_views(request: Request) -> ViewComposer:
    """FastAPI dependency returning the application's ViewComposer."""
    return request.app.state.views


async def render_view(
    views: ViewComposer,
    view: str,
    params: Context | None = None,
    layout: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    """Render a view inside a layout and wrap it in a text/html response.

    Usage:
        @router.get("/")
        async def home(views: ViewComposer = Depends(get_views)):
            return await render_view(views, "home", {"user": {"name": "Ana"}})
    """
    html = await views.render(view, params, layout)
    return HTMLResponse(content=html, status_code=status_code)
