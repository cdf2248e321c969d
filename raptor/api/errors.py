"""Map view rendering exceptions to HTTP responses.

- FileNotExistsException -> 404
- HelperException (not found, bad argument, helper failure) -> 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse

from raptor.core.exceptions import FileNotExistsException, HelperException
from raptor.templates.context import escape_html

logger = logging.getLogger(__name__)


def _error_page(title: str, detail: str) -> str:
    return f"<html><body><h1>{escape_html(title)}</h1><p>{escape_html(detail)}</p></body></html>"


async def handle_file_not_exists(request: Request, exc: FileNotExistsException) -> HTMLResponse:
    logger.warning("[API] %s %s: %s", request.method, request.url.path, exc)
    return HTMLResponse(
        content=_error_page("Not Found", "The requested page does not exist."),
        status_code=status.HTTP_404_NOT_FOUND,
    )


async def handle_helper_error(request: Request, exc: HelperException) -> HTMLResponse:
    logger.error("[API] %s %s: %s", request.method, request.url.path, exc)
    return HTMLResponse(
        content=_error_page("Internal Server Error", "The page could not be rendered."),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the view exception handlers on an app."""
    app.add_exception_handler(FileNotExistsException, handle_file_not_exists)
    app.add_exception_handler(HelperException, handle_helper_error)
