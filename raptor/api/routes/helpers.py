"""Helpers API endpoints.

- GET /helpers - List helpers available to templates
"""

from fastapi import APIRouter, Depends

from raptor.api.responses import get_views
from raptor.views import ViewComposer

router = APIRouter()


@router.get("/helpers")
def list_helpers(views: ViewComposer = Depends(get_views)) -> dict:
    """List registered template helpers.

    Returns:
        Helper names with descriptions and usage examples for built-ins
    """
    return views.renderer.helpers.to_api_format()
