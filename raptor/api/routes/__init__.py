"""API routers."""

from raptor.api.routes.helpers import router as helpers_router

__all__ = ["helpers_router"]
