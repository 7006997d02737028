"""HTTP layer: routers, endpoints, and dependency wiring."""

from user_service.api.router import api_router

__all__ = ["api_router"]
