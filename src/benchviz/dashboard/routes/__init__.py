"""
benchviz dashboard routes.

- api_routes: REST API endpoints
"""

from .api_routes import router as api_router

__all__ = ["api_router"]
