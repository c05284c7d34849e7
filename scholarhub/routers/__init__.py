"""
Routers package initialization.
"""
from .health import router as health_router
from .auth import router as auth_router
from .search import router as search_router
from .bookmarks import router as bookmarks_router
from .admin import router as admin_router
from .summary import router as summary_router

__all__ = [
    "health_router",
    "auth_router",
    "search_router",
    "bookmarks_router",
    "admin_router",
    "summary_router",
]
