"""API routers."""

from app.routers.account import router as account_router
from app.routers.line_version_ratings import router as line_version_ratings_router
from app.routers.users import router as users_router

__all__ = ["account_router", "users_router", "line_version_ratings_router"]
