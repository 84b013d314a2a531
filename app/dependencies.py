"""Service dependencies for FastAPI routes."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.line_version_rating import LineVersionRatingRepository
from app.repositories.user import UserRepository
from app.services.user import UserService


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Build a user repository bound to the request's session."""
    return UserRepository(db)


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    """Build the account lifecycle service for the request."""
    return UserService(users)


def get_rating_repository(db: AsyncSession = Depends(get_db)) -> LineVersionRatingRepository:
    return LineVersionRatingRepository(db)
