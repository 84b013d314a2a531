"""Persistence repositories."""

from app.repositories.line_version_rating import LineVersionRatingRepository
from app.repositories.user import UserRepository, UserStore

__all__ = ["LineVersionRatingRepository", "UserRepository", "UserStore"]
