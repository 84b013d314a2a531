"""Repository for User persistence."""

from datetime import datetime
from typing import Protocol

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User


class UserStore(Protocol):
    """Abstract storage for user records used by the account lifecycle."""

    async def find_one_by_login(self, login: str) -> User | None:
        ...

    async def find_one_by_email(self, email: str) -> User | None:
        ...

    async def find_one_by_reset_key(self, reset_key: str) -> User | None:
        ...

    async def find_one_by_activation_key(self, activation_key: str) -> User | None:
        ...

    async def find_all_by_activated_is_false_and_created_date_before(self, cutoff: datetime) -> list[User]:
        ...

    async def find_all_by_login_not(self, login: str, offset: int = 0, limit: int = 20) -> list[User]:
        ...

    async def count_by_login_not(self, login: str) -> int:
        ...

    async def save(self, user: User) -> User:
        ...

    async def delete(self, user: User) -> None:
        ...


class UserRepository:
    """Repository for managing User records through an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one_by_id(self, user_id: str) -> User | None:
        return await self.db.get(User, user_id)

    async def find_one_by_login(self, login: str) -> User | None:
        result = await self.db.execute(select(User).where(User.login == login.lower()))
        return result.scalars().first()

    async def find_one_by_email(self, email: str) -> User | None:
        """Find a user by email, ignoring case. Emails are stored lower-cased."""
        result = await self.db.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalars().first()

    async def find_one_by_reset_key(self, reset_key: str) -> User | None:
        result = await self.db.execute(select(User).where(User.reset_key == reset_key))
        return result.scalars().first()

    async def find_one_by_activation_key(self, activation_key: str) -> User | None:
        result = await self.db.execute(select(User).where(User.activation_key == activation_key))
        return result.scalars().first()

    async def find_all_by_activated_is_false_and_created_date_before(self, cutoff: datetime) -> list[User]:
        """All never-activated users created strictly before ``cutoff``."""
        result = await self.db.execute(
            select(User).where(User.activated.is_(False), User.created_date < cutoff)
        )
        return list(result.scalars().all())

    async def find_all_by_login_not(self, login: str, offset: int = 0, limit: int = 20) -> list[User]:
        result = await self.db.execute(
            select(User).where(User.login != login).order_by(User.login).offset(offset).limit(limit)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(User.id)))
        return result.scalar_one()

    async def count_by_login_not(self, login: str) -> int:
        result = await self.db.execute(select(func.count(User.id)).where(User.login != login))
        return result.scalar_one()

    async def save(self, user: User) -> User:
        """Insert or update a user. The identifier is assigned on first save."""
        try:
            if user.id is None or user in self.db:
                self.db.add(user)
            else:
                user = await self.db.merge(user)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self.db.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete a user by identifier. Deleting a missing record is a no-op."""
        if user.id is None:
            return
        try:
            await self.db.execute(delete(User).where(User.id == user.id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        if user in self.db:
            self.db.expunge(user)

    async def delete_all(self) -> None:
        try:
            await self.db.execute(delete(User))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        self.db.expunge_all()
