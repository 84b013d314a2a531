"""User account lifecycle service."""

import logging
from datetime import timedelta

import bcrypt
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.database import utcnow
from app.models.user import User
from app.repositories.user import UserStore
from app.services.random_keys import generate_activation_key, generate_reset_key

logger = logging.getLogger(__name__)

ANONYMOUS_USER = "anonymoususer"


class AccountError(ValueError):
    """Base class for rejected account operations."""


class LoginAlreadyUsedError(AccountError):
    def __init__(self) -> None:
        super().__init__("Login name already used!")


class EmailAlreadyUsedError(AccountError):
    def __init__(self) -> None:
        super().__init__("Email is already in use!")


class InvalidPasswordError(AccountError):
    def __init__(self) -> None:
        super().__init__("Incorrect password")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def validate_password(password: str | None) -> None:
    """Raise InvalidPasswordError if the password length is outside the configured bounds."""
    settings = get_settings()
    if not password or not settings.PASSWORD_MIN_LENGTH <= len(password) <= settings.PASSWORD_MAX_LENGTH:
        raise InvalidPasswordError()


class UserService:
    """Handles registration, activation, password reset and stale account cleanup."""

    def __init__(self, users: UserStore) -> None:
        settings = get_settings()
        self.users = users
        self.reset_key_validity = timedelta(hours=settings.RESET_KEY_VALIDITY_HOURS)
        self.not_activated_retention = timedelta(days=settings.NOT_ACTIVATED_RETENTION_DAYS)

    async def register_user(
        self,
        login: str,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
        image_url: str | None = None,
        lang_key: str | None = None,
    ) -> User:
        """Create a new, not yet activated account with a fresh activation key.

        An existing account that never got activated does not block the
        login or email; it is removed first.
        """
        validate_password(password)
        login = login.strip().lower()
        email = email.strip().lower()

        existing = await self.users.find_one_by_login(login)
        if existing:
            if existing.activated:
                raise LoginAlreadyUsedError()
            await self._remove_non_activated_user(existing)

        existing = await self.users.find_one_by_email(email)
        if existing:
            if existing.activated:
                raise EmailAlreadyUsedError()
            await self._remove_non_activated_user(existing)

        user = User(
            login=login,
            email=email,
            password_hash=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            image_url=image_url,
            lang_key=lang_key or "en",
            activated=False,
            activation_key=generate_activation_key(),
        )
        user = await self.users.save(user)
        logger.debug("Created information for user: %s", user.login)
        return user

    async def _remove_non_activated_user(self, existing: User) -> None:
        await self.users.delete(existing)
        logger.debug("Removed non activated user %s to free its login and email", existing.login)

    async def activate_registration(self, key: str) -> User | None:
        """Activate the account holding the given activation key."""
        logger.debug("Activating user for activation key %s", key)
        user = await self.users.find_one_by_activation_key(key)
        if not user:
            return None

        user.activated = True
        user.activation_key = None
        user = await self.users.save(user)
        logger.debug("Activated user: %s", user.login)
        return user

    async def request_password_reset(self, mail: str) -> User | None:
        """Issue a reset key for the activated account registered under ``mail``.

        Returns None when no account matches or the account is not activated.
        Caller should not reveal which of the two happened.
        """
        user = await self.users.find_one_by_email(mail)
        if not user or not user.activated:
            return None

        user.reset_key = generate_reset_key()
        user.reset_date = utcnow()
        return await self.users.save(user)

    async def complete_password_reset(self, new_password: str, key: str) -> User | None:
        """Set a new password using a reset key issued within the validity window.

        An unknown key and an expired key both return None.
        """
        logger.debug("Reset user password for reset key %s", key)
        user = await self.users.find_one_by_reset_key(key)
        if not user:
            return None

        if user.reset_date is None or user.reset_date <= utcnow() - self.reset_key_validity:
            return None

        user.password_hash = hash_password(new_password)
        user.reset_key = None
        user.reset_date = None
        return await self.users.save(user)

    async def remove_not_activated_users(self) -> None:
        """Delete accounts never activated within the retention window.

        Each account is deleted on its own; a failed delete is logged and the
        remaining accounts are still processed.
        """
        cutoff = utcnow() - self.not_activated_retention
        users = await self.users.find_all_by_activated_is_false_and_created_date_before(cutoff)
        for user in users:
            try:
                await self.users.delete(user)
            except SQLAlchemyError:
                logger.exception("Failed to delete not activated user %s", user.login)
                continue
            logger.debug("Deleting not activated user %s", user.login)

    async def get_all_managed_users(self, offset: int = 0, limit: int = 20) -> tuple[list[User], int]:
        """Page through every user except the anonymous system account.

        Returns the page and the total number of managed users.
        """
        users = await self.users.find_all_by_login_not(ANONYMOUS_USER, offset=offset, limit=limit)
        total = await self.users.count_by_login_not(ANONYMOUS_USER)
        return users, total

    async def get_user_by_login(self, login: str) -> User | None:
        return await self.users.find_one_by_login(login)

    async def delete_user(self, login: str) -> bool:
        user = await self.users.find_one_by_login(login)
        if not user:
            return False
        await self.users.delete(user)
        logger.debug("Deleted user: %s", login)
        return True
