"""Pytest configuration and fixtures."""

import secrets

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_db
from app.models.line_version_rating import LineVersionRating  # noqa: F401
from app.models.user import User
from app.repositories.user import UserRepository
from app.services.user import UserService


@pytest.fixture(name="engine")
async def engine_fixture():
    """Create an in-memory SQLite database for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture(name="db_session")
async def db_session_fixture(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture(name="user_repository")
def user_repository_fixture(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture(name="user_service")
def user_service_fixture(user_repository: UserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture(name="client")
async def client_fixture(db_session: AsyncSession):
    """Create an async test client with overridden DB dependency and disabled rate limiting."""
    from app.rate_limit import limiter
    from main import app

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture(name="user")
def user_fixture() -> User:
    """An unsaved, activated user."""
    return User(
        login="johndoe",
        password_hash=secrets.token_hex(30),
        activated=True,
        email="johndoe@localhost",
        first_name="john",
        last_name="doe",
        image_url="http://placehold.it/50x50",
        lang_key="en",
    )
