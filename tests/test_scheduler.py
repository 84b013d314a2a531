"""Tests for the daily cleanup scheduler."""

from datetime import datetime, timedelta

import pytest

from app.database import utcnow
from app.models.user import User
from app.repositories.user import UserRepository
from app.services.scheduler import CleanupScheduler, seconds_until_next_run


class TestSecondsUntilNextRun:
    def test_later_today(self):
        now = datetime(2026, 10, 19, 0, 30)
        assert seconds_until_next_run(now, 1) == 30 * 60

    def test_already_passed_today(self):
        now = datetime(2026, 10, 19, 1, 0)
        assert seconds_until_next_run(now, 1) == 24 * 60 * 60

    def test_wraps_past_midnight(self):
        now = datetime(2026, 10, 19, 23, 0)
        assert seconds_until_next_run(now, 1) == 2 * 60 * 60


class TestCleanupScheduler:
    async def test_run_once_removes_stale_accounts(self, session_factory, user_repository: UserRepository):
        await user_repository.save(
            User(
                login="stale",
                email="stale@localhost",
                password_hash="x",
                activated=False,
                created_date=utcnow() - timedelta(days=4),
            )
        )
        await user_repository.save(User(login="active", email="active@localhost", password_hash="x", activated=True))

        await CleanupScheduler(session_factory, hour=1).run_once()

        async with session_factory() as db:
            repository = UserRepository(db)
            assert await repository.find_one_by_login("stale") is None
            assert await repository.find_one_by_login("active") is not None

    async def test_start_and_stop(self, session_factory):
        scheduler = CleanupScheduler(session_factory, hour=1)
        await scheduler.start()
        assert scheduler.running

        await scheduler.stop()
        assert not scheduler.running

    async def test_stop_without_start_is_noop(self, session_factory):
        scheduler = CleanupScheduler(session_factory, hour=1)
        await scheduler.stop()
        assert not scheduler.running

    def test_rejects_out_of_range_hour(self, session_factory):
        with pytest.raises(ValueError):
            CleanupScheduler(session_factory, hour=25)
