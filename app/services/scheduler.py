"""Background scheduler for the daily stale account cleanup."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import SessionLocal, utcnow
from app.repositories.user import UserRepository
from app.services.user import UserService

logger = logging.getLogger(__name__)


def seconds_until_next_run(now: datetime, hour: int) -> float:
    """Seconds from ``now`` until the next occurrence of ``hour``:00."""
    next_run = now.replace(hour=hour, minute=0, second=0, microsecond=0)
    if next_run <= now:
        next_run += timedelta(days=1)
    return (next_run - now).total_seconds()


class CleanupScheduler:
    """Runs ``remove_not_activated_users`` once a day inside the event loop."""

    def __init__(
        self,
        session_factory: Callable[[], AsyncSession] = SessionLocal,
        *,
        hour: int | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._hour = get_settings().CLEANUP_HOUR if hour is None else hour
        if not 0 <= self._hour <= 23:
            raise ValueError(f"Cleanup hour must be between 0 and 23, got {self._hour}")
        self._task: asyncio.Task[None] | None = None
        self._shutdown = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self._task is not None:
            return
        logger.info("Starting not activated user cleanup, scheduled daily at %02d:00 UTC.", self._hour)
        self._shutdown.clear()
        self._task = asyncio.get_running_loop().create_task(self._run(), name="user-cleanup")

    async def stop(self) -> None:
        if self._task is None:
            return
        logger.info("Stopping not activated user cleanup.")
        self._shutdown.set()
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None

    async def run_once(self) -> None:
        """Run a single cleanup pass with a fresh session."""
        async with self._session_factory() as db:
            service = UserService(UserRepository(db))
            await service.remove_not_activated_users()

    async def _run(self) -> None:
        while not self._shutdown.is_set():
            delay = seconds_until_next_run(utcnow(), self._hour)
            try:
                await asyncio.wait_for(self._shutdown.wait(), timeout=delay)
                break
            except asyncio.TimeoutError:
                pass
            try:
                await self.run_once()
                logger.info("Not activated user cleanup finished.")
            except Exception:
                logger.exception("Not activated user cleanup failed.")
