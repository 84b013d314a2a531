"""Repository for LineVersionRating persistence."""

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.line_version_rating import LineVersionRating


class LineVersionRatingRepository:
    """Repository for managing ratings through an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one_by_id(self, rating_id: str) -> LineVersionRating | None:
        return await self.db.get(LineVersionRating, rating_id)

    async def find_all(self, offset: int = 0, limit: int = 20) -> list[LineVersionRating]:
        result = await self.db.execute(
            select(LineVersionRating).order_by(LineVersionRating.id).offset(offset).limit(limit)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(LineVersionRating.id)))
        return result.scalar_one()

    async def find_all_by_owner_id(self, owner_id: str) -> list[LineVersionRating]:
        result = await self.db.execute(select(LineVersionRating).where(LineVersionRating.owner_id == owner_id))
        return list(result.scalars().all())

    async def save(self, rating: LineVersionRating) -> LineVersionRating:
        try:
            if rating.id is None or rating in self.db:
                self.db.add(rating)
            else:
                rating = await self.db.merge(rating)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self.db.refresh(rating)
        return rating

    async def delete(self, rating: LineVersionRating) -> None:
        if rating.id is None:
            return
        try:
            await self.db.execute(delete(LineVersionRating).where(LineVersionRating.id == rating.id))
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        if rating in self.db:
            self.db.expunge(rating)
