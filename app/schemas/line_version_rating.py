"""Pydantic schemas for line version rating endpoints."""

from pydantic import BaseModel


class RatingView(BaseModel):
    id: str
    rating: int | None
    comment: str | None
    owner_id: str | None

    model_config = {"from_attributes": True}


class RatingRequest(BaseModel):
    rating: int | None = None
    comment: str | None = None
    owner_id: str | None = None


class RatingListResponse(BaseModel):
    items: list[RatingView]
    total: int
