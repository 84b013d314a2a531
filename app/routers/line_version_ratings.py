"""Line version rating endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_rating_repository, get_user_repository
from app.models.line_version_rating import LineVersionRating
from app.repositories.line_version_rating import LineVersionRatingRepository
from app.repositories.user import UserRepository
from app.schemas.line_version_rating import RatingListResponse, RatingRequest, RatingView

router = APIRouter(prefix="/api/v1/line-version-ratings", tags=["Line Version Ratings"])


async def _check_owner(owner_id: str | None, users: UserRepository) -> None:
    if owner_id is not None and not await users.find_one_by_id(owner_id):
        raise HTTPException(status_code=400, detail="Owner not found")


@router.get("/", response_model=RatingListResponse)
async def list_ratings(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    ratings: LineVersionRatingRepository = Depends(get_rating_repository),
) -> RatingListResponse:
    """List ratings."""
    items = await ratings.find_all(offset=offset, limit=limit)
    total = await ratings.count()
    return RatingListResponse(items=[RatingView.model_validate(r) for r in items], total=total)


@router.post("/", response_model=RatingView, status_code=201)
async def create_rating(
    body: RatingRequest,
    ratings: LineVersionRatingRepository = Depends(get_rating_repository),
    users: UserRepository = Depends(get_user_repository),
) -> RatingView:
    """Create a rating."""
    await _check_owner(body.owner_id, users)
    rating = await ratings.save(LineVersionRating(rating=body.rating, comment=body.comment, owner_id=body.owner_id))
    return RatingView.model_validate(rating)


@router.get("/{rating_id}", response_model=RatingView)
async def get_rating(
    rating_id: str,
    ratings: LineVersionRatingRepository = Depends(get_rating_repository),
) -> RatingView:
    """Get a single rating by ID."""
    rating = await ratings.find_one_by_id(rating_id)
    if not rating:
        raise HTTPException(status_code=404, detail="Rating not found")
    return RatingView.model_validate(rating)


@router.put("/{rating_id}", response_model=RatingView)
async def update_rating(
    rating_id: str,
    body: RatingRequest,
    ratings: LineVersionRatingRepository = Depends(get_rating_repository),
    users: UserRepository = Depends(get_user_repository),
) -> RatingView:
    """Replace a rating's score, comment and owner."""
    rating = await ratings.find_one_by_id(rating_id)
    if not rating:
        raise HTTPException(status_code=404, detail="Rating not found")
    await _check_owner(body.owner_id, users)

    rating.rating = body.rating
    rating.comment = body.comment
    rating.owner_id = body.owner_id
    rating = await ratings.save(rating)
    return RatingView.model_validate(rating)


@router.delete("/{rating_id}")
async def delete_rating(
    rating_id: str,
    ratings: LineVersionRatingRepository = Depends(get_rating_repository),
) -> dict:
    """Delete a rating."""
    rating = await ratings.find_one_by_id(rating_id)
    if not rating:
        raise HTTPException(status_code=404, detail="Rating not found")
    await ratings.delete(rating)
    return {"detail": "Rating deleted"}
