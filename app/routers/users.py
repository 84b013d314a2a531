"""User management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.dependencies import get_user_service
from app.rate_limit import limiter
from app.schemas.user import UserListResponse, UserView
from app.services.user import UserService

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.get("/", response_model=UserListResponse)
async def list_users(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """List managed users (all except the anonymous account)."""
    users, total = await service.get_all_managed_users(offset=offset, limit=limit)
    return UserListResponse(items=[UserView.model_validate(u) for u in users], total=total)


@router.get("/{login}", response_model=UserView)
async def get_user(login: str, service: UserService = Depends(get_user_service)) -> UserView:
    """Get a single user by login."""
    user = await service.get_user_by_login(login)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserView.model_validate(user)


@router.delete("/{login}")
@limiter.limit("20/minute")
async def delete_user(request: Request, login: str, service: UserService = Depends(get_user_service)) -> dict:
    """Delete a user by login."""
    if not await service.delete_user(login):
        raise HTTPException(status_code=404, detail="User not found")
    return {"detail": "User deleted"}
