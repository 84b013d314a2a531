"""Account registration, activation and password reset endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.dependencies import get_user_service
from app.rate_limit import limiter
from app.schemas.user import KeyAndPasswordRequest, RegisterRequest, ResetPasswordInitRequest, UserView
from app.services.user import AccountError, UserService, validate_password

logger = logging.getLogger("msst_platform")

router = APIRouter(prefix="/api/v1/account", tags=["Account"])

RESET_INIT_MESSAGE = "If an activated account exists with that email, a reset key has been issued."


@router.post("/register", response_model=UserView, status_code=201)
@limiter.limit("5/minute")
async def register(
    request: Request,
    body: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> UserView:
    """Register a new, not yet activated account."""
    try:
        user = await service.register_user(
            login=body.login,
            email=body.email,
            password=body.password,
            first_name=body.first_name,
            last_name=body.last_name,
            image_url=body.image_url,
            lang_key=body.lang_key,
        )
    except AccountError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    logger.info("ACTIVATION: user %s registered with activation key %s", user.login, user.activation_key)
    return UserView.model_validate(user)


@router.get("/activate", response_model=UserView)
async def activate(key: str, service: UserService = Depends(get_user_service)) -> UserView:
    """Activate the account registered with the given activation key."""
    user = await service.activate_registration(key)
    if not user:
        raise HTTPException(status_code=404, detail="No user was found for this activation key")
    return UserView.model_validate(user)


@router.post("/reset-password/init")
@limiter.limit("3/minute")
async def request_password_reset(
    request: Request,
    body: ResetPasswordInitRequest,
    service: UserService = Depends(get_user_service),
) -> dict:
    """Issue a reset key. The response is the same whether or not an account matched."""
    user = await service.request_password_reset(body.mail)
    if user:
        logger.info("PASSWORD RESET: key issued for user %s: %s", user.login, user.reset_key)
    else:
        logger.warning("Password reset requested for non existing or not activated mail")

    return {"message": RESET_INIT_MESSAGE}


@router.post("/reset-password/finish", response_model=UserView)
@limiter.limit("5/minute")
async def finish_password_reset(
    request: Request,
    body: KeyAndPasswordRequest,
    service: UserService = Depends(get_user_service),
) -> UserView:
    """Set a new password using a reset key."""
    try:
        validate_password(body.new_password)
    except AccountError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    user = await service.complete_password_reset(body.new_password, body.key)
    if not user:
        raise HTTPException(status_code=400, detail="No user was found for this reset key")
    return UserView.model_validate(user)
