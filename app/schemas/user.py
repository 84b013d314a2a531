"""Pydantic schemas for account and user endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserView(BaseModel):
    id: str
    login: str
    first_name: str | None = None
    last_name: str | None = None
    email: str
    image_url: str | None = None
    activated: bool
    lang_key: str
    created_by: str | None = None
    created_date: datetime | None = None
    last_modified_by: str | None = None
    last_modified_date: datetime | None = None

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    items: list[UserView]
    total: int


class RegisterRequest(BaseModel):
    login: str = Field(min_length=1, max_length=50, pattern=r"^[_.@A-Za-z0-9-]*$")
    email: str = Field(min_length=5, max_length=254)
    password: str
    first_name: str | None = Field(default=None, max_length=50)
    last_name: str | None = Field(default=None, max_length=50)
    image_url: str | None = Field(default=None, max_length=256)
    lang_key: str | None = Field(default=None, min_length=2, max_length=10)


class ResetPasswordInitRequest(BaseModel):
    mail: str


class KeyAndPasswordRequest(BaseModel):
    key: str
    new_password: str
