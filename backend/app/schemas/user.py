# app/schemas/user.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.base import CamelModel

Role = Literal["user", "admin"]
AccessLevel = Literal["free", "login", "premium"]
Language = Literal["pt", "en"]


class SessionRequest(CamelModel):
    id_token: str = Field(..., min_length=1, description="ID token issued by the identity provider")


class UserOut(CamelModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Role
    access_level: AccessLevel
    language: str
    phone: Optional[str] = None
    address: Optional[str] = None
    bio: Optional[str] = None
    profile_picture: Optional[str] = None
    email_notifications: bool
    order_updates: bool
    promotions: bool
    is_first_login: bool
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime


class ProfileUpdate(CamelModel):
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)
    profile_picture: Optional[str] = None
    language: Optional[Language] = None
    email_notifications: Optional[bool] = None
    order_updates: Optional[bool] = None
    promotions: Optional[bool] = None


# ------------------------
# Admin
# ------------------------
class AdminUserCreate(CamelModel):
    open_id: str = Field(..., min_length=1, max_length=64, description="External provider id")
    name: str = Field(..., min_length=1)
    email: EmailStr
    role: Role = "user"
    access_level: AccessLevel = "login"


class AdminUserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[Role] = None
    access_level: Optional[AccessLevel] = None
