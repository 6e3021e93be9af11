"""
Pydantic models for user data.

``UserCreate`` is the registration payload, ``UserUpdate`` carries the
fields to change (omitted fields keep their stored value) and
``UserRead`` is what the API returns.  The password is accepted on
write but never returned.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import UserRole


class UserBase(BaseModel):
    first_name: str = Field(..., description="Nome")
    last_name: str = Field(..., description="Cognome")
    email: str = Field(..., description="Unique e-mail address")
    address: Optional[str] = Field(None, description="Postal address")
    registration_date: date = Field(..., description="Registration date, not in the future")
    subscription_start: Optional[date] = None
    subscription_end: Optional[date] = None
    role: UserRole = Field(UserRole.CLIENTE, description="ADMIN or CLIENTE")
    subscription_id: Optional[int] = Field(None, description="Subscription the user is enrolled in")


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., description="Account password")


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided values are updated.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    address: Optional[str] = None
    registration_date: Optional[date] = None
    subscription_start: Optional[date] = None
    subscription_end: Optional[date] = None
    role: Optional[UserRole] = None
    subscription_id: Optional[int] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
