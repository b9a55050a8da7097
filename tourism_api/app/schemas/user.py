"""
Pydantic models for user data.

``UserCreate`` is the registration payload, ``User`` the stored record
(including the password hash) and ``UserRead`` the public view, which
never carries the password.  ``UserUpdate`` is the patch model used
for partial profile changes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=32, examples=["kwame"])
    email: EmailStr = Field(..., examples=["kwame@example.com"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=6, examples=["strongpassword"])


class User(UserBase):
    """Stored user record.  ``password`` holds the salted hash."""

    id: int
    password: str
    created_at: datetime

    def to_read(self) -> "UserRead":
        return UserRead(**self.model_dump(exclude={"password"}))


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    """

    username: Optional[str] = Field(None, min_length=3, max_length=32)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
