"""Pydantic models for newsletter subscriptions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class NewsletterCreate(BaseModel):
    email: EmailStr = Field(..., examples=["traveller@example.com"])
    name: Optional[str] = None


class Newsletter(NewsletterCreate):
    """Stored subscription record."""

    id: int
    created_at: datetime
