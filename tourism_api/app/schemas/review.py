"""
Pydantic schemas for reviews.

A review may point at a destination, an experience, both or neither.
The references are not checked against existing records.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    destination_id: Optional[int] = Field(None, description="Reviewed destination, if any")
    experience_id: Optional[int] = Field(None, description="Reviewed experience, if any")
    user_id: int = Field(..., description="Author of the review")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    text: Optional[str] = Field(None, description="Optional review text")

    @field_validator("text")
    @classmethod
    def sanitize_text(cls, v: Optional[str]) -> Optional[str]:
        """Trim whitespace from the text and enforce a maximum length."""
        if v is None:
            return None
        v = v.strip()
        if len(v) > 1000:
            raise ValueError("Review text must be 1000 characters or fewer")
        return v


class Review(ReviewCreate):
    """Stored review record."""

    id: int
    created_at: datetime
