"""
Pydantic models for user travel preferences.

There is at most one preference record per user.  ``PreferenceCreate``
is used by the upsert endpoint, ``PreferenceUpdate`` is the patch
model for partial updates of an existing record.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class PreferenceCreate(BaseModel):
    user_id: int
    interests: List[str] = Field(default_factory=list, examples=[["Cultural Heritage", "Beaches"]])
    preferred_regions: List[str] = Field(default_factory=list)
    travel_style: Optional[str] = Field(None, examples=["adventure"])
    budget: Optional[str] = Field(None, examples=["mid-range"])
    accommodation_type: Optional[str] = Field(None, examples=["guesthouse"])


class PreferenceUpdate(BaseModel):
    """Schema for updating preferences.

    All fields are optional; only provided fields will be updated.
    ``user_id`` is taken from the path and cannot be changed.
    """

    interests: Optional[List[str]] = None
    preferred_regions: Optional[List[str]] = None
    travel_style: Optional[str] = None
    budget: Optional[str] = None
    accommodation_type: Optional[str] = None


class Preference(PreferenceCreate):
    id: int
