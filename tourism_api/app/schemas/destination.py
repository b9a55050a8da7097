"""
Pydantic models for destinations.

Ratings are stored in tenths of a star (``47`` means 4.7) so that the
seeded data and the web client agree on an integer representation.
"""

from typing import List

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class DestinationBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Cape Coast"])
    region: str = Field(..., min_length=1, examples=["Central Region"])
    description: str
    short_description: str
    image_url: str
    rating: int = Field(..., ge=0, le=50, description="Rating in tenths of a star")
    coordinates: Coordinates
    top_attractions: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class DestinationCreate(DestinationBase):
    """Schema for creating a destination."""
    pass


class Destination(DestinationBase):
    """Stored destination record."""

    id: int

    model_config = {
        "from_attributes": True,
    }
