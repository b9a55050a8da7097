"""
Pydantic models for bookings.

A booking reserves a destination visit or an experience for a user.
``status`` starts as ``pending`` and can later be replaced with any
string through the status endpoint.  Surrounding whitespace is
stripped and a blank status is rejected; no transition rules are
enforced.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

BookingStatus = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class BookingBase(BaseModel):
    user_id: int
    destination_id: Optional[int] = None
    experience_id: Optional[int] = None
    booking_date: str = Field(..., examples=["2024-07-12"])
    guests: int = Field(1, ge=1)
    total_price: Optional[int] = Field(None, ge=0)
    special_requests: Optional[str] = None
    status: BookingStatus = "pending"


class BookingCreate(BookingBase):
    """Schema for creating a booking."""
    pass


class BookingStatusUpdate(BaseModel):
    """Body of the status update endpoint."""

    status: BookingStatus = Field(..., examples=["confirmed"])


class Booking(BookingBase):
    id: int
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }
