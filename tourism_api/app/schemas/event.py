"""
Pydantic models for cultural events and festivals.

``date`` is a display string (e.g. ``"May 20, 2024"``); ``month`` and
``day`` are the short forms the web client renders on its calendar
badges (``"MAY"``, ``"20"``).
"""

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Homowo Festival"])
    description: str
    location: str
    date: str = Field(..., examples=["May 20, 2024"])
    month: str = Field(..., min_length=1, max_length=3, examples=["MAY"])
    day: str = Field(..., min_length=1, max_length=2, examples=["20"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class Event(EventBase):
    """Schema for reading an event from the API."""

    id: int
