"""
Event endpoints for API v1.

Events are listed in insertion order; there are no filters beyond
lookup by id.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.event import Event, EventCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[Event])
async def list_events(storage: MemStorage = Depends(get_storage)) -> List[Event]:
    return storage.events.list_events()


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: int, storage: MemStorage = Depends(get_storage)) -> Event:
    """Retrieve a single event by its ID.  Raises 404 if it does not exist."""
    event = storage.events.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return event


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, storage: MemStorage = Depends(get_storage)) -> Event:
    return storage.events.create_event(event)
