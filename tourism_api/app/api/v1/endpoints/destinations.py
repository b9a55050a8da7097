"""
Destination endpoints for API v1.

Listing supports an optional ``tags`` query parameter (repeatable,
any‑match); regions have their own path so the web client can link to
them directly.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.destination import Destination, DestinationCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[Destination])
async def list_destinations(
    tags: Optional[List[str]] = Query(None, description="Filter by tags (any match)"),
    storage: MemStorage = Depends(get_storage),
) -> List[Destination]:
    if tags:
        return storage.destinations.list_destinations_by_tags(tags)
    return storage.destinations.list_destinations()


@router.get("/region/{region}", response_model=List[Destination])
async def list_destinations_by_region(
    region: str,
    storage: MemStorage = Depends(get_storage),
) -> List[Destination]:
    return storage.destinations.list_destinations_by_region(region)


@router.get("/{destination_id}", response_model=Destination)
async def get_destination(destination_id: int, storage: MemStorage = Depends(get_storage)) -> Destination:
    destination = storage.destinations.get_destination(destination_id)
    if destination is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Destination not found")
    return destination


@router.post("", response_model=Destination, status_code=status.HTTP_201_CREATED)
async def create_destination(
    destination: DestinationCreate,
    storage: MemStorage = Depends(get_storage),
) -> Destination:
    return storage.destinations.create_destination(destination)
