"""
Newsletter endpoints for API v1.

Subscribing an address that is already on the list answers 201 with
the original subscription, so the web form can be submitted twice
without error.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.newsletter import Newsletter, NewsletterCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.post("", response_model=Newsletter, status_code=status.HTTP_201_CREATED)
async def subscribe(data: NewsletterCreate, storage: MemStorage = Depends(get_storage)) -> Newsletter:
    return storage.newsletter.subscribe(data)


@router.get("/{email}", response_model=Newsletter)
async def get_subscriber(email: str, storage: MemStorage = Depends(get_storage)) -> Newsletter:
    subscriber = storage.newsletter.get_subscriber_by_email(email)
    if subscriber is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscriber not found")
    return subscriber
