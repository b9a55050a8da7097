"""
Review endpoints for API v1.

Reviews can be listed in full or narrowed to one destination, one
experience or one author.  Referenced ids are not checked, so a filter
on an unknown id simply returns an empty list.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.review import Review, ReviewCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[Review])
async def list_reviews(storage: MemStorage = Depends(get_storage)) -> List[Review]:
    return storage.reviews.list_reviews()


@router.get("/destination/{destination_id}", response_model=List[Review])
async def list_destination_reviews(
    destination_id: int,
    storage: MemStorage = Depends(get_storage),
) -> List[Review]:
    return storage.reviews.list_reviews_by_destination(destination_id)


@router.get("/experience/{experience_id}", response_model=List[Review])
async def list_experience_reviews(
    experience_id: int,
    storage: MemStorage = Depends(get_storage),
) -> List[Review]:
    return storage.reviews.list_reviews_by_experience(experience_id)


@router.get("/user/{user_id}", response_model=List[Review])
async def list_user_reviews(user_id: int, storage: MemStorage = Depends(get_storage)) -> List[Review]:
    return storage.reviews.list_reviews_by_user(user_id)


@router.get("/{review_id}", response_model=Review)
async def get_review(review_id: int, storage: MemStorage = Depends(get_storage)) -> Review:
    review = storage.reviews.get_review(review_id)
    if review is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return review


@router.post(
    "",
    response_model=Review,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def create_review(data: ReviewCreate, storage: MemStorage = Depends(get_storage)) -> Review:
    """Create a new review.

    The rating must be between 1 and 5; the optional text is trimmed
    and limited to 1000 characters.
    """
    return storage.reviews.create_review(data)
