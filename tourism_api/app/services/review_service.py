"""
Business logic for reviews.

Reviews reference destinations, experiences and users by id only.
Nothing checks that the referenced records exist, and a review may
name a destination, an experience, both or neither.  The three
filtered listings are independent of each other.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.collection import Collection
from ..schemas.review import Review, ReviewCreate

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for handling reviews."""

    def __init__(self) -> None:
        self.reviews: Collection[Review] = Collection("review")

    def list_reviews(self) -> List[Review]:
        return self.reviews.all()

    def get_review(self, review_id: int) -> Optional[Review]:
        return self.reviews.get(review_id)

    def list_reviews_by_destination(self, destination_id: int) -> List[Review]:
        return self.reviews.filter(lambda r: r.destination_id == destination_id)

    def list_reviews_by_experience(self, experience_id: int) -> List[Review]:
        return self.reviews.filter(lambda r: r.experience_id == experience_id)

    def list_reviews_by_user(self, user_id: int) -> List[Review]:
        return self.reviews.filter(lambda r: r.user_id == user_id)

    def create_review(self, data: ReviewCreate) -> Review:
        now = datetime.now(timezone.utc)
        review = self.reviews.insert(
            lambda review_id: Review(id=review_id, created_at=now, **data.model_dump())
        )
        logger.info(
            "User %s submitted review %s (destination=%s, experience=%s)",
            review.user_id,
            review.id,
            review.destination_id,
            review.experience_id,
        )
        return review
