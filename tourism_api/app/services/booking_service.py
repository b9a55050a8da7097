"""
Business logic for bookings.

Bookings are created with a timestamp and can afterwards only change
their ``status``.  Any non‑empty status string is accepted; there is
no state machine between ``pending``, ``confirmed``, ``cancelled`` or
anything else a client sends.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.collection import Collection
from ..schemas.booking import Booking, BookingCreate

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self) -> None:
        self.bookings: Collection[Booking] = Collection("booking")

    def list_bookings(self) -> List[Booking]:
        return self.bookings.all()

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self.bookings.get(booking_id)

    def list_bookings_by_user(self, user_id: int) -> List[Booking]:
        return self.bookings.filter(lambda b: b.user_id == user_id)

    def create_booking(self, data: BookingCreate) -> Booking:
        now = datetime.now(timezone.utc)
        booking = self.bookings.insert(
            lambda booking_id: Booking(id=booking_id, created_at=now, **data.model_dump())
        )
        logger.info("User %s created booking %s", booking.user_id, booking.id)
        return booking

    def update_booking_status(self, booking_id: int, status: str) -> Optional[Booking]:
        """Replace the status of a booking and leave every other field as is.

        Returns ``None`` if the booking does not exist.
        """
        booking = self.bookings.merge(booking_id, {"status": status})
        if booking is None:
            logger.debug("Status update for missing booking %s ignored", booking_id)
            return None
        logger.info("Booking %s status set to '%s'", booking_id, status)
        return booking
