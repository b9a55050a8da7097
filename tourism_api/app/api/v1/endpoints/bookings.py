"""
Booking endpoints for API v1.

Bookings are created with status ``pending`` unless the client sends
another one.  The only mutation afterwards is the status update, which
accepts any non‑empty string.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.booking import Booking, BookingCreate, BookingStatusUpdate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[Booking])
async def list_bookings(storage: MemStorage = Depends(get_storage)) -> List[Booking]:
    return storage.bookings.list_bookings()


@router.get("/user/{user_id}", response_model=List[Booking])
async def list_user_bookings(user_id: int, storage: MemStorage = Depends(get_storage)) -> List[Booking]:
    return storage.bookings.list_bookings_by_user(user_id)


@router.get("/{booking_id}", response_model=Booking)
async def get_booking(booking_id: int, storage: MemStorage = Depends(get_storage)) -> Booking:
    booking = storage.bookings.get_booking(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def create_booking(booking: BookingCreate, storage: MemStorage = Depends(get_storage)) -> Booking:
    return storage.bookings.create_booking(booking)


@router.patch("/{booking_id}/status", response_model=Booking)
async def update_booking_status(
    booking_id: int,
    body: BookingStatusUpdate,
    storage: MemStorage = Depends(get_storage),
) -> Booking:
    """Replace the status of a booking.

    A missing or blank ``status`` is rejected with 400; an unknown
    booking id yields 404.
    """
    booking = storage.bookings.update_booking_status(booking_id, body.status)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking
