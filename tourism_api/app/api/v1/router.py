"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers (destinations, reviews,
bookings, etc.).  When new domains are introduced, update this file to
include their routers.  The whole router is mounted under
``settings.api_prefix`` by ``create_app``.
"""

from fastapi import APIRouter

from .endpoints import (
    users,
    destinations,
    experiences,
    reviews,
    hidden_gems,
    events,
    bookings,
    newsletter,
    preferences,
    weather,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(destinations.router, prefix="/destinations", tags=["destinations"])
router.include_router(experiences.router, prefix="/experiences", tags=["experiences"])
router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
router.include_router(hidden_gems.router, prefix="/hidden-gems", tags=["hidden gems"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
router.include_router(weather.router, prefix="/weather", tags=["weather"])
