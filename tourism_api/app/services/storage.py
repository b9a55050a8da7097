"""
The in‑memory entity store.

``MemStorage`` bundles one service per entity kind.  Each service owns
an isolated collection with its own id counter, so identifiers of
different kinds may coincide.  The store is built explicitly and passed
to the API by ``create_app``; nothing here is a module‑level singleton.

All operations are synchronous and never suspend, so under an asyncio
server a read‑then‑write update on a collection cannot interleave with
another request.
"""

import logging

from . import seed
from .booking_service import BookingService
from .destination_service import DestinationService
from .event_service import EventService
from .experience_service import ExperienceService
from .hidden_gem_service import HiddenGemService
from .newsletter_service import NewsletterService
from .preference_service import PreferenceService
from .review_service import ReviewService
from .user_service import UserService

logger = logging.getLogger(__name__)


class MemStorage:
    """Process‑lifetime store for all nine entity kinds."""

    def __init__(self, seed_demo_data: bool = True) -> None:
        self.users = UserService()
        self.destinations = DestinationService()
        self.experiences = ExperienceService()
        self.reviews = ReviewService()
        self.hidden_gems = HiddenGemService()
        self.events = EventService()
        self.bookings = BookingService()
        self.newsletter = NewsletterService()
        self.preferences = PreferenceService()

        if seed_demo_data:
            self.load_demo_data()

    def load_demo_data(self) -> None:
        """Insert the demonstration destinations, experiences, hidden gems and events."""
        for destination in seed.DESTINATIONS:
            self.destinations.create_destination(destination)
        for experience in seed.EXPERIENCES:
            self.experiences.create_experience(experience)
        for gem in seed.HIDDEN_GEMS:
            self.hidden_gems.create_hidden_gem(gem)
        for event in seed.EVENTS:
            self.events.create_event(event)
        logger.info(
            "Loaded demo data: %d destinations, %d experiences, %d hidden gems, %d events",
            len(seed.DESTINATIONS),
            len(seed.EXPERIENCES),
            len(seed.HIDDEN_GEMS),
            len(seed.EVENTS),
        )
