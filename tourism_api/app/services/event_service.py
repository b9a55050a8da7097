"""
Business logic for events.

Events only support creation, lookup by id and a full listing.
"""

import logging
from typing import List, Optional

from ..core.collection import Collection
from ..schemas.event import Event, EventCreate

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self) -> None:
        self.events: Collection[Event] = Collection("event")

    def list_events(self) -> List[Event]:
        return self.events.all()

    def get_event(self, event_id: int) -> Optional[Event]:
        return self.events.get(event_id)

    def create_event(self, data: EventCreate) -> Event:
        event = self.events.insert(lambda event_id: Event(id=event_id, **data.model_dump()))
        logger.info("Created event %s '%s'", event.id, event.title)
        return event
