"""
Business logic for destinations.

Destinations can be listed in full, by exact region or by tags.  The
tag filter is an any‑match: a destination qualifies when it carries at
least one of the requested tags.
"""

import logging
from typing import Iterable, List, Optional

from ..core.collection import Collection
from ..schemas.destination import Destination, DestinationCreate

logger = logging.getLogger(__name__)


class DestinationService:
    def __init__(self) -> None:
        self.destinations: Collection[Destination] = Collection("destination")

    def list_destinations(self) -> List[Destination]:
        return self.destinations.all()

    def get_destination(self, destination_id: int) -> Optional[Destination]:
        return self.destinations.get(destination_id)

    def list_destinations_by_region(self, region: str) -> List[Destination]:
        return self.destinations.filter(lambda d: d.region == region)

    def list_destinations_by_tags(self, tags: Iterable[str]) -> List[Destination]:
        wanted = set(tags)
        return self.destinations.filter(lambda d: not wanted.isdisjoint(d.tags))

    def create_destination(self, data: DestinationCreate) -> Destination:
        destination = self.destinations.insert(
            lambda destination_id: Destination(id=destination_id, **data.model_dump())
        )
        logger.info("Created destination %s '%s'", destination.id, destination.name)
        return destination
