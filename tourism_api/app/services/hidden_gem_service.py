"""Business logic for hidden gems."""

import logging
from typing import List, Optional

from ..core.collection import Collection
from ..schemas.hidden_gem import HiddenGem, HiddenGemCreate

logger = logging.getLogger(__name__)


class HiddenGemService:
    def __init__(self) -> None:
        self.hidden_gems: Collection[HiddenGem] = Collection("hidden gem")

    def list_hidden_gems(self) -> List[HiddenGem]:
        return self.hidden_gems.all()

    def get_hidden_gem(self, gem_id: int) -> Optional[HiddenGem]:
        return self.hidden_gems.get(gem_id)

    def list_hidden_gems_by_region(self, region: str) -> List[HiddenGem]:
        return self.hidden_gems.filter(lambda gem: gem.region == region)

    def create_hidden_gem(self, data: HiddenGemCreate) -> HiddenGem:
        gem = self.hidden_gems.insert(lambda gem_id: HiddenGem(id=gem_id, **data.model_dump()))
        logger.info("Created hidden gem %s '%s'", gem.id, gem.name)
        return gem
