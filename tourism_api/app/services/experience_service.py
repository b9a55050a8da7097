"""Business logic for experiences."""

import logging
from typing import List, Optional

from ..core.collection import Collection
from ..schemas.experience import Experience, ExperienceCreate

logger = logging.getLogger(__name__)


class ExperienceService:
    def __init__(self) -> None:
        self.experiences: Collection[Experience] = Collection("experience")

    def list_experiences(self) -> List[Experience]:
        return self.experiences.all()

    def get_experience(self, experience_id: int) -> Optional[Experience]:
        return self.experiences.get(experience_id)

    def list_experiences_by_category(self, category: str) -> List[Experience]:
        return self.experiences.filter(lambda e: e.category == category)

    def create_experience(self, data: ExperienceCreate) -> Experience:
        experience = self.experiences.insert(
            lambda experience_id: Experience(id=experience_id, **data.model_dump())
        )
        logger.info("Created experience %s '%s'", experience.id, experience.title)
        return experience
