"""
Business logic for user travel preferences.

Each user has at most one preference record.  ``save_preferences``
is an upsert keyed by ``user_id``: it creates the record on first use
and afterwards merges the supplied fields into it.
``update_preferences`` performs the same merge but refuses to create
anything.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.collection import Collection
from ..schemas.preference import Preference, PreferenceCreate, PreferenceUpdate

logger = logging.getLogger(__name__)


class PreferenceService:
    def __init__(self) -> None:
        self.preferences: Collection[Preference] = Collection("preference")

    def get_preferences(self, user_id: int) -> Optional[Preference]:
        return self.preferences.find(lambda p: p.user_id == user_id)

    def list_preferences(self) -> List[Preference]:
        return self.preferences.all()

    def save_preferences(self, data: PreferenceCreate) -> Preference:
        """Create or merge the preference record of ``data.user_id``.

        Only fields explicitly present in the payload overwrite an
        existing record; defaults of omitted fields do not.
        """
        existing = self.get_preferences(data.user_id)
        if existing is not None:
            changes = data.model_dump(exclude_unset=True)
            return self._merge(existing, changes)
        preference = self.preferences.insert(
            lambda preference_id: Preference(id=preference_id, **data.model_dump())
        )
        logger.info("Saved preferences %s for user %s", preference.id, preference.user_id)
        return preference

    def update_preferences(self, user_id: int, patch: PreferenceUpdate) -> Optional[Preference]:
        existing = self.get_preferences(user_id)
        if existing is None:
            logger.debug("No preferences to update for user %s", user_id)
            return None
        return self._merge(existing, patch.model_dump(exclude_unset=True, exclude_none=True))

    def _merge(self, existing: Preference, changes: Dict[str, Any]) -> Preference:
        # user_id is the upsert key and never changes
        changes.pop("user_id", None)
        preference = self.preferences.merge(existing.id, changes)
        logger.info("Merged %s into preferences of user %s", sorted(changes), existing.user_id)
        return preference
