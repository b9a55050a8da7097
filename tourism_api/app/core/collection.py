"""
Keyed in‑memory collection with an auto‑incrementing identifier.

A ``Collection`` is the storage primitive behind every entity kind.
Records are pydantic models carrying an integer ``id``; they are kept
in an insertion‑ordered dict keyed by that id.  Identifiers start at 1,
grow strictly and are never reused.

The collection owns its records.  Every method that hands a record to
a caller returns a deep copy, so callers can modify what they receive
without changing stored state; the only way to change a record is
``merge``.
"""

import copy
import logging
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)

logger = logging.getLogger(__name__)


class Collection(Generic[RecordT]):
    """Insertion‑ordered map of records plus a private id counter."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self.all())

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        """Allocate the next id, build the record with it and store it.

        ``build`` receives the new id and must return the complete
        record.  The counter is advanced before ``build`` runs, so an id
        is consumed even if building fails.
        """
        record_id = self._next_id
        self._next_id += 1
        record = build(record_id)
        self._records[record_id] = record
        logger.debug("Stored %s %s", self.name, record_id)
        return self._snapshot(record)

    def get(self, record_id: int) -> Optional[RecordT]:
        record = self._records.get(record_id)
        if record is None:
            return None
        return self._snapshot(record)

    def all(self) -> List[RecordT]:
        return [self._snapshot(record) for record in self._records.values()]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """Return the first record (in insertion order) matching ``predicate``."""
        for record in self._records.values():
            if predicate(record):
                return self._snapshot(record)
        return None

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [self._snapshot(r) for r in self._records.values() if predicate(r)]

    def merge(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Shallow‑merge ``changes`` over a stored record.

        Keys present in ``changes`` overwrite the stored values; all
        other fields are preserved.  Returns the merged record, or
        ``None`` when no record has ``record_id``.
        """
        existing = self._records.get(record_id)
        if existing is None:
            return None
        changes = {k: v for k, v in changes.items() if k != "id"}
        updated = existing.model_copy(update=copy.deepcopy(changes))
        self._records[record_id] = updated
        logger.debug("Merged %s into %s %s", sorted(changes), self.name, record_id)
        return self._snapshot(updated)

    @staticmethod
    def _snapshot(record: RecordT) -> RecordT:
        return record.model_copy(deep=True)
