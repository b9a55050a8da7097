"""
Exceptions raised by the entity store.

Missing records are never an exception: lookups return ``None`` and the
routes decide on a 404.  The only store error is a uniqueness
violation, which the routes translate into HTTP 409.
"""


class StoreError(Exception):
    """Base class for errors raised by the in‑memory store."""


class DuplicateError(StoreError, ValueError):
    """A unique field already holds the given value in its collection."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field.capitalize()} already exists")
