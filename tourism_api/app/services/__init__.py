"""
Service layer: the in‑memory entity store.

Each service owns the collection for one entity kind and implements
its lookups, filters and updates.  ``storage.MemStorage`` aggregates
the nine services into the single store object handed to the API.
"""
