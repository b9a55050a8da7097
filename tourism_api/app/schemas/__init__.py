"""
Pydantic schema definitions for entity records and API payloads.

Each entity kind defines a ``*Create`` model for incoming payloads and
a record model (with ``id``) that the store keeps and the API returns.
Kinds that support partial updates also define an ``*Update`` patch
model whose fields are all optional.
"""
