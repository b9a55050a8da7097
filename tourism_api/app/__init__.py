"""
Application package initializer.

The project is organised into logical pieces: ``core`` holds settings,
logging, the in‑memory collection primitive and shared exceptions;
``schemas`` defines the pydantic records for every entity kind;
``services`` implements the entity store on top of those records; and
``api`` maps store operations to HTTP routes.  Each domain
(destinations, reviews, bookings, etc.) exposes a router defined in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
