"""
Shared FastAPI dependencies.

The entity store lives on ``app.state.storage``; routes obtain it via
``Depends(get_storage)`` instead of importing a global, which lets
tests hand each application its own store.
"""

from fastapi import Request

from tourism_api.app.services.storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage
