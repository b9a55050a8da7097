"""
User endpoints for API v1.

Registration, lookup and partial profile updates.  Responses use
``UserRead`` so the password hash never leaves the server.  Username
and e‑mail clashes are reported as HTTP 409.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.core.exceptions import DuplicateError
from tourism_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate, storage: MemStorage = Depends(get_storage)) -> UserRead:
    """Register a new user.

    Returns 409 if the username or e‑mail address is already taken.
    """
    try:
        created = storage.users.create_user(user)
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return created.to_read()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, storage: MemStorage = Depends(get_storage)) -> UserRead:
    user = storage.users.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user.to_read()


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    updates: UserUpdate,
    storage: MemStorage = Depends(get_storage),
) -> UserRead:
    """Update a user's username, e‑mail or password.

    Only the supplied fields change.  A new password is hashed before
    it is stored.
    """
    try:
        user = storage.users.update_user(user_id, updates)
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user.to_read()
