"""
Preference endpoints for API v1.

``POST`` is an upsert keyed by ``user_id`` and always answers 201.
``PATCH`` merges into an existing record and answers 404 when the user
has not saved preferences yet.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.preference import Preference, PreferenceCreate, PreferenceUpdate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("/{user_id}", response_model=Preference)
async def get_preferences(user_id: int, storage: MemStorage = Depends(get_storage)) -> Preference:
    preference = storage.preferences.get_preferences(user_id)
    if preference is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preferences not found")
    return preference


@router.post("", response_model=Preference, status_code=status.HTTP_201_CREATED)
async def save_preferences(data: PreferenceCreate, storage: MemStorage = Depends(get_storage)) -> Preference:
    return storage.preferences.save_preferences(data)


@router.patch("/{user_id}", response_model=Preference)
async def update_preferences(
    user_id: int,
    updates: PreferenceUpdate,
    storage: MemStorage = Depends(get_storage),
) -> Preference:
    preference = storage.preferences.update_preferences(user_id, updates)
    if preference is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preferences not found")
    return preference
