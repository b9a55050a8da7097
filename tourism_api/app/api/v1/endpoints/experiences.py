"""Experience endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.experience import Experience, ExperienceCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[Experience])
async def list_experiences(storage: MemStorage = Depends(get_storage)) -> List[Experience]:
    return storage.experiences.list_experiences()


@router.get("/category/{category}", response_model=List[Experience])
async def list_experiences_by_category(
    category: str,
    storage: MemStorage = Depends(get_storage),
) -> List[Experience]:
    return storage.experiences.list_experiences_by_category(category)


@router.get("/{experience_id}", response_model=Experience)
async def get_experience(experience_id: int, storage: MemStorage = Depends(get_storage)) -> Experience:
    experience = storage.experiences.get_experience(experience_id)
    if experience is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.post("", response_model=Experience, status_code=status.HTTP_201_CREATED)
async def create_experience(
    experience: ExperienceCreate,
    storage: MemStorage = Depends(get_storage),
) -> Experience:
    return storage.experiences.create_experience(experience)
