"""Hidden gem endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tourism_api.app.api.deps import get_storage
from tourism_api.app.schemas.hidden_gem import HiddenGem, HiddenGemCreate
from tourism_api.app.services.storage import MemStorage


router = APIRouter()


@router.get("", response_model=List[HiddenGem])
async def list_hidden_gems(storage: MemStorage = Depends(get_storage)) -> List[HiddenGem]:
    return storage.hidden_gems.list_hidden_gems()


@router.get("/region/{region}", response_model=List[HiddenGem])
async def list_hidden_gems_by_region(
    region: str,
    storage: MemStorage = Depends(get_storage),
) -> List[HiddenGem]:
    return storage.hidden_gems.list_hidden_gems_by_region(region)


@router.get("/{gem_id}", response_model=HiddenGem)
async def get_hidden_gem(gem_id: int, storage: MemStorage = Depends(get_storage)) -> HiddenGem:
    gem = storage.hidden_gems.get_hidden_gem(gem_id)
    if gem is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hidden gem not found")
    return gem


@router.post("", response_model=HiddenGem, status_code=status.HTTP_201_CREATED)
async def create_hidden_gem(gem: HiddenGemCreate, storage: MemStorage = Depends(get_storage)) -> HiddenGem:
    return storage.hidden_gems.create_hidden_gem(gem)
