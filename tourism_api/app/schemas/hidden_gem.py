"""Pydantic models for hidden gems: lesser known places worth a detour."""

from pydantic import BaseModel, Field


class HiddenGemBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Wli Waterfalls"])
    description: str
    image_url: str
    region: str = Field(..., min_length=1, examples=["Volta Region"])


class HiddenGemCreate(HiddenGemBase):
    pass


class HiddenGem(HiddenGemBase):
    id: int
