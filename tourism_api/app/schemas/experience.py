"""Pydantic models for bookable experiences (workshops, classes, tours)."""

from pydantic import BaseModel, Field


class ExperienceBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Kente Weaving Workshop"])
    category: str = Field(..., min_length=1, examples=["Crafts"])
    description: str
    image_url: str
    location: str
    duration: str = Field(..., examples=["3 hours"])
    price: int = Field(..., ge=0)


class ExperienceCreate(ExperienceBase):
    pass


class Experience(ExperienceBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
