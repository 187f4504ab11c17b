from typing import Optional

from pydantic import BaseModel, Field


class HealthyDishRequest(BaseModel):
    dishDescription: str = Field(..., min_length=1)
    originalImageUrl: str


class HealthyDishResponse(BaseModel):
    imageUrl: str
    # Absent when only the image could be generated.
    recipe: Optional[str] = None
