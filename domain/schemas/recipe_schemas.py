from typing import List, Optional

from pydantic import Field

from domain.schemas.base import CamelModel


class RecipeResponse(CamelModel):
    id: int
    name: str
    description: str
    prep_time: int = Field(..., description="Preparation time in minutes")
    image_url: Optional[str] = None
    ingredients: List[str]
    instructions: str
    rating: Optional[int] = Field(
        None, ge=0, le=50, description="0-50, i.e. 0.0-5.0 with one decimal"
    )


class FoodBankResponse(CamelModel):
    id: int
    name: str
    distance: int = Field(..., description="Distance in miles x 10")
    open_hours: str
    description: str


class NearbyUserResponse(CamelModel):
    id: int
    name: str
    distance: int = Field(..., description="Distance in miles x 10")
    rating: int = Field(..., description="0-50, i.e. 0.0-5.0 with one decimal")
    image_url: Optional[str] = None
