"""Food banks and nearby users for sharing surplus food"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db
from domain.schemas.recipe_schemas import FoodBankResponse, NearbyUserResponse
from services.sharing_service import SharingService

router = APIRouter(tags=["Sharing"])


@router.get("/food-banks", response_model=List[FoodBankResponse])
def list_food_banks(db: Session = Depends(get_db)):
    return [FoodBankResponse.model_validate(b) for b in SharingService.get_food_banks(db)]


@router.get("/nearby-users", response_model=List[NearbyUserResponse])
def list_nearby_users(db: Session = Depends(get_db)):
    return [
        NearbyUserResponse.model_validate(u) for u in SharingService.get_nearby_users(db)
    ]
