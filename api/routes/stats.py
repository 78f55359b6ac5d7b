"""Waste reduction statistics"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db, require_user
from domain.schemas.auth_schemas import UserResponse
from domain.schemas.stats_schemas import WasteStatsResponse
from services.stats_service import StatsService

router = APIRouter(tags=["Stats"])


@router.get("/stats", response_model=WasteStatsResponse)
def get_stats(
    user: UserResponse = Depends(require_user), db: Session = Depends(get_db)
):
    """Estimates derived from the signed-in user's own inventory"""
    return StatsService.get_waste_stats(db, user.id)
