from typing import List

from pydantic import Field

from domain.schemas.base import CamelModel


class MonthlyProgress(CamelModel):
    month: str
    amount: float = Field(..., description="Kilograms of food saved")


class CategoryShare(CamelModel):
    category: str
    percentage: int


class WasteStatsResponse(CamelModel):
    co2_saved: float = Field(..., description="kg of CO2")
    water_saved: float = Field(..., description="liters")
    money_saved: float = Field(..., description="dollars")
    waste_reduced: float = Field(..., description="kg of food")
    monthly_progress: List[MonthlyProgress]
    waste_breakdown: List[CategoryShare]
