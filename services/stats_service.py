from typing import List
from sqlalchemy.orm import Session
import logging

from domain.schemas.stats_schemas import (
    CategoryShare,
    MonthlyProgress,
    WasteStatsResponse,
)
from repositories import FoodItemRepository

logger = logging.getLogger("freshsave.stats")

# Per tracked item estimates
MONEY_PER_ITEM = 3.5  # dollars
CO2_PER_ITEM = 1.2  # kg
WATER_PER_ITEM = 48  # liters
WASTE_PER_ITEM = 0.4  # kg

SAMPLE_MONTHLY_PROGRESS = [
    ("Jan", 2.5),
    ("Feb", 3.8),
    ("Mar", 2.9),
    ("Apr", 4.2),
    ("May", 3.7),
    ("Jun", 5.1),
    ("Jul", 7.3),
    ("Aug", 5.5),
]

SAMPLE_BREAKDOWN = [
    ("Fruits", 40),
    ("Vegetables", 30),
    ("Dairy", 20),
    ("Other", 10),
]


class StatsService:
    @staticmethod
    def get_waste_stats(db: Session, owner_id: int) -> WasteStatsResponse:
        """Waste-reduction estimates derived from the owner's own inventory"""
        repo = FoodItemRepository(db)
        total = repo.count_for_owner(owner_id)

        return WasteStatsResponse(
            co2_saved=round(total * CO2_PER_ITEM, 2),
            water_saved=float(total * WATER_PER_ITEM),
            money_saved=round(total * MONEY_PER_ITEM, 2),
            waste_reduced=round(total * WASTE_PER_ITEM, 2),
            monthly_progress=[
                MonthlyProgress(month=m, amount=a) for m, a in SAMPLE_MONTHLY_PROGRESS
            ],
            waste_breakdown=StatsService._breakdown(repo, owner_id, total),
        )

    @staticmethod
    def _breakdown(
        repo: FoodItemRepository, owner_id: int, total: int
    ) -> List[CategoryShare]:
        if not total:
            return [CategoryShare(category=c, percentage=p) for c, p in SAMPLE_BREAKDOWN]
        counts = sorted(
            repo.count_by_category(owner_id), key=lambda row: (-row[1], row[0])
        )
        return [
            CategoryShare(category=category, percentage=round(count * 100 / total))
            for category, count in counts
        ]
