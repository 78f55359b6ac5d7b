from typing import Dict, List
from sqlalchemy.orm import Session
import logging

from data.sample_data import SAMPLE_FOOD_BANKS, SAMPLE_NEARBY_USERS, SAMPLE_RECIPES
from domain.models import FoodBank, NearbyUser, Recipe
from repositories import FoodBankRepository, NearbyUserRepository, RecipeRepository

logger = logging.getLogger("freshsave.sharing")


class SharingService:
    """Read access to sharing reference data and seeding of reference tables"""

    @staticmethod
    def get_food_banks(db: Session) -> List[FoodBank]:
        return FoodBankRepository(db).get_all()

    @staticmethod
    def get_nearby_users(db: Session) -> List[NearbyUser]:
        return NearbyUserRepository(db).get_all()

    @staticmethod
    def seed_reference_data(db: Session) -> Dict[str, int]:
        """
        Insert sample recipes, food banks and nearby users into empty tables.

        Tables that already hold rows are left untouched, so this is safe to
        run on every startup.

        Returns:
            Number of rows inserted per table
        """
        seeded = {}
        for table, repo, model, rows in (
            ("recipes", RecipeRepository(db), Recipe, SAMPLE_RECIPES),
            ("food_banks", FoodBankRepository(db), FoodBank, SAMPLE_FOOD_BANKS),
            ("nearby_users", NearbyUserRepository(db), NearbyUser, SAMPLE_NEARBY_USERS),
        ):
            if repo.count():
                seeded[table] = 0
                continue
            seeded[table] = repo.bulk_create(model(**row) for row in rows)

        logger.info("reference_data_seeded %s", seeded)
        return seeded
