"""
Recipe and sharing reference repositories (read-mostly, seeded tables)
"""

from sqlalchemy.orm import Session

from repositories.base import CatalogRepository
from domain.models import Recipe, FoodBank, NearbyUser


class RecipeRepository(CatalogRepository[Recipe]):
    """Repository for recipes"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)


class FoodBankRepository(CatalogRepository[FoodBank]):
    """Repository for food banks"""

    def __init__(self, db: Session):
        super().__init__(db, FoodBank)


class NearbyUserRepository(CatalogRepository[NearbyUser]):
    """Repository for nearby sharing users"""

    def __init__(self, db: Session):
        super().__init__(db, NearbyUser)
