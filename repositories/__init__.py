"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, CatalogRepository
from repositories.user_repository import UserRepository
from repositories.food_item_repository import FoodItemRepository
from repositories.recipe_repository import (
    RecipeRepository,
    FoodBankRepository,
    NearbyUserRepository,
)

__all__ = [
    "BaseRepository",
    "CatalogRepository",
    "UserRepository",
    "FoodItemRepository",
    "RecipeRepository",
    "FoodBankRepository",
    "NearbyUserRepository",
]
