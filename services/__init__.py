"""Services package - Business logic layer"""

from services.auth_service import AuthService, IssuedSession
from services.food_item_service import FoodItemService
from services.stats_service import StatsService
from services.sharing_service import SharingService

# Note: recipe_service contains utility functions, not a class

__all__ = [
    "AuthService",
    "IssuedSession",
    "FoodItemService",
    "StatsService",
    "SharingService",
]
