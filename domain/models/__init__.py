"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    Database,
    utc_now,
    to_storage_datetime,
)
from domain.models.user import User
from domain.models.food_item import FoodItem
from domain.models.recipe import Recipe, FoodBank, NearbyUser
from domain.models.session import UserSession

__all__ = [
    # Database
    "Base",
    "Database",
    "utc_now",
    "to_storage_datetime",
    # User models
    "User",
    # Inventory models
    "FoodItem",
    # Reference models
    "Recipe",
    "FoodBank",
    "NearbyUser",
    # Sessions
    "UserSession",
]
