"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.food_item_mapper import FoodItemMapper

__all__ = ["UserMapper", "FoodItemMapper"]
