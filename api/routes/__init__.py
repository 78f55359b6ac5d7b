"""API routes package"""

from . import auth, food_items, recipes, sharing, stats, health

__all__ = ["auth", "food_items", "recipes", "sharing", "stats", "health"]
