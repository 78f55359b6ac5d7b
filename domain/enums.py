"""
Domain enums for FreshSave application.
Contains all enumeration types used across the domain models.
"""

import enum


class FoodCategory(str, enum.Enum):
    """Closed set of food item categories"""

    FRUITS = "Fruits"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"
    MEAT = "Meat"
    GRAINS = "Grains"
    OTHER = "Other"


class FoodUnit(str, enum.Enum):
    """Closed set of units of measurement"""

    PIECES = "pcs"
    GRAMS = "g"
    KILOGRAMS = "kg"
    MILLILITERS = "ml"
    LITERS = "L"
    CUPS = "cup(s)"


def enum_values(enum_cls) -> list[str]:
    """Column values for SQLAlchemy Enum columns (store values, not member names)"""
    return [member.value for member in enum_cls]
