"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    MessageResponse,
)
from domain.schemas.food_item_schemas import (
    MUTABLE_FIELDS,
    FoodItemCreate,
    FoodItemUpdate,
    FoodItemResponse,
)
from domain.schemas.recipe_schemas import (
    RecipeResponse,
    FoodBankResponse,
    NearbyUserResponse,
)
from domain.schemas.stats_schemas import (
    WasteStatsResponse,
    MonthlyProgress,
    CategoryShare,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "MessageResponse",
    # Food item schemas
    "MUTABLE_FIELDS",
    "FoodItemCreate",
    "FoodItemUpdate",
    "FoodItemResponse",
    # Reference schemas
    "RecipeResponse",
    "FoodBankResponse",
    "NearbyUserResponse",
    # Stats schemas
    "WasteStatsResponse",
    "MonthlyProgress",
    "CategoryShare",
]
