"""
Food item domain mappers.
"""

from typing import Iterable, List

from domain.models import FoodItem
from domain.schemas.food_item_schemas import FoodItemResponse


class FoodItemMapper:
    """Mapper for food item transformations."""

    @staticmethod
    def to_response(item: FoodItem) -> FoodItemResponse:
        return FoodItemResponse.model_validate(item)

    @staticmethod
    def to_response_list(items: Iterable[FoodItem]) -> List[FoodItemResponse]:
        return [FoodItemResponse.model_validate(i) for i in items]
