from typing import Iterable, List, Optional, Sequence, TypeVar
import logging

from sqlalchemy.orm import Session

from domain.models import Recipe
from repositories import RecipeRepository

logger = logging.getLogger("freshsave.recipe")

RecipeLike = TypeVar("RecipeLike")


def parse_ingredient_list(raw: str) -> List[str]:
    """Split a comma separated path segment into trimmed, non-empty names."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def match_recipes(
    recipes: Iterable[RecipeLike], names: Sequence[str]
) -> List[RecipeLike]:
    """
    Recipes with at least one ingredient containing at least one of ``names``.

    Matching is a case-insensitive substring test ("Tomato" matches
    "Tomato Sauce" and "Tomatoes"), not a whole-word match. Results keep the
    order of ``recipes``; there is no ranking.
    """
    needles = [n.strip().lower() for n in names if n and n.strip()]
    if not needles:
        return []

    matched = []
    for recipe in recipes:
        haystack = [str(i).lower() for i in (recipe.ingredients or [])]
        if any(needle in ingredient for needle in needles for ingredient in haystack):
            matched.append(recipe)
    return matched


def get_all_recipes(db: Session) -> List[Recipe]:
    return RecipeRepository(db).get_all()


def get_recipe_by_id(db: Session, recipe_id: int) -> Optional[Recipe]:
    return RecipeRepository(db).get_by_id(recipe_id)


def match_by_ingredients(db: Session, names: Sequence[str]) -> List[Recipe]:
    """Matching recipes for ``names``; empty input never touches storage."""
    if not any(n and n.strip() for n in names):
        return []
    results = match_recipes(RecipeRepository(db).get_all(), names)
    logger.info(
        "recipes_matched ingredients=%d matches=%d", len(names), len(results)
    )
    return results
