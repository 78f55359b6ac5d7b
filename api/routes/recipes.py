"""
Recipe routes - listing, lookup and ingredient matching.
Recipes are shared reference data, so none of these need a session.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db
from app.exceptions import NotFoundError
from domain.schemas.base import MAX_INT
from domain.schemas.recipe_schemas import RecipeResponse
from services.recipe_service import (
    get_all_recipes,
    get_recipe_by_id,
    match_by_ingredients,
    parse_ingredient_list,
)

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get("", response_model=List[RecipeResponse])
def list_recipes(db: Session = Depends(get_db)):
    return [RecipeResponse.model_validate(r) for r in get_all_recipes(db)]


@router.get("/match/{ingredients}", response_model=List[RecipeResponse])
def match_recipes_endpoint(ingredients: str, db: Session = Depends(get_db)):
    """
    Recipes using any of the comma separated ingredients.

    Matching is case-insensitive and by substring, so "tomato" also finds
    recipes listing "Tomatoes". An empty list matches nothing.

    Entries are trimmed and blank ones dropped before matching, so "a,,b"
    searches for "a" and "b" only. This is a deliberate product decision:
    a blank entry would otherwise match every recipe.
    """
    names = parse_ingredient_list(ingredients)
    return [RecipeResponse.model_validate(r) for r in match_by_ingredients(db, names)]


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int = Path(..., ge=1, le=MAX_INT), db: Session = Depends(get_db)
):
    recipe = get_recipe_by_id(db, recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe not found")
    return RecipeResponse.model_validate(recipe)
