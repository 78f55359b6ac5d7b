"""
Tests for recipe matching and reference data seeding.

The matcher is a pure function, so most tests use lightweight stand-ins
instead of ORM rows.
"""

import pytest
from types import SimpleNamespace
from unittest.mock import patch
from sqlalchemy.orm import Session

from test_fixtures import database, db_session, test_settings
from data.sample_data import SAMPLE_FOOD_BANKS, SAMPLE_NEARBY_USERS, SAMPLE_RECIPES
from services.recipe_service import (
    get_all_recipes,
    get_recipe_by_id,
    match_by_ingredients,
    match_recipes,
    parse_ingredient_list,
)
from services.sharing_service import SharingService


def make_recipe(name, ingredients):
    return SimpleNamespace(name=name, ingredients=ingredients)


SALAD = make_recipe("Salad", ["Spinach", "Tomatoes", "Olive oil"])
PASTA = make_recipe("Pasta", ["Spaghetti", "Tomato Sauce", "Basil"])
TOAST = make_recipe("Toast", ["Bread", "Butter"])
RECIPES = [SALAD, PASTA, TOAST]


# =============================================================================
# PURE MATCHER
# =============================================================================


def test_match_is_case_insensitive_substring():
    """
    Verifies:
    - "tomato" matches both "Tomatoes" and "Tomato Sauce"
    - Case of the query does not matter
    """
    assert match_recipes(RECIPES, ["tomato"]) == [SALAD, PASTA]
    assert match_recipes(RECIPES, ["TOMATO"]) == [SALAD, PASTA]


def test_match_any_ingredient():
    assert match_recipes(RECIPES, ["butter", "basil"]) == [PASTA, TOAST]


def test_match_keeps_input_order_without_duplicates():
    # Salad matches on two ingredients but appears once
    assert match_recipes(RECIPES, ["spinach", "oil", "bread"]) == [SALAD, TOAST]


def test_match_no_hits():
    assert match_recipes(RECIPES, ["chocolate"]) == []


@pytest.mark.parametrize("names", [[], [""], ["   "]])
def test_match_empty_query_returns_nothing(names):
    assert match_recipes(RECIPES, names) == []


def test_match_tolerates_missing_ingredient_list():
    odd = make_recipe("Mystery", None)
    assert match_recipes([odd, TOAST], ["bread"]) == [TOAST]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("tomato", ["tomato"]),
        ("tomato,eggs", ["tomato", "eggs"]),
        (" tomato , eggs ", ["tomato", "eggs"]),
        ("tomato,,eggs,", ["tomato", "eggs"]),
        (",", []),
        ("", []),
    ],
)
def test_parse_ingredient_list(raw, expected):
    assert parse_ingredient_list(raw) == expected


# =============================================================================
# DATABASE BACKED
# =============================================================================


@pytest.fixture
def seeded(db_session: Session) -> Session:
    SharingService.seed_reference_data(db_session)
    return db_session


def test_seed_reference_data_fills_empty_tables(db_session: Session):
    counts = SharingService.seed_reference_data(db_session)

    assert counts == {
        "recipes": len(SAMPLE_RECIPES),
        "food_banks": len(SAMPLE_FOOD_BANKS),
        "nearby_users": len(SAMPLE_NEARBY_USERS),
    }


def test_seed_reference_data_is_idempotent(seeded: Session):
    counts = SharingService.seed_reference_data(seeded)

    assert counts == {"recipes": 0, "food_banks": 0, "nearby_users": 0}
    assert len(get_all_recipes(seeded)) == len(SAMPLE_RECIPES)


def test_get_all_recipes_in_insertion_order(seeded: Session):
    names = [r.name for r in get_all_recipes(seeded)]
    assert names == [r["name"] for r in SAMPLE_RECIPES]


def test_get_recipe_by_id(seeded: Session):
    first = get_all_recipes(seeded)[0]

    assert get_recipe_by_id(seeded, first.id).name == first.name
    assert get_recipe_by_id(seeded, 99999) is None


def test_match_by_ingredients_against_seeded_recipes(seeded: Session):
    names = [r.name for r in match_by_ingredients(seeded, ["pepper"])]

    # "Red pepper flakes" also contains "pepper"
    assert names == [
        "Spinach and Tomato Salad",
        "Egg and Cheese Sandwich",
        "Avocado Toast",
        "Vegetable Soup",
    ]


def test_match_by_ingredients_empty_skips_storage(seeded: Session):
    with patch("services.recipe_service.RecipeRepository") as repo_cls:
        assert match_by_ingredients(seeded, []) == []
        assert match_by_ingredients(seeded, ["  "]) == []

    repo_cls.assert_not_called()
