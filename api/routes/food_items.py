"""Food inventory routes. Every route is scoped to the signed-in user."""

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db, require_user
from app.exceptions import NotFoundError
from domain.mappers import FoodItemMapper
from domain.schemas.auth_schemas import UserResponse
from domain.schemas.base import MAX_INT
from domain.schemas.food_item_schemas import (
    FoodItemCreate,
    FoodItemResponse,
    FoodItemUpdate,
)
from services.food_item_service import FoodItemService

router = APIRouter(prefix="/food-items", tags=["Food Items"])

ITEM_NOT_FOUND = "Food item not found"


@router.get("", response_model=List[FoodItemResponse])
def list_food_items(
    user: UserResponse = Depends(require_user), db: Session = Depends(get_db)
):
    """All of the user's items, soonest expiry first"""
    items = FoodItemService.list_items(db, user.id)
    return FoodItemMapper.to_response_list(items)


# Declared before /{item_id} so the literal path wins
@router.get("/expiring-soon", response_model=List[FoodItemResponse])
def expiring_soon(
    days: int = Query(default=3, ge=1, le=30, description="Look-ahead window in days"),
    user: UserResponse = Depends(require_user),
    db: Session = Depends(get_db),
):
    items = FoodItemService.get_expiring_soon(db, user.id, days)
    return FoodItemMapper.to_response_list(items)


@router.get("/{item_id}", response_model=FoodItemResponse)
def get_food_item(
    item_id: int = Path(..., ge=1, le=MAX_INT),
    user: UserResponse = Depends(require_user),
    db: Session = Depends(get_db),
):
    item = FoodItemService.get_item(db, item_id, user.id)
    if item is None:
        raise NotFoundError(ITEM_NOT_FOUND)
    return FoodItemMapper.to_response(item)


@router.post(
    "", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED
)
def create_food_item(
    payload: FoodItemCreate,
    user: UserResponse = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Add an item; owner and added date are set by the server"""
    item = FoodItemService.add_item(db, payload, user.id)
    return FoodItemMapper.to_response(item)


@router.patch("/{item_id}", response_model=FoodItemResponse)
def update_food_item(
    payload: FoodItemUpdate,
    item_id: int = Path(..., ge=1, le=MAX_INT),
    user: UserResponse = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Partial update of name, category, quantity, unit, expiryDate, favorite"""
    item = FoodItemService.update_item(db, item_id, payload, user.id)
    if item is None:
        raise NotFoundError(ITEM_NOT_FOUND)
    return FoodItemMapper.to_response(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_food_item(
    item_id: int = Path(..., ge=1, le=MAX_INT),
    user: UserResponse = Depends(require_user),
    db: Session = Depends(get_db),
):
    if not FoodItemService.delete_item(db, item_id, user.id):
        raise NotFoundError(ITEM_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
