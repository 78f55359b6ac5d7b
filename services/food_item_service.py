from datetime import timedelta
from typing import Any, List, Mapping, Optional, Union
from sqlalchemy.orm import Session
import logging

from domain.models import FoodItem, utc_now
from domain.schemas.food_item_schemas import FoodItemCreate, FoodItemUpdate
from repositories import FoodItemRepository
from services.validation import validate_payload

logger = logging.getLogger("freshsave.food_items")


class FoodItemService:
    """
    Inventory operations. Every call is scoped to ``owner_id``; an item that
    belongs to someone else behaves exactly like one that does not exist.
    """

    @staticmethod
    def list_items(db: Session, owner_id: int) -> List[FoodItem]:
        """All of the owner's items ordered by expiry date, soonest first"""
        return FoodItemRepository(db).list_for_owner(owner_id)

    @staticmethod
    def get_item(db: Session, item_id: int, owner_id: int) -> Optional[FoodItem]:
        return FoodItemRepository(db).get_for_owner(item_id, owner_id)

    @staticmethod
    def get_expiring_soon(db: Session, owner_id: int, days: int) -> List[FoodItem]:
        """
        Items expiring within ``days`` days (already expired ones included).

        Returns items ordered by expiry date (soonest first).
        """
        cutoff = utc_now() + timedelta(days=days)
        return FoodItemRepository(db).list_expiring(owner_id, cutoff)

    @staticmethod
    def add_item(
        db: Session,
        data: Union[FoodItemCreate, Mapping[str, Any]],
        owner_id: int,
    ) -> FoodItem:
        """
        Validate and persist a new item for ``owner_id``.

        The owner and the added date are always assigned here, never taken
        from ``data``.

        Raises:
            ServiceValidationError: on any field violation, before storage
        """
        payload = validate_payload(FoodItemCreate, data)
        item = FoodItemRepository(db).create_for_owner(owner_id, payload.model_dump())
        logger.info(
            "food_item_added item_id=%s user_id=%s category=%s",
            item.id,
            owner_id,
            item.category.value,
        )
        return item

    @staticmethod
    def update_item(
        db: Session,
        item_id: int,
        data: Union[FoodItemUpdate, Mapping[str, Any]],
        owner_id: int,
    ) -> Optional[FoodItem]:
        """
        Apply a partial update restricted to the mutable fields.

        The owner check and the write happen in one statement. Returns None
        if the item does not exist or is not owned by ``owner_id``.

        Raises:
            ServiceValidationError: on unknown fields or invalid values
        """
        payload = validate_payload(FoodItemUpdate, data)
        changes = payload.changes()
        item = FoodItemRepository(db).update_for_owner(item_id, owner_id, changes)
        if item is None:
            logger.info(
                "food_item_update_miss item_id=%s user_id=%s", item_id, owner_id
            )
        else:
            logger.info(
                "food_item_updated item_id=%s user_id=%s fields=%s",
                item_id,
                owner_id,
                sorted(changes),
            )
        return item

    @staticmethod
    def delete_item(db: Session, item_id: int, owner_id: int) -> bool:
        """True only if a row owned by ``owner_id`` was removed"""
        deleted = FoodItemRepository(db).delete_for_owner(item_id, owner_id)
        logger.info(
            "food_item_delete item_id=%s user_id=%s deleted=%s",
            item_id,
            owner_id,
            deleted,
        )
        return deleted
