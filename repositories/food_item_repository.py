"""
Food Item Repository - owner-scoped data access for inventory items.

Every query combines the item id with the owner id in a single predicate;
there is no way to read or write an item by id alone.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import FoodItem, utc_now


class FoodItemRepository(BaseRepository[FoodItem]):
    """Repository for food item data access"""

    def __init__(self, db: Session):
        super().__init__(db, FoodItem)

    def _owned(self, item_id: int, owner_id: int):
        return self.db.query(FoodItem).filter(
            and_(FoodItem.id == item_id, FoodItem.user_id == owner_id)
        )

    def list_for_owner(self, owner_id: int) -> List[FoodItem]:
        """All items for a user, soonest-expiring first"""
        return (
            self.db.query(FoodItem)
            .filter(FoodItem.user_id == owner_id)
            .order_by(FoodItem.expiry_date.asc(), FoodItem.id.asc())
            .all()
        )

    def list_expiring(self, owner_id: int, cutoff: datetime) -> List[FoodItem]:
        """Items for a user expiring on or before cutoff, soonest first"""
        return (
            self.db.query(FoodItem)
            .filter(
                and_(
                    FoodItem.user_id == owner_id,
                    FoodItem.expiry_date <= cutoff,
                )
            )
            .order_by(FoodItem.expiry_date.asc(), FoodItem.id.asc())
            .all()
        )

    def get_for_owner(self, item_id: int, owner_id: int) -> Optional[FoodItem]:
        return self._owned(item_id, owner_id).populate_existing().first()

    def create_for_owner(self, owner_id: int, fields: Dict[str, Any]) -> FoodItem:
        item = FoodItem(**fields)
        item.user_id = owner_id
        item.added_date = utc_now()
        return self.create(item)

    def update_for_owner(
        self, item_id: int, owner_id: int, changes: Dict[str, Any]
    ) -> Optional[FoodItem]:
        """
        Apply changes in one UPDATE ... WHERE id = ? AND user_id = ?.

        Returns None when no row matched (missing or owned by someone else).
        """
        if not changes:
            return self.get_for_owner(item_id, owner_id)

        updated = self._owned(item_id, owner_id).update(
            changes, synchronize_session="fetch"
        )
        self.db.commit()
        if not updated:
            return None
        return self.get_for_owner(item_id, owner_id)

    def delete_for_owner(self, item_id: int, owner_id: int) -> bool:
        """Delete in one DELETE ... WHERE id = ? AND user_id = ?"""
        deleted = self._owned(item_id, owner_id).delete(synchronize_session="fetch")
        self.db.commit()
        return deleted > 0

    def count_by_category(self, owner_id: int) -> List[Tuple[str, int]]:
        rows = (
            self.db.query(FoodItem.category, func.count(FoodItem.id))
            .filter(FoodItem.user_id == owner_id)
            .group_by(FoodItem.category)
            .all()
        )
        return [(category.value, count) for category, count in rows]

    def count_for_owner(self, owner_id: int) -> int:
        return self.db.query(FoodItem).filter(FoodItem.user_id == owner_id).count()
