"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Generic, Iterable, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the operations every table supports.

    Deliberately has no unscoped get/update/delete by id: tables whose rows
    belong to a user expose owner-scoped variants instead.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def count(self) -> int:
        return self.db.query(self.model).count()


class CatalogRepository(BaseRepository[ModelType]):
    """
    Repository for seeded reference tables that every user may read.
    """

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get_all(self) -> List[ModelType]:
        """All rows in insertion order"""
        return self.db.query(self.model).order_by(self.model.id).all()

    def bulk_create(self, entities: Iterable[ModelType]) -> int:
        items = list(entities)
        self.db.add_all(items)
        self.db.commit()
        return len(items)
