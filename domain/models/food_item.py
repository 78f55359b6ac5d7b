"""
Food inventory models.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    Text,
)
from sqlalchemy.orm import relationship

from domain.enums import FoodCategory, FoodUnit, enum_values
from domain.models.database import Base, utc_now


class FoodItem(Base):
    """A perishable item in a user's inventory"""

    __tablename__ = "food_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(Text, nullable=False)
    category = Column(
        SQLEnum(
            FoodCategory,
            name="food_category",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    quantity = Column(Integer, nullable=False)
    unit = Column(
        SQLEnum(
            FoodUnit,
            name="food_unit",
            native_enum=False,
            values_callable=enum_values,
        ),
        nullable=False,
    )
    expiry_date = Column(DateTime, nullable=False)
    favorite = Column(Boolean, nullable=False, default=False)
    added_date = Column(DateTime, nullable=False, default=utc_now)

    user = relationship("User", back_populates="food_items")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_food_items_quantity_positive"),
        Index("ix_food_items_user_expiry", "user_id", "expiry_date"),
    )
