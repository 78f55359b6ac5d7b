from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, field_serializer, field_validator

from domain.enums import FoodCategory, FoodUnit
from domain.models.database import to_storage_datetime
from domain.schemas.base import MAX_INT, CamelModel, as_utc

# Fields a client may set; everything else (id, owner, added date) is server-side
MUTABLE_FIELDS = ("name", "category", "quantity", "unit", "expiry_date", "favorite")


def storage_expiry(value: datetime) -> datetime:
    """Naive UTC expiry; offsets that push past datetime.max are invalid"""
    try:
        return to_storage_datetime(value)
    except OverflowError as exc:
        raise ValueError("date out of range") from exc


class FoodItemCreate(CamelModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=200)
    category: FoodCategory
    quantity: int = Field(..., ge=1, le=MAX_INT)
    unit: FoodUnit
    expiry_date: datetime
    favorite: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("expiry_date")
    @classmethod
    def normalize_expiry(cls, v: datetime) -> datetime:
        return storage_expiry(v)


class FoodItemUpdate(CamelModel):
    """Partial update restricted to MUTABLE_FIELDS"""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[FoodCategory] = None
    quantity: Optional[int] = Field(None, ge=1, le=MAX_INT)
    unit: Optional[FoodUnit] = None
    expiry_date: Optional[datetime] = None
    favorite: Optional[bool] = None

    @field_validator(*MUTABLE_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("expiry_date")
    @classmethod
    def normalize_expiry(cls, v: datetime) -> datetime:
        return storage_expiry(v)

    def changes(self) -> Dict[str, Any]:
        """Only the fields the caller actually sent, keyed by column name"""
        return self.model_dump(exclude_unset=True)


class FoodItemResponse(CamelModel):
    id: int
    user_id: int
    name: str
    category: FoodCategory
    quantity: int
    unit: FoodUnit
    expiry_date: datetime
    favorite: bool
    added_date: datetime

    @field_serializer("expiry_date", "added_date")
    def serialize_utc(self, value: datetime) -> str:
        return as_utc(value).isoformat()
