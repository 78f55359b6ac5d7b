"""Shared schema configuration"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value an INTEGER column holds on every supported backend
MAX_INT = 2_147_483_647


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to stored naive datetimes for serialization"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
