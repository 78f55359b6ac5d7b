"""Input validation helpers shared by services and the HTTP error handlers"""

from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from app.exceptions import ServiceValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Location prefixes FastAPI adds that mean nothing to a client
_LOC_PREFIXES = {"body", "query", "path"}


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``[{"field", "message"}]``"""
    items = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in _LOC_PREFIXES]
        items.append(
            {
                "field": ".".join(loc) or "body",
                "message": str(err.get("msg", "Invalid value")),
            }
        )
    return items


def validate_payload(
    schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any]]
) -> SchemaT:
    """
    Return ``data`` as a validated ``schema`` instance.

    Raises:
        ServiceValidationError: with field-level details on any violation
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ServiceValidationError.from_field_errors(field_errors(exc.errors()))
