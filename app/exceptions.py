from typing import Any, List, Mapping, Optional, Sequence, Union

Details = Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]


class AppError(Exception):
    """Base class for errors that carry a client-safe message.

    Attributes:
        message: human-readable message, safe to return to the caller
        details: optional extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"
    default_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Details] = None,
        code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid, before any storage access.

    ``details`` is a list of ``{"field": ..., "message": ...}`` entries.
    """

    http_status = 400
    default_message = "Invalid input"
    default_code = "VALIDATION_ERROR"

    @classmethod
    def from_field_errors(cls, errors: List[Mapping[str, str]]) -> "ServiceValidationError":
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
        return cls(f"Validation failed: {summary}", details=list(errors))


class ConflictError(AppError):
    """Raised when a uniqueness constraint would be violated (username, email).

    The public contract reports conflicts with status 400.
    """

    http_status = 400
    default_message = "Conflict"
    default_code = "CONFLICT"


class UnauthorizedError(AppError):
    """Raised for any authentication failure.

    The message is always generic; the real cause is only logged server-side.
    """

    http_status = 401
    default_message = "Not authenticated"
    default_code = "UNAUTHORIZED"


class NotFoundError(AppError):
    """Raised when a resource does not exist or is not owned by the caller."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"
