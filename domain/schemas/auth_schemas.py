import re

from pydantic import EmailStr, Field, field_validator

from domain.schemas.base import CamelModel

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

_PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "one lowercase letter"),
    (re.compile(r"[A-Z]"), "one uppercase letter"),
    (re.compile(r"[0-9]"), "one digit"),
    (re.compile(r"[^A-Za-z0-9]"), "one symbol"),
)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr
    password: str = Field(..., min_length=8)
    remember_me: bool = False

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        missing = [label for pattern, label in _PASSWORD_RULES if not pattern.search(v)]
        if missing:
            raise ValueError("must contain at least " + ", ".join(missing))
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    remember_me: bool = False


class UserResponse(CamelModel):
    """Sanitized user: never carries the password hash"""

    id: int
    username: str
    email: str


class MessageResponse(CamelModel):
    message: str
