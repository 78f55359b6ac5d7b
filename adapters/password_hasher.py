"""bcrypt adapter for password hashing and verification.
"""

import logging
from typing import Optional

import bcrypt

logger = logging.getLogger("freshsave.security")

DEFAULT_ROUNDS = 12
BCRYPT_HASH_LENGTH = 60
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class PasswordHasher:
    """
    Salted, deliberately slow one-way password hashing.

    ``hash`` produces a different string on every call (fresh salt), so
    hashes must be compared with ``verify``, never with ``==``.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash a plain password. Errors propagate; a weak hash is never returned."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def is_well_formed(hashed: Optional[str]) -> bool:
        """Cheap structural check of a stored hash (``$2b$12$`` + 53 chars)"""
        return (
            isinstance(hashed, str)
            and len(hashed) == BCRYPT_HASH_LENGTH
            and hashed.startswith(BCRYPT_PREFIXES)
        )

    def verify(self, plaintext: str, hashed: Optional[str]) -> bool:
        """
        Check a password against a stored hash in constant time.

        Returns False instead of raising for missing or malformed hashes.
        """
        if not hashed or not isinstance(hashed, str):
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, TypeError) as exc:
            logger.warning("password_verify_failed reason=%s", type(exc).__name__)
            return False
