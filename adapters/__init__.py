"""
Adapters package - Connections to external libraries and storage backends.
"""

from adapters.password_hasher import PasswordHasher
from adapters.session_store import (
    SessionData,
    SessionStore,
    InMemorySessionStore,
    SqlSessionStore,
    new_session_id,
)

__all__ = [
    "PasswordHasher",
    "SessionData",
    "SessionStore",
    "InMemorySessionStore",
    "SqlSessionStore",
    "new_session_id",
]
