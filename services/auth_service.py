"""
Authentication service: registration, login, logout and per-request
identity resolution on top of server-side sessions.

Request identity is either anonymous (no valid session) or authenticated;
every failure reaches the client as one generic message while the real
cause is logged with the request trace id.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Tuple, Union

from sqlalchemy.orm import Session

from adapters.password_hasher import PasswordHasher
from adapters.session_store import SessionStore, new_session_id
from app.exceptions import ConflictError, UnauthorizedError
from domain.mappers import UserMapper
from domain.models import utc_now
from domain.schemas.auth_schemas import LoginRequest, RegisterRequest, UserResponse
from repositories import UserRepository
from services.validation import validate_payload

logger = logging.getLogger("freshsave.auth")

INVALID_CREDENTIALS = "Invalid username or password"
NOT_AUTHENTICATED = "Not authenticated"

DEFAULT_SESSION_TTL = 24 * 60 * 60
REMEMBER_SESSION_TTL = 30 * 24 * 60 * 60


@dataclass(frozen=True)
class IssuedSession:
    """A freshly created session the HTTP layer turns into a cookie"""

    sid: str
    max_age: int
    expires_at: datetime


class AuthService:
    def __init__(
        self,
        session_store: SessionStore,
        hasher: PasswordHasher,
        session_ttl_seconds: int = DEFAULT_SESSION_TTL,
        remember_ttl_seconds: int = REMEMBER_SESSION_TTL,
    ):
        self.session_store = session_store
        self.hasher = hasher
        self.session_ttl_seconds = session_ttl_seconds
        self.remember_ttl_seconds = remember_ttl_seconds
        self._timing_hash: Optional[str] = None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def register(
        self,
        db: Session,
        data: Union[RegisterRequest, Mapping[str, Any]],
        previous_sid: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Tuple[UserResponse, IssuedSession]:
        """
        Create an account and log it in.

        Raises:
            ServiceValidationError: input breaks a field rule (no storage touched)
            ConflictError: username or email already taken
        """
        payload = validate_payload(RegisterRequest, data)
        users = UserRepository(db)

        if users.username_exists(payload.username):
            logger.info(
                "register_conflict field=username request_id=%s", request_id
            )
            raise ConflictError("Username already exists")
        if users.email_exists(payload.email):
            logger.info("register_conflict field=email request_id=%s", request_id)
            raise ConflictError("Email already exists")

        hashed = self.hasher.hash(payload.password)
        user = users.create_user(payload.username, payload.email, hashed)
        issued = self._establish_session(user.id, payload.remember_me, previous_sid)
        logger.info(
            "user_registered user_id=%s remember=%s request_id=%s",
            user.id,
            payload.remember_me,
            request_id,
        )
        return UserMapper.to_response(user), issued

    def login(
        self,
        db: Session,
        data: Union[LoginRequest, Mapping[str, Any]],
        previous_sid: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Tuple[UserResponse, IssuedSession]:
        """
        Verify credentials and issue a new session.

        Raises:
            UnauthorizedError: always with the same message, whatever the cause
        """
        payload = validate_payload(LoginRequest, data)
        user = UserRepository(db).get_by_username_with_credentials(payload.username)

        if user is None:
            # Burn comparable CPU time so unknown usernames are not faster
            self.hasher.verify(payload.password, self._get_timing_hash())
            logger.warning("login_failed reason=unknown_user request_id=%s", request_id)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not self.hasher.is_well_formed(user.hashed_password):
            logger.error(
                "login_failed reason=corrupt_credentials user_id=%s request_id=%s",
                user.id,
                request_id,
            )
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not self.hasher.verify(payload.password, user.hashed_password):
            logger.warning(
                "login_failed reason=bad_password user_id=%s request_id=%s",
                user.id,
                request_id,
            )
            raise UnauthorizedError(INVALID_CREDENTIALS)

        issued = self._establish_session(user.id, payload.remember_me, previous_sid)
        logger.info(
            "user_logged_in user_id=%s remember=%s request_id=%s",
            user.id,
            payload.remember_me,
            request_id,
        )
        return UserMapper.to_response(user), issued

    def logout(self, sid: Optional[str], request_id: Optional[str] = None) -> None:
        """Destroy the session if there is one. Safe to call repeatedly."""
        if sid:
            self.session_store.destroy(sid)
        logger.info("user_logged_out had_session=%s request_id=%s", bool(sid), request_id)

    def resolve_identity(
        self, db: Session, sid: Optional[str], request_id: Optional[str] = None
    ) -> Optional[UserResponse]:
        """
        Map a session id to the current (sanitized) user, or None.

        The user row is re-read on every call; a session pointing at a user
        that no longer exists is destroyed.
        """
        if not sid:
            return None

        data = self.session_store.get(sid)
        if data is None:
            logger.debug("identity_unresolved reason=no_session request_id=%s", request_id)
            return None

        user_id = data.payload.get("user_id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            logger.warning(
                "identity_unresolved reason=bad_payload request_id=%s", request_id
            )
            self.session_store.destroy(sid)
            return None

        user = UserRepository(db).get_by_id(user_id)
        if user is None:
            logger.warning(
                "identity_unresolved reason=user_missing user_id=%s request_id=%s",
                user_id,
                request_id,
            )
            self.session_store.destroy(sid)
            return None

        return UserMapper.to_response(user)

    @staticmethod
    def require_authenticated(
        identity: Optional[UserResponse], request_id: Optional[str] = None
    ) -> UserResponse:
        """Gate for protected operations"""
        if identity is None:
            logger.warning("access_denied reason=anonymous request_id=%s", request_id)
            raise UnauthorizedError(NOT_AUTHENTICATED)
        return identity

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def session_ttl(self, remember_me: bool) -> int:
        return self.remember_ttl_seconds if remember_me else self.session_ttl_seconds

    def _establish_session(
        self, user_id: int, remember_me: bool, previous_sid: Optional[str]
    ) -> IssuedSession:
        # Never reuse a session id across a login boundary
        if previous_sid:
            self.session_store.destroy(previous_sid)

        ttl = self.session_ttl(remember_me)
        expires_at = utc_now() + timedelta(seconds=ttl)
        sid = new_session_id()
        self.session_store.save(
            sid, {"user_id": user_id, "remember": bool(remember_me)}, expires_at
        )
        return IssuedSession(sid=sid, max_age=ttl, expires_at=expires_at)

    def _get_timing_hash(self) -> str:
        if self._timing_hash is None:
            self._timing_hash = self.hasher.hash(new_session_id())
        return self._timing_hash
