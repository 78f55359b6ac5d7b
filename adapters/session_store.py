"""Server-side session storage.

Two interchangeable backends: a process-local dict for tests and
development, and the ``user_sessions`` table for production.
"""

import logging
import secrets
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.orm import sessionmaker

from domain.models import UserSession, utc_now

logger = logging.getLogger("freshsave.sessions")

SESSION_ID_BYTES = 32


def new_session_id() -> str:
    """Opaque, unguessable session id for the cookie"""
    return secrets.token_urlsafe(SESSION_ID_BYTES)


@dataclass(frozen=True)
class SessionData:
    sid: str
    payload: Dict[str, Any]
    expires_at: datetime


class SessionStore(ABC):
    """Session state keyed by session id; expired sessions are never returned."""

    @abstractmethod
    def get(self, sid: str) -> Optional[SessionData]:
        ...

    @abstractmethod
    def save(self, sid: str, payload: Dict[str, Any], expires_at: datetime) -> None:
        ...

    @abstractmethod
    def destroy(self, sid: str) -> None:
        """Remove a session. Unknown ids are ignored."""

    @abstractmethod
    def prune_expired(self) -> int:
        """Delete every expired session, returning how many were removed"""


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def get(self, sid: str) -> Optional[SessionData]:
        with self._lock:
            data = self._sessions.get(sid)
            if data is None:
                return None
            if data.expires_at <= utc_now():
                del self._sessions[sid]
                return None
            return data

    def save(self, sid: str, payload: Dict[str, Any], expires_at: datetime) -> None:
        with self._lock:
            self._sessions[sid] = SessionData(sid, dict(payload), expires_at)

    def destroy(self, sid: str) -> None:
        with self._lock:
            self._sessions.pop(sid, None)

    def prune_expired(self) -> int:
        now = utc_now()
        with self._lock:
            expired = [sid for sid, d in self._sessions.items() if d.expires_at <= now]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class SqlSessionStore(SessionStore):
    """Sessions persisted in the ``user_sessions`` table.

    Each call uses its own short-lived SQLAlchemy session, so the store is
    safe to share between concurrent requests.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, sid: str) -> Optional[SessionData]:
        with self.session_factory() as db:
            row = db.get(UserSession, sid)
            if row is None:
                return None
            if row.expire <= utc_now():
                db.delete(row)
                db.commit()
                return None
            return SessionData(row.sid, dict(row.sess or {}), row.expire)

    def save(self, sid: str, payload: Dict[str, Any], expires_at: datetime) -> None:
        with self.session_factory() as db:
            db.merge(UserSession(sid=sid, sess=dict(payload), expire=expires_at))
            db.commit()

    def destroy(self, sid: str) -> None:
        with self.session_factory() as db:
            db.query(UserSession).filter(UserSession.sid == sid).delete()
            db.commit()

    def prune_expired(self) -> int:
        with self.session_factory() as db:
            count = (
                db.query(UserSession).filter(UserSession.expire <= utc_now()).delete()
            )
            db.commit()
        if count:
            logger.info("sessions_pruned count=%d", count)
        return count
