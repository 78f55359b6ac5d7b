"""
Persisted server-side session state.
"""

from sqlalchemy import JSON, Column, DateTime, String

from domain.models.database import Base


class UserSession(Base):
    """Serialized session payload keyed by the opaque cookie value"""

    __tablename__ = "user_sessions"

    sid = Column(String(128), primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False, index=True)
