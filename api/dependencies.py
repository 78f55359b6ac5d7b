"""
API dependencies for dependency injection.

Everything is read from ``app.state``, which the application factory fills
once at startup.
"""

from typing import Generator, Optional

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from app.config import Settings
from domain.schemas.auth_schemas import UserResponse
from services.auth_service import AuthService, IssuedSession


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.get_db_session()


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def get_session_id(request: Request) -> Optional[str]:
    return request.cookies.get(request.app.state.settings.session_cookie_name)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
) -> Optional[UserResponse]:
    """Resolve the session cookie to a user (None when anonymous)"""
    identity = auth.resolve_identity(
        db, get_session_id(request), request_id=get_request_id(request)
    )
    request.state.user = identity
    return identity


def require_user(
    request: Request,
    identity: Optional[UserResponse] = Depends(get_current_user),
) -> UserResponse:
    """Gate for protected routes: 401 before any route logic runs"""
    return AuthService.require_authenticated(
        identity, request_id=get_request_id(request)
    )


def set_session_cookie(
    response: Response, settings: Settings, issued: IssuedSession
) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=issued.sid,
        max_age=issued.max_age,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
    )
