"""Registration, login, logout and current-user routes"""

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from api.dependencies import (
    clear_session_cookie,
    get_auth_service,
    get_db,
    get_request_id,
    get_session_id,
    get_settings,
    require_user,
    set_session_cookie,
)
from app.config import Settings
from domain.schemas.auth_schemas import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)
from services.auth_service import AuthService

router = APIRouter(tags=["Auth"])


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    payload: RegisterRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Create an account and start a session for it"""
    user, issued = auth.register(
        db,
        payload,
        previous_sid=get_session_id(request),
        request_id=get_request_id(request),
    )
    set_session_cookie(response, settings, issued)
    return user


@router.post("/login", response_model=UserResponse)
def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Verify credentials; rememberMe extends the session to 30 days"""
    user, issued = auth.login(
        db,
        payload,
        previous_sid=get_session_id(request),
        request_id=get_request_id(request),
    )
    set_session_cookie(response, settings, issued)
    return user


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """End the current session. Always succeeds."""
    auth.logout(get_session_id(request), request_id=get_request_id(request))
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out successfully")


@router.get("/user", response_model=UserResponse)
def current_user(user: UserResponse = Depends(require_user)):
    return user
