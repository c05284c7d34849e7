"""
Auth router - /auth/login, /auth/signup, /auth/google, /auth/logout, /auth/me endpoints.
"""
import logging

from fastapi import APIRouter, Depends, Header

from ..dependencies import AppState, bearer_token, current_user, get_state
from ..models.schemas import Credentials, LogoutResponse, SessionResponse, User
from ..services.auth import Session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _open(state: AppState, session: Session) -> SessionResponse:
    opened = state.sessions.open(session)
    return SessionResponse(token=opened.token, user=opened.user)


@router.post("/login", response_model=SessionResponse)
async def login(credentials: Credentials, state: AppState = Depends(get_state)):
    """Email/password login against the credential table."""
    logger.debug(f"Login attempt for {credentials.email}")
    return _open(state, state.auth.login(credentials.email, credentials.password))


@router.post("/signup", response_model=SessionResponse, status_code=201)
async def signup(credentials: Credentials, state: AppState = Depends(get_state)):
    """Create a student account and log it in."""
    logger.debug(f"Signup attempt for {credentials.email}")
    return _open(state, state.auth.signup(credentials.email, credentials.password))


@router.post("/google", response_model=SessionResponse)
async def login_with_google(state: AppState = Depends(get_state)):
    return _open(state, state.auth.login_with_google())


@router.post("/logout", response_model=LogoutResponse)
async def logout(authorization: str = Header(None), state: AppState = Depends(get_state)):
    """Close the caller's session. Safe to call when already logged out."""
    token = bearer_token(authorization)
    state.auth.logout(state.sessions.get(token))
    state.sessions.close(token)
    return LogoutResponse()


@router.get("/me", response_model=User)
async def me(user: User = Depends(current_user)):
    return user
