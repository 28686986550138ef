"""Authentication endpoints and utilities."""
from fastapi import APIRouter, Request, Response, HTTPException
from pydantic import BaseModel, Field
from typing import Optional
import logging
import secrets
import hashlib
from datetime import datetime, timedelta

from app.core.config import settings
from app.core.logging import mask_user_name

router = APIRouter()
logger = logging.getLogger(__name__)

# In-memory session storage (use Redis in production)
_sessions: dict[str, dict] = {}


class LoginRequest(BaseModel):
    """Login request model."""
    email: str = Field(min_length=1)
    password: str


class SessionInfo(BaseModel):
    """Session information response."""
    authenticated: bool
    user_name: Optional[str] = None
    expires_at: Optional[str] = None


def create_session_token() -> str:
    """Generate a secure session token."""
    return secrets.token_urlsafe(32)


def hash_password(password: str) -> str:
    """Hash password for comparison."""
    return hashlib.sha256(password.encode()).hexdigest()


def check_password(password: str) -> bool:
    """Compare a password against the configured login password."""
    return secrets.compare_digest(
        hash_password(password), hash_password(settings.login_password)
    )


def create_session(response: Response, user_name: str) -> str:
    """Create a new session for the user and set cookie."""
    session_token = create_session_token()
    ttl = timedelta(hours=settings.session_ttl_hours)
    expires_at = datetime.utcnow() + ttl

    _sessions[session_token] = {
        "authenticated": True,
        "user_name": user_name,
        "expires_at": expires_at,
        "created_at": datetime.utcnow()
    }

    # Set HTTP-only cookie
    response.set_cookie(
        key="session_token",
        value=session_token,
        httponly=True,
        max_age=int(ttl.total_seconds()),
        samesite="lax"
    )

    return session_token


def get_session_token(request: Request) -> Optional[str]:
    """Extract session token from cookie."""
    return request.cookies.get("session_token")


def verify_session(session_token: Optional[str]) -> bool:
    """Verify if session token is valid and not expired."""
    if not session_token:
        return False

    session = _sessions.get(session_token)
    if not session:
        return False

    # Check expiration
    if datetime.utcnow() > session["expires_at"]:
        del _sessions[session_token]
        return False

    return session.get("authenticated", False)


async def get_current_user_name(request: Request) -> str:
    """Dependency returning the signed-in user's name."""
    session_token = get_session_token(request)
    if not verify_session(session_token):
        raise HTTPException(status_code=401, detail="Authentication required")
    return _sessions[session_token]["user_name"]


@router.post("/api/auth/login")
async def login(login_req: LoginRequest, response: Response):
    """Login endpoint."""
    if not check_password(login_req.password):
        logger.warning(f"[AUTH] Failed login for: {mask_user_name(login_req.email.strip())}")
        raise HTTPException(status_code=401, detail="Invalid password")

    user_name = login_req.email.strip()
    session_token = create_session(response, user_name)
    logger.info(f"[AUTH] User logged in: {mask_user_name(user_name)}")

    return {
        "success": True,
        "message": "Login successful",
        "user_name": user_name,
        "expires_at": _sessions[session_token]["expires_at"].isoformat()
    }


@router.post("/api/auth/logout")
async def logout(request: Request, response: Response):
    """Logout endpoint."""
    session_token = get_session_token(request)
    if session_token and session_token in _sessions:
        del _sessions[session_token]

    # Clear cookie
    response.delete_cookie("session_token")

    return {"success": True, "message": "Logged out"}


@router.get("/api/auth/session")
async def get_session_info(request: Request) -> SessionInfo:
    """Get current session information."""
    session_token = get_session_token(request)

    if verify_session(session_token):
        session = _sessions[session_token]
        return SessionInfo(
            authenticated=True,
            user_name=session["user_name"],
            expires_at=session["expires_at"].isoformat()
        )

    return SessionInfo(authenticated=False)
