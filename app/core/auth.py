"""
Authentication Utility - password hashing and session-based access control.

Provides:
- Password hashing with bcrypt
- Session binding (signed cookie managed by SessionMiddleware)
- FastAPI dependencies for protected routes
"""

from typing import Optional
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import text

from app.core.config import get_settings
from app.db.database import get_db_session, first_or_none

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=get_settings().bcrypt_rounds
)

SESSION_USER_KEY = "user_id"

USER_COLUMNS = "id, email, name, role, year_level, course, avatar_url, created_at"


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def login_session(request: Request, user_id: int) -> None:
    request.session[SESSION_USER_KEY] = user_id


def logout_session(request: Request) -> None:
    request.session.clear()


def get_user_by_id(user_id: int) -> Optional[dict]:
    """Public user columns (never the password hash)."""
    with get_db_session() as db:
        result = db.execute(
            text(f"SELECT {USER_COLUMNS} FROM users WHERE id = :id"),
            {"id": user_id}
        )
        return first_or_none(result)


async def get_current_user(request: Request) -> dict:
    """
    FastAPI dependency - Get current authenticated user from the session.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    user = get_user_by_id(int(user_id))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    return user


async def get_current_admin(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require admin role."""
    if user["role"] != "admin":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
