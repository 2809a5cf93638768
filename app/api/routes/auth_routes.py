"""
Authentication Routes

POST /auth/register - Register new student account (starts a session)
POST /auth/login - Login (starts a session)
POST /auth/logout - End the session
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, HTTPException, Depends, Request
from sqlalchemy import text

from app.db.database import get_db_session, first_or_none
from app.core.auth import (
    hash_password, verify_password, login_session, logout_session,
    get_current_user, USER_COLUMNS
)
from app.schemas.schemas import (
    RegisterRequest, LoginRequest, AuthResponse, MessageResponse, UserRole
)
from app.utils.logger import get_logger

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = get_logger(__name__)


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(data: RegisterRequest, request: Request):
    """
    Register a new account.

    Self-registration always creates a student; admins are provisioned
    through ADMIN_EMAIL / ADMIN_PASSWORD.
    """
    with get_db_session() as db:
        # Check email exists
        result = db.execute(
            text("SELECT id FROM users WHERE email = :email"),
            {"email": data.email}
        )
        if result.fetchone():
            raise HTTPException(status_code=400, detail="Email already registered")

        result = db.execute(
            text(f"""
                INSERT INTO users (email, password_hash, name, role, year_level, course)
                VALUES (:email, :password_hash, :name, :role, :year_level, :course)
                RETURNING {USER_COLUMNS}
            """),
            {
                "email": data.email,
                "password_hash": hash_password(data.password),
                "name": data.name,
                "role": UserRole.student.value,
                "year_level": data.year_level,
                "course": data.course or "Computer Engineering",
            }
        )
        user = first_or_none(result)

    login_session(request, user["id"])
    logger.info("Registered student %s (id=%s)", user["email"], user["id"])
    return AuthResponse(user=user)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, request: Request):
    """Check credentials and bind the session to the user."""
    with get_db_session() as db:
        result = db.execute(
            text(f"SELECT {USER_COLUMNS}, password_hash FROM users WHERE email = :email"),
            {"email": data.email}
        )
        user = first_or_none(result)

    if not user or not verify_password(data.password, user.pop("password_hash")):
        logger.info("Failed login for %s", data.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    login_session(request, user["id"])
    return AuthResponse(user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout(request: Request):
    logout_session(request)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=AuthResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return AuthResponse(user=user)
