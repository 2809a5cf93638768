"""
Career Services Portal - Main Application

FastAPI backend with:
- Relational database (PostgreSQL in production) accessed through SQLAlchemy
- Cookie sessions for authentication (student / admin roles)
- JSON REST API under /api consumed by the React client

Run: uvicorn app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.db.database import test_database_connection
from app.db.init_db import init_db
from app.schemas.schemas import HealthResponse
from app.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Career Services Portal",
    description="""
    Student career-services backend.

    ## Features
    - **Authentication**: cookie sessions, student self-registration, admin role
    - **Opportunities**: jobs and internships, bookmarks, one application per student
    - **Planning**: goals, academic modules, skill progress tracking
    - **Content**: careers, resources, training programs
    - **Admin**: student management and analytics
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (credentials needed for the session cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create tables and the bootstrap admin on startup."""
    init_db()
    logger.info("Career Services Portal started")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    connected = test_database_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        database="connected" if connected else "disconnected",
    )
