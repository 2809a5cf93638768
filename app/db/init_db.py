"""
Creates the schema if it does not exist and provisions the bootstrap admin.
Run this module directly to initialize a fresh database:
    python -m app.db.init_db
"""

from sqlalchemy import text

from app.core.auth import hash_password
from app.core.config import get_settings
from app.db.database import engine, get_db_session
from app.db.schema import create_tables
from app.utils.logger import get_logger

logger = get_logger(__name__)


def ensure_admin(email: str, password: str, name: str) -> bool:
    """Create an admin account unless the email is taken. Returns True if created."""
    with get_db_session() as db:
        result = db.execute(text("SELECT id FROM users WHERE email = :email"), {"email": email})
        if result.fetchone():
            return False
        db.execute(
            text("""
                INSERT INTO users (email, password_hash, name, role)
                VALUES (:email, :password_hash, :name, 'admin')
            """),
            {"email": email, "password_hash": hash_password(password), "name": name}
        )
    logger.info("Created admin account %s", email)
    return True


def init_db() -> None:
    settings = get_settings()
    create_tables(engine)
    logger.info("Database schema ready")

    if settings.admin_email and settings.admin_password:
        ensure_admin(settings.admin_email, settings.admin_password, settings.admin_name)


if __name__ == "__main__":
    init_db()
