import json
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
from typing import Iterable, Optional

from app.core.config import get_settings
from app.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # TestClient runs handlers on a worker thread
        return {"connect_args": {"check_same_thread": False}}
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}


engine = create_engine(
    settings.sqlalchemy_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    **_engine_options(settings.sqlalchemy_url)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Everything inside one block is a single transaction.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_database_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        return False


def execute_raw_sql(sql: str, params: dict = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    """
    with get_db_session() as db:
        result = db.execute(text(sql), params or {})
        return rows_to_dicts(result)


def rows_to_dicts(result) -> list:
    columns = list(result.keys())
    return [dict(zip(columns, row)) for row in result.fetchall()]


def first_or_none(result) -> Optional[dict]:
    """First row of a result as a dict, or None."""
    rows = rows_to_dicts(result)
    return rows[0] if rows else None


# ============================================================
# JSON list columns
# ============================================================

def dump_list(values: Optional[Iterable[str]]) -> str:
    return json.dumps(list(values or []))


def load_list(raw) -> list:
    """Decode a JSON list column. Tolerates NULL and already-decoded values."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    return json.loads(raw)


def decode_lists(row: Optional[dict], *fields: str) -> Optional[dict]:
    """Decode the named JSON list columns of a row dict in place."""
    if row is None:
        return None
    for field in fields:
        if field in row:
            row[field] = load_list(row[field])
    return row


def build_update(data: dict, json_fields: Iterable[str] = ()) -> tuple:
    """
    Build the SET clause and params for a partial UPDATE.

    Only keys present in `data` are written. Returns (clause, params);
    clause is empty when there is nothing to update.
    """
    json_fields = set(json_fields)
    updates = []
    params = {}
    for field, value in data.items():
        updates.append(f"{field} = :{field}")
        params[field] = dump_list(value) if field in json_fields else value
    return ", ".join(updates), params
