"""
Database module - engine, session helpers and table definitions.
"""
from app.db.database import get_db_session, execute_raw_sql, test_database_connection
from app.db.schema import metadata, create_tables

__all__ = [
    "get_db_session",
    "execute_raw_sql",
    "test_database_connection",
    "metadata",
    "create_tables",
]
