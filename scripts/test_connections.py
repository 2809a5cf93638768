#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the database connection and schema are working.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from sqlalchemy import inspect

from app.core.config import get_settings
from app.db.database import engine, test_database_connection
from app.db.schema import metadata


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREER PORTAL - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing database...")
    print(f"    URL: {engine.url.render_as_string(hide_password=True)}")
    if test_database_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")
        return

    print("\n[2] Checking tables...")
    existing = set(inspect(engine).get_table_names())
    for table in metadata.sorted_tables:
        mark = "✅" if table.name in existing else "❌"
        print(f"    {mark} {table.name}")

    print("\n[3] Bootstrap admin...")
    if settings.admin_email and settings.admin_password:
        print(f"    Configured: {settings.admin_email}")
    else:
        print("    ⚠️  ADMIN_EMAIL / ADMIN_PASSWORD not set (no admin will be created)")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
