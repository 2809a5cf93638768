"""
Relational schema - table definitions for the career portal.

Tables are declared with SQLAlchemy Core so the same DDL works on
PostgreSQL (production) and SQLite (tests). Route handlers do not use
these objects for queries; they run plain SQL through `text()`.

List-valued columns (skills, interests, required_skills) hold JSON text.
Uniqueness of (user_id, opportunity_id) in saved_opportunities and
opportunity_applications is checked by the handlers, not by a constraint.
"""

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, Text, Boolean, Float,
    DateTime, ForeignKey, func, true
)

metadata = MetaData()


def _created_at(name: str = "created_at") -> Column:
    return Column(name, DateTime, nullable=False, server_default=func.current_timestamp())


users = Table(
    "users", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(200), nullable=False),
    Column("role", String(20), nullable=False, server_default="student"),
    Column("year_level", Integer),
    Column("course", String(200)),
    Column("avatar_url", Text),
    _created_at(),
)

careers = Table(
    "careers", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("description", Text),
    Column("industry", String(200)),
    Column("required_skills", Text, nullable=False, server_default="[]"),
    Column("salary_range", String(100)),
    Column("growth_outlook", String(100)),
    _created_at(),
)

opportunities = Table(
    "opportunities", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("company", String(200), nullable=False),
    Column("description", Text),
    Column("type", String(20), nullable=False, server_default="internship"),
    Column("location", String(200)),
    Column("industry", String(200)),
    Column("application_url", Text),
    Column("deadline", DateTime),
    Column("required_skills", Text, nullable=False, server_default="[]"),
    Column("is_active", Boolean, nullable=False, server_default=true()),
    _created_at(),
)

saved_opportunities = Table(
    "saved_opportunities", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("opportunity_id", Integer, ForeignKey("opportunities.id"), nullable=False),
    _created_at("saved_at"),
)

opportunity_applications = Table(
    "opportunity_applications", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("opportunity_id", Integer, ForeignKey("opportunities.id"), nullable=False, index=True),
    Column("profile_picture_url", Text),
    Column("resume_url", Text),
    Column("cover_letter", Text),
    Column("status", String(20), nullable=False, server_default="pending"),
    _created_at("applied_at"),
    _created_at("updated_at"),
)

goals = Table(
    "goals", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("title", String(200), nullable=False),
    Column("description", Text),
    Column("category", String(100)),
    Column("status", String(20), nullable=False, server_default="not-started"),
    Column("progress", Integer, nullable=False, server_default="0"),
    Column("target_date", DateTime),
    _created_at(),
)

resources = Table(
    "resources", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("description", Text),
    Column("category", String(100)),
    Column("type", String(50)),
    Column("url", Text),
    Column("download_count", Integer, nullable=False, server_default="0"),
    _created_at(),
)

training_programs = Table(
    "training_programs", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("provider", String(200)),
    Column("description", Text),
    Column("duration", String(100)),
    Column("format", String(50)),
    Column("url", Text),
    Column("skills", Text, nullable=False, server_default="[]"),
    Column("is_active", Boolean, nullable=False, server_default=true()),
    Column("start_date", DateTime),
    _created_at(),
)

profiles = Table(
    "profiles", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, unique=True),
    Column("bio", Text),
    Column("phone", String(50)),
    Column("gpa", Float),
    Column("skills", Text, nullable=False, server_default="[]"),
    Column("interests", Text, nullable=False, server_default="[]"),
    Column("career_goals", Text),
    Column("linkedin_url", Text),
    Column("github_url", Text),
    Column("portfolio_url", Text),
    _created_at("updated_at"),
)

progress_records = Table(
    "progress_records", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("skill_name", String(200), nullable=False),
    Column("level", Integer, nullable=False),
    _created_at("recorded_at"),
)

academic_modules = Table(
    "academic_modules", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False, index=True),
    Column("code", String(50)),
    Column("name", String(200), nullable=False),
    Column("semester", String(50)),
    Column("year_level", Integer),
    Column("credits", Float),
    Column("grade", String(20)),
    Column("status", String(20), nullable=False, server_default="in-progress"),
)


def create_tables(engine) -> None:
    """Create any missing tables."""
    metadata.create_all(engine)


def drop_tables(engine) -> None:
    metadata.drop_all(engine)
