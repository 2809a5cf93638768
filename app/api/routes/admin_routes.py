"""
Admin Routes (admin only)

GET /admin/students - List student accounts
DELETE /admin/students/{student_id} - Delete a student and all their data
GET /admin/students/{student_id}/profile - Student profile with account summary
GET /admin/students/{student_id}/analytics - Goals, skills and stats for a student
GET /admin/opportunities/{opportunity_id}/applications - Applications received
PUT /admin/applications/{application_id}/status - Update application status
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List, Optional

from app.db.database import get_db_session, execute_raw_sql, first_or_none
from app.core.auth import get_current_admin, USER_COLUMNS
from app.api.routes.goal_routes import list_user_goals
from app.api.routes.opportunity_routes import APPLICATION_COLUMNS
from app.api.routes.profile_routes import get_profile_row
from app.services.stats_service import get_latest_skill_levels, average_level
from app.schemas.schemas import (
    UserResponse, StudentAnalyticsResponse, StudentProfileResponse, ApplicantResponse,
    ApplicationStatusUpdate, ApplicationResponse, MessageResponse
)
from app.utils.logger import get_logger

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = get_logger(__name__)

# Child tables removed before the user row, in dependency order
STUDENT_OWNED_TABLES = [
    "opportunity_applications",
    "saved_opportunities",
    "progress_records",
    "academic_modules",
    "goals",
    "profiles",
]


def _get_student(student_id: int) -> dict:
    rows = execute_raw_sql(
        f"SELECT {USER_COLUMNS} FROM users WHERE id = :id AND role = 'student'", {"id": student_id}
    )
    if not rows:
        raise HTTPException(status_code=404, detail="Student not found")
    return rows[0]


def _get_profile(student_id: int) -> Optional[dict]:
    with get_db_session() as db:
        return get_profile_row(db, student_id)


@router.get("/students", response_model=List[UserResponse])
async def list_students(admin: dict = Depends(get_current_admin)):
    return execute_raw_sql(f"SELECT {USER_COLUMNS} FROM users WHERE role = 'student' ORDER BY id")


@router.delete("/students/{student_id}", response_model=MessageResponse)
async def delete_student(student_id: int, admin: dict = Depends(get_current_admin)):
    """Delete a student account and everything it owns in one transaction."""
    student = _get_student(student_id)

    with get_db_session() as db:
        for table in STUDENT_OWNED_TABLES:
            db.execute(text(f"DELETE FROM {table} WHERE user_id = :id"), {"id": student_id})
        db.execute(text("DELETE FROM users WHERE id = :id"), {"id": student_id})

    logger.info("Admin %s deleted student %s (id=%s)", admin["email"], student["email"], student_id)
    return MessageResponse(message="Student deleted successfully")


@router.get(
    "/students/{student_id}/profile",
    response_model=StudentProfileResponse,
    response_model_exclude_unset=True,
)
async def student_profile(student_id: int, admin: dict = Depends(get_current_admin)):
    """Profile fields merged with a summary of the account."""
    student = _get_student(student_id)
    profile = _get_profile(student_id) or {}
    return {
        **profile,
        "user": {
            "name": student["name"],
            "email": student["email"],
            "year_level": student["year_level"],
            "course": student["course"],
            "avatar_url": student["avatar_url"],
        },
    }


@router.get("/students/{student_id}/analytics", response_model=StudentAnalyticsResponse)
async def student_analytics(student_id: int, admin: dict = Depends(get_current_admin)):
    student = _get_student(student_id)
    profile = _get_profile(student_id)
    goals = list_user_goals(student_id)
    latest = get_latest_skill_levels(student_id)

    return StudentAnalyticsResponse(
        user=student,
        profile=profile,
        goals=goals,
        progress_records=latest,
        stats={
            "total_goals": len(goals),
            "completed_goals": sum(1 for g in goals if g["status"] == "completed"),
            "in_progress_goals": sum(1 for g in goals if g["status"] == "in-progress"),
            "total_skills": len(profile["skills"]) if profile else 0,
            "average_skill_level": average_level(latest),
        },
    )


@router.get("/opportunities/{opportunity_id}/applications", response_model=List[ApplicantResponse])
async def opportunity_applications(opportunity_id: int, admin: dict = Depends(get_current_admin)):
    columns = ", ".join(f"a.{c.strip()}" for c in APPLICATION_COLUMNS.split(","))
    return execute_raw_sql(
        f"""
            SELECT {columns}, u.name AS applicant_name, u.email AS applicant_email
            FROM opportunity_applications a
            JOIN users u ON a.user_id = u.id
            WHERE a.opportunity_id = :oid
            ORDER BY a.applied_at DESC, a.id DESC
        """,
        {"oid": opportunity_id}
    )


@router.put("/applications/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: int, update: ApplicationStatusUpdate, admin: dict = Depends(get_current_admin)
):
    with get_db_session() as db:
        result = db.execute(
            text("""
                UPDATE opportunity_applications SET status = :status, updated_at = CURRENT_TIMESTAMP
                WHERE id = :id
            """),
            {"id": application_id, "status": update.status.value}
        )
        if result.rowcount == 0:
            raise HTTPException(status_code=404, detail="Application not found")

        result = db.execute(
            text(f"SELECT {APPLICATION_COLUMNS} FROM opportunity_applications WHERE id = :id"),
            {"id": application_id}
        )
        return first_or_none(result)
