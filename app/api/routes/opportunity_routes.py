"""
Opportunity Routes

GET /opportunities - List active opportunities with filters
GET /opportunities/latest - Three newest active opportunities
GET /opportunities/saved - Current user's saved opportunities
GET /opportunities/{opportunity_id} - Opportunity details
POST /opportunities - Create opportunity (admin only)
PUT|PATCH /opportunities/{opportunity_id} - Update opportunity (admin only)
DELETE /opportunities/{opportunity_id} - Delete opportunity (admin only)
POST /opportunities/{opportunity_id}/save - Bookmark
DELETE /opportunities/{opportunity_id}/save - Remove bookmark
POST /opportunities/{opportunity_id}/apply - Apply (once per user)

Fixed paths (/latest, /saved) are declared before /{opportunity_id}.
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy import text
from typing import List, Optional

from app.db.database import (
    get_db_session, execute_raw_sql, first_or_none, decode_lists, dump_list, build_update
)
from app.core.auth import get_current_user, get_current_admin
from app.schemas.schemas import (
    OpportunityCreate, OpportunityUpdate, OpportunityResponse, OpportunityType,
    SavedOpportunityResponse, ApplicationCreate, ApplicationResponse, MessageResponse
)

router = APIRouter(prefix="/opportunities", tags=["Opportunities"])

OPPORTUNITY_COLUMNS = (
    "id, title, company, description, type, location, industry, application_url, "
    "deadline, required_skills, is_active, created_at"
)
APPLICATION_COLUMNS = (
    "id, user_id, opportunity_id, profile_picture_url, resume_url, cover_letter, "
    "status, applied_at, updated_at"
)


def _opportunity_exists(db, opportunity_id: int) -> bool:
    result = db.execute(text("SELECT id FROM opportunities WHERE id = :id"), {"id": opportunity_id})
    return result.fetchone() is not None


@router.get("", response_model=List[OpportunityResponse])
async def list_opportunities(
    search: Optional[str] = Query(None, description="Search in title, company and description"),
    type: Optional[OpportunityType] = Query(None),
    location: Optional[str] = Query(None),
):
    """List active opportunities, newest first."""
    sql = f"SELECT {OPPORTUNITY_COLUMNS} FROM opportunities WHERE is_active = :active"
    params = {"active": True}

    if search:
        sql += (
            " AND (LOWER(title) LIKE :search OR LOWER(company) LIKE :search"
            " OR LOWER(description) LIKE :search)"
        )
        params["search"] = f"%{search.lower()}%"
    if type:
        sql += " AND type = :type"
        params["type"] = type.value
    if location:
        sql += " AND location = :location"
        params["location"] = location

    sql += " ORDER BY created_at DESC, id DESC"
    return [decode_lists(r, "required_skills") for r in execute_raw_sql(sql, params)]


@router.get("/latest", response_model=List[OpportunityResponse])
async def latest_opportunities():
    rows = execute_raw_sql(
        f"SELECT {OPPORTUNITY_COLUMNS} FROM opportunities WHERE is_active = :active "
        "ORDER BY created_at DESC, id DESC LIMIT 3",
        {"active": True}
    )
    return [decode_lists(r, "required_skills") for r in rows]


@router.get("/saved", response_model=List[OpportunityResponse])
async def saved_opportunities(user: dict = Depends(get_current_user)):
    """Opportunities the current user has bookmarked."""
    columns = ", ".join(f"o.{c.strip()}" for c in OPPORTUNITY_COLUMNS.split(","))
    rows = execute_raw_sql(
        f"""
            SELECT {columns} FROM saved_opportunities s
            JOIN opportunities o ON s.opportunity_id = o.id
            WHERE s.user_id = :uid ORDER BY s.saved_at DESC, s.id DESC
        """,
        {"uid": user["id"]}
    )
    return [decode_lists(r, "required_skills") for r in rows]


@router.get("/{opportunity_id}", response_model=OpportunityResponse)
async def get_opportunity(opportunity_id: int):
    rows = execute_raw_sql(
        f"SELECT {OPPORTUNITY_COLUMNS} FROM opportunities WHERE id = :id", {"id": opportunity_id}
    )
    if not rows:
        raise HTTPException(status_code=404, detail="Opportunity not found")
    return decode_lists(rows[0], "required_skills")


@router.post("", response_model=OpportunityResponse, status_code=201)
async def create_opportunity(opportunity: OpportunityCreate, admin: dict = Depends(get_current_admin)):
    params = opportunity.model_dump(mode="json")
    params["required_skills"] = dump_list(opportunity.required_skills)

    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO opportunities (title, company, description, type, location, industry,
                    application_url, deadline, required_skills, is_active)
                VALUES (:title, :company, :description, :type, :location, :industry,
                    :application_url, :deadline, :required_skills, :is_active)
                RETURNING {OPPORTUNITY_COLUMNS}
            """),
            params
        )
        row = first_or_none(result)
    return decode_lists(row, "required_skills")


@router.api_route("/{opportunity_id}", methods=["PUT", "PATCH"], response_model=OpportunityResponse)
async def update_opportunity(
    opportunity_id: int, update: OpportunityUpdate, admin: dict = Depends(get_current_admin)
):
    """Update an opportunity. Only the fields sent are changed."""
    clause, params = build_update(update.model_dump(mode="json", exclude_unset=True), ["required_skills"])
    params["id"] = opportunity_id

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE opportunities SET {clause} WHERE id = :id"), params)
        result = db.execute(
            text(f"SELECT {OPPORTUNITY_COLUMNS} FROM opportunities WHERE id = :id"), {"id": opportunity_id}
        )
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Opportunity not found")
    return decode_lists(row, "required_skills")


@router.delete("/{opportunity_id}", response_model=MessageResponse)
async def delete_opportunity(opportunity_id: int, admin: dict = Depends(get_current_admin)):
    """Delete an opportunity along with its bookmarks and applications."""
    with get_db_session() as db:
        params = {"id": opportunity_id}
        db.execute(text("DELETE FROM opportunity_applications WHERE opportunity_id = :id"), params)
        db.execute(text("DELETE FROM saved_opportunities WHERE opportunity_id = :id"), params)
        db.execute(text("DELETE FROM opportunities WHERE id = :id"), params)
    return MessageResponse(message="Opportunity deleted")


@router.post("/{opportunity_id}/save", response_model=SavedOpportunityResponse)
async def save_opportunity(opportunity_id: int, user: dict = Depends(get_current_user)):
    """Bookmark an opportunity. Cannot save the same one twice."""
    with get_db_session() as db:
        if not _opportunity_exists(db, opportunity_id):
            raise HTTPException(status_code=404, detail="Opportunity not found")

        result = db.execute(
            text("SELECT id FROM saved_opportunities WHERE user_id = :uid AND opportunity_id = :oid"),
            {"uid": user["id"], "oid": opportunity_id}
        )
        if result.fetchone():
            raise HTTPException(status_code=400, detail="Already saved")

        result = db.execute(
            text("""
                INSERT INTO saved_opportunities (user_id, opportunity_id)
                VALUES (:uid, :oid)
                RETURNING id, user_id, opportunity_id, saved_at
            """),
            {"uid": user["id"], "oid": opportunity_id}
        )
        return first_or_none(result)


@router.delete("/{opportunity_id}/save", response_model=MessageResponse)
async def unsave_opportunity(opportunity_id: int, user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        db.execute(
            text("DELETE FROM saved_opportunities WHERE user_id = :uid AND opportunity_id = :oid"),
            {"uid": user["id"], "oid": opportunity_id}
        )
    return MessageResponse(message="Removed from saved")


@router.post("/{opportunity_id}/apply", response_model=ApplicationResponse, status_code=201)
async def apply_to_opportunity(
    opportunity_id: int, application: ApplicationCreate, user: dict = Depends(get_current_user)
):
    """Apply to an opportunity. Cannot apply twice to the same one."""
    with get_db_session() as db:
        if not _opportunity_exists(db, opportunity_id):
            raise HTTPException(status_code=404, detail="Opportunity not found")

        # Check not already applied
        result = db.execute(
            text("SELECT id FROM opportunity_applications WHERE user_id = :uid AND opportunity_id = :oid"),
            {"uid": user["id"], "oid": opportunity_id}
        )
        if result.fetchone():
            raise HTTPException(status_code=400, detail="You have already applied to this opportunity")

        result = db.execute(
            text(f"""
                INSERT INTO opportunity_applications
                    (user_id, opportunity_id, profile_picture_url, resume_url, cover_letter, status)
                VALUES (:uid, :oid, :profile_picture_url, :resume_url, :cover_letter, 'pending')
                RETURNING {APPLICATION_COLUMNS}
            """),
            {
                "uid": user["id"], "oid": opportunity_id,
                "profile_picture_url": application.profile_picture_url,
                "resume_url": application.resume_url,
                "cover_letter": application.cover_letter,
            }
        )
        return first_or_none(result)
