"""
Career Routes

GET /careers - List careers
GET /careers/recommended - Top 3 careers for the current student
GET /careers/{career_id} - Career details
POST /careers - Create career (admin only)
PUT|PATCH /careers/{career_id} - Update career (admin only)
DELETE /careers/{career_id} - Delete career (admin only)
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import (
    get_db_session, execute_raw_sql, first_or_none, decode_lists, dump_list, build_update
)
from app.core.auth import get_current_user, get_current_admin
from app.services.recommendation_service import rank_careers
from app.schemas.schemas import CareerCreate, CareerUpdate, CareerResponse, MessageResponse

router = APIRouter(prefix="/careers", tags=["Careers"])

CAREER_COLUMNS = "id, title, description, industry, required_skills, salary_range, growth_outlook, created_at"


def _list_careers() -> List[dict]:
    rows = execute_raw_sql(f"SELECT {CAREER_COLUMNS} FROM careers ORDER BY created_at DESC, id DESC")
    return [decode_lists(r, "required_skills") for r in rows]


@router.get("", response_model=List[CareerResponse])
async def list_careers():
    return _list_careers()


@router.get("/recommended", response_model=List[CareerResponse])
async def recommended_careers(user: dict = Depends(get_current_user)):
    """Top 3 careers ranked by overlap with the student's profile skills."""
    profile = execute_raw_sql("SELECT skills FROM profiles WHERE user_id = :uid", {"uid": user["id"]})
    skills = decode_lists(profile[0], "skills")["skills"] if profile else []
    return rank_careers(_list_careers(), skills, limit=3)


@router.get("/{career_id}", response_model=CareerResponse)
async def get_career(career_id: int):
    rows = execute_raw_sql(f"SELECT {CAREER_COLUMNS} FROM careers WHERE id = :id", {"id": career_id})
    if not rows:
        raise HTTPException(status_code=404, detail="Career not found")
    return decode_lists(rows[0], "required_skills")


@router.post("", response_model=CareerResponse, status_code=201)
async def create_career(career: CareerCreate, admin: dict = Depends(get_current_admin)):
    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO careers (title, description, industry, required_skills, salary_range, growth_outlook)
                VALUES (:title, :description, :industry, :required_skills, :salary_range, :growth_outlook)
                RETURNING {CAREER_COLUMNS}
            """),
            {
                "title": career.title, "description": career.description, "industry": career.industry,
                "required_skills": dump_list(career.required_skills),
                "salary_range": career.salary_range, "growth_outlook": career.growth_outlook,
            }
        )
        row = first_or_none(result)
    return decode_lists(row, "required_skills")


@router.api_route("/{career_id}", methods=["PUT", "PATCH"], response_model=CareerResponse)
async def update_career(career_id: int, update: CareerUpdate, admin: dict = Depends(get_current_admin)):
    """Update a career. Only the fields sent are changed."""
    clause, params = build_update(update.model_dump(mode="json", exclude_unset=True), ["required_skills"])
    params["id"] = career_id

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE careers SET {clause} WHERE id = :id"), params)
        result = db.execute(text(f"SELECT {CAREER_COLUMNS} FROM careers WHERE id = :id"), {"id": career_id})
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Career not found")
    return decode_lists(row, "required_skills")


@router.delete("/{career_id}", response_model=MessageResponse)
async def delete_career(career_id: int, admin: dict = Depends(get_current_admin)):
    with get_db_session() as db:
        db.execute(text("DELETE FROM careers WHERE id = :id"), {"id": career_id})
    return MessageResponse(message="Career deleted")
