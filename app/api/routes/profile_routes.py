"""
Profile & Progress Routes

GET /profile - Get own profile ({} if none yet)
POST /profile - Create or update own profile
GET /progress/skills - Current level per skill
POST /progress/skills/{skill_name} - Record a new level for a skill
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from typing import List, Union

from app.db.database import get_db_session, first_or_none, decode_lists, dump_list, build_update
from app.core.auth import get_current_user
from app.services.stats_service import get_latest_skill_levels
from app.schemas.schemas import (
    ProfileUpsert, ProfileResponse, SkillLevelUpdate, SkillLevelResponse, SuccessResponse
)

router = APIRouter(tags=["Profile"])

PROFILE_COLUMNS = (
    "id, user_id, bio, phone, gpa, skills, interests, career_goals, "
    "linkedin_url, github_url, portfolio_url, updated_at"
)
PROFILE_LISTS = ("skills", "interests")

# Level given to a skill the first time it appears on a profile
INITIAL_SKILL_LEVEL = 25


def get_profile_row(db, user_id: int):
    result = db.execute(
        text(f"SELECT {PROFILE_COLUMNS} FROM profiles WHERE user_id = :uid"), {"uid": user_id}
    )
    return decode_lists(first_or_none(result), *PROFILE_LISTS)


@router.get("/profile", response_model=Union[ProfileResponse, dict])
async def get_profile(user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        profile = get_profile_row(db, user["id"])
    return profile or {}


@router.post("/profile", response_model=ProfileResponse)
async def upsert_profile(data: ProfileUpsert, user: dict = Depends(get_current_user)):
    """
    Create or update the current user's profile.

    - `name` updates the account name, not the profile row.
    - Each skill not already on the profile gets an initial progress record.
    """
    fields = data.model_dump(exclude_unset=True)
    name = fields.pop("name", None)

    with get_db_session() as db:
        if name:
            db.execute(text("UPDATE users SET name = :name WHERE id = :uid"), {"name": name, "uid": user["id"]})

        existing = get_profile_row(db, user["id"])
        previous_skills = existing["skills"] if existing else []

        if existing:
            clause, params = build_update(fields, PROFILE_LISTS)
            params["uid"] = user["id"]
            sets = f"{clause}, updated_at = CURRENT_TIMESTAMP" if clause else "updated_at = CURRENT_TIMESTAMP"
            db.execute(text(f"UPDATE profiles SET {sets} WHERE user_id = :uid"), params)
        else:
            params = {column: fields.get(column) for column in (
                "bio", "phone", "gpa", "career_goals", "linkedin_url", "github_url", "portfolio_url"
            )}
            params.update({
                "uid": user["id"],
                "skills": dump_list(fields.get("skills")),
                "interests": dump_list(fields.get("interests")),
            })
            db.execute(
                text("""
                    INSERT INTO profiles (user_id, bio, phone, gpa, skills, interests, career_goals,
                        linkedin_url, github_url, portfolio_url)
                    VALUES (:uid, :bio, :phone, :gpa, :skills, :interests, :career_goals,
                        :linkedin_url, :github_url, :portfolio_url)
                """),
                params
            )

        for skill in fields.get("skills") or []:
            if skill not in previous_skills:
                db.execute(
                    text("INSERT INTO progress_records (user_id, skill_name, level) VALUES (:uid, :skill, :level)"),
                    {"uid": user["id"], "skill": skill, "level": INITIAL_SKILL_LEVEL}
                )

        return get_profile_row(db, user["id"])


@router.get("/progress/skills", response_model=List[SkillLevelResponse])
async def skill_progress(user: dict = Depends(get_current_user)):
    """Latest recorded level for each skill."""
    return [
        SkillLevelResponse(skill_name=r["skill_name"], level=r["level"])
        for r in get_latest_skill_levels(user["id"])
    ]


@router.post("/progress/skills/{skill_name}", response_model=SuccessResponse)
async def record_skill_level(skill_name: str, data: SkillLevelUpdate, user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        db.execute(
            text("INSERT INTO progress_records (user_id, skill_name, level) VALUES (:uid, :skill, :level)"),
            {"uid": user["id"], "skill": skill_name, "level": data.level}
        )
    return SuccessResponse()
