"""
Goal Routes (scoped to the current user)

GET /goals - List own goals, newest first
GET /goals/recent - Three newest goals
POST /goals - Create goal
PUT /goals/{goal_id} - Update own goal
DELETE /goals/{goal_id} - Delete own goal
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import get_db_session, execute_raw_sql, first_or_none, build_update
from app.core.auth import get_current_user
from app.schemas.schemas import GoalCreate, GoalUpdate, GoalResponse, MessageResponse

router = APIRouter(prefix="/goals", tags=["Goals"])

GOAL_COLUMNS = "id, user_id, title, description, category, status, progress, target_date, created_at"


def list_user_goals(user_id: int, limit: int = None) -> List[dict]:
    sql = f"SELECT {GOAL_COLUMNS} FROM goals WHERE user_id = :uid ORDER BY created_at DESC, id DESC"
    if limit:
        sql += f" LIMIT {int(limit)}"
    return execute_raw_sql(sql, {"uid": user_id})


@router.get("", response_model=List[GoalResponse])
async def list_goals(user: dict = Depends(get_current_user)):
    return list_user_goals(user["id"])


@router.get("/recent", response_model=List[GoalResponse])
async def recent_goals(user: dict = Depends(get_current_user)):
    return list_user_goals(user["id"], limit=3)


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(goal: GoalCreate, user: dict = Depends(get_current_user)):
    params = goal.model_dump(mode="json")
    params["uid"] = user["id"]

    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO goals (user_id, title, description, category, status, progress, target_date)
                VALUES (:uid, :title, :description, :category, :status, :progress, :target_date)
                RETURNING {GOAL_COLUMNS}
            """),
            params
        )
        return first_or_none(result)


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(goal_id: int, update: GoalUpdate, user: dict = Depends(get_current_user)):
    clause, params = build_update(update.model_dump(mode="json", exclude_unset=True))
    params.update({"id": goal_id, "uid": user["id"]})

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE goals SET {clause} WHERE id = :id AND user_id = :uid"), params)
        result = db.execute(
            text(f"SELECT {GOAL_COLUMNS} FROM goals WHERE id = :id AND user_id = :uid"),
            {"id": goal_id, "uid": user["id"]}
        )
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Goal not found")
    return row


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(goal_id: int, user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        db.execute(
            text("DELETE FROM goals WHERE id = :id AND user_id = :uid"),
            {"id": goal_id, "uid": user["id"]}
        )
    return MessageResponse(message="Goal deleted")
