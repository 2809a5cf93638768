"""
Academic Module Routes (scoped to the current user)

GET /academic-modules - List own modules
POST /academic-modules - Add module
PUT /academic-modules/{module_id} - Update own module
DELETE /academic-modules/{module_id} - Delete own module
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import get_db_session, execute_raw_sql, first_or_none, build_update
from app.core.auth import get_current_user
from app.schemas.schemas import (
    AcademicModuleCreate, AcademicModuleUpdate, AcademicModuleResponse, MessageResponse
)

router = APIRouter(prefix="/academic-modules", tags=["Academic Modules"])

MODULE_COLUMNS = "id, user_id, code, name, semester, year_level, credits, grade, status"


@router.get("", response_model=List[AcademicModuleResponse])
async def list_modules(user: dict = Depends(get_current_user)):
    return execute_raw_sql(
        f"SELECT {MODULE_COLUMNS} FROM academic_modules WHERE user_id = :uid ORDER BY id",
        {"uid": user["id"]}
    )


@router.post("", response_model=AcademicModuleResponse, status_code=201)
async def create_module(module: AcademicModuleCreate, user: dict = Depends(get_current_user)):
    params = module.model_dump(mode="json")
    params["uid"] = user["id"]

    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO academic_modules (user_id, code, name, semester, year_level, credits, grade, status)
                VALUES (:uid, :code, :name, :semester, :year_level, :credits, :grade, :status)
                RETURNING {MODULE_COLUMNS}
            """),
            params
        )
        return first_or_none(result)


@router.put("/{module_id}", response_model=AcademicModuleResponse)
async def update_module(module_id: int, update: AcademicModuleUpdate, user: dict = Depends(get_current_user)):
    clause, params = build_update(update.model_dump(mode="json", exclude_unset=True))
    params.update({"id": module_id, "uid": user["id"]})

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE academic_modules SET {clause} WHERE id = :id AND user_id = :uid"), params)
        result = db.execute(
            text(f"SELECT {MODULE_COLUMNS} FROM academic_modules WHERE id = :id AND user_id = :uid"),
            {"id": module_id, "uid": user["id"]}
        )
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Academic module not found")
    return row


@router.delete("/{module_id}", response_model=MessageResponse)
async def delete_module(module_id: int, user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        db.execute(
            text("DELETE FROM academic_modules WHERE id = :id AND user_id = :uid"),
            {"id": module_id, "uid": user["id"]}
        )
    return MessageResponse(message="Academic module deleted")
