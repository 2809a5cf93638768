"""
Training Program Routes

GET /training-programs - List active programs
GET /training-programs/{program_id} - Program details
POST /training-programs - Create program (admin only)
PUT /training-programs/{program_id} - Update program (admin only)
DELETE /training-programs/{program_id} - Delete program (admin only)
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import (
    get_db_session, execute_raw_sql, first_or_none, decode_lists, dump_list, build_update
)
from app.core.auth import get_current_admin
from app.schemas.schemas import (
    TrainingProgramCreate, TrainingProgramUpdate, TrainingProgramResponse, MessageResponse
)

router = APIRouter(prefix="/training-programs", tags=["Training Programs"])

PROGRAM_COLUMNS = (
    "id, title, provider, description, duration, format, url, skills, is_active, start_date, created_at"
)


@router.get("", response_model=List[TrainingProgramResponse])
async def list_programs():
    rows = execute_raw_sql(
        f"SELECT {PROGRAM_COLUMNS} FROM training_programs WHERE is_active = :active ORDER BY id",
        {"active": True}
    )
    return [decode_lists(r, "skills") for r in rows]


@router.get("/{program_id}", response_model=TrainingProgramResponse)
async def get_program(program_id: int):
    rows = execute_raw_sql(f"SELECT {PROGRAM_COLUMNS} FROM training_programs WHERE id = :id", {"id": program_id})
    if not rows:
        raise HTTPException(status_code=404, detail="Training program not found")
    return decode_lists(rows[0], "skills")


@router.post("", response_model=TrainingProgramResponse, status_code=201)
async def create_program(program: TrainingProgramCreate, admin: dict = Depends(get_current_admin)):
    params = program.model_dump(mode="json")
    params["skills"] = dump_list(program.skills)

    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO training_programs (title, provider, description, duration, format, url,
                    skills, is_active, start_date)
                VALUES (:title, :provider, :description, :duration, :format, :url,
                    :skills, :is_active, :start_date)
                RETURNING {PROGRAM_COLUMNS}
            """),
            params
        )
        row = first_or_none(result)
    return decode_lists(row, "skills")


@router.put("/{program_id}", response_model=TrainingProgramResponse)
async def update_program(program_id: int, update: TrainingProgramUpdate, admin: dict = Depends(get_current_admin)):
    clause, params = build_update(update.model_dump(mode="json", exclude_unset=True), ["skills"])
    params["id"] = program_id

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE training_programs SET {clause} WHERE id = :id"), params)
        result = db.execute(text(f"SELECT {PROGRAM_COLUMNS} FROM training_programs WHERE id = :id"), {"id": program_id})
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Training program not found")
    return decode_lists(row, "skills")


@router.delete("/{program_id}", response_model=MessageResponse)
async def delete_program(program_id: int, admin: dict = Depends(get_current_admin)):
    with get_db_session() as db:
        db.execute(text("DELETE FROM training_programs WHERE id = :id"), {"id": program_id})
    return MessageResponse(message="Training program deleted")
