"""
Resource Routes

GET /resources - List resources
GET /resources/{resource_id} - Resource details
POST /resources - Create resource (admin only)
PUT /resources/{resource_id} - Update resource (admin only)
DELETE /resources/{resource_id} - Delete resource (admin only)
POST /resources/{resource_id}/download - Count a download
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import get_db_session, execute_raw_sql, first_or_none, build_update
from app.core.auth import get_current_user, get_current_admin
from app.schemas.schemas import (
    ResourceCreate, ResourceUpdate, ResourceResponse, MessageResponse, SuccessResponse
)

router = APIRouter(prefix="/resources", tags=["Resources"])

RESOURCE_COLUMNS = "id, title, description, category, type, url, download_count, created_at"


@router.get("", response_model=List[ResourceResponse])
async def list_resources():
    return execute_raw_sql(f"SELECT {RESOURCE_COLUMNS} FROM resources ORDER BY created_at DESC, id DESC")


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(resource_id: int):
    rows = execute_raw_sql(f"SELECT {RESOURCE_COLUMNS} FROM resources WHERE id = :id", {"id": resource_id})
    if not rows:
        raise HTTPException(status_code=404, detail="Resource not found")
    return rows[0]


@router.post("", response_model=ResourceResponse, status_code=201)
async def create_resource(resource: ResourceCreate, admin: dict = Depends(get_current_admin)):
    with get_db_session() as db:
        result = db.execute(
            text(f"""
                INSERT INTO resources (title, description, category, type, url)
                VALUES (:title, :description, :category, :type, :url)
                RETURNING {RESOURCE_COLUMNS}
            """),
            resource.model_dump()
        )
        return first_or_none(result)


@router.put("/{resource_id}", response_model=ResourceResponse)
async def update_resource(resource_id: int, update: ResourceUpdate, admin: dict = Depends(get_current_admin)):
    clause, params = build_update(update.model_dump(exclude_unset=True))
    params["id"] = resource_id

    with get_db_session() as db:
        if clause:
            db.execute(text(f"UPDATE resources SET {clause} WHERE id = :id"), params)
        result = db.execute(text(f"SELECT {RESOURCE_COLUMNS} FROM resources WHERE id = :id"), {"id": resource_id})
        row = first_or_none(result)

    if not row:
        raise HTTPException(status_code=404, detail="Resource not found")
    return row


@router.delete("/{resource_id}", response_model=MessageResponse)
async def delete_resource(resource_id: int, admin: dict = Depends(get_current_admin)):
    with get_db_session() as db:
        db.execute(text("DELETE FROM resources WHERE id = :id"), {"id": resource_id})
    return MessageResponse(message="Resource deleted")


@router.post("/{resource_id}/download", response_model=SuccessResponse)
async def track_download(resource_id: int, user: dict = Depends(get_current_user)):
    """Increment the download counter in a single UPDATE."""
    with get_db_session() as db:
        result = db.execute(
            text("UPDATE resources SET download_count = download_count + 1 WHERE id = :id"),
            {"id": resource_id}
        )
        if result.rowcount == 0:
            raise HTTPException(status_code=404, detail="Resource not found")

    return SuccessResponse()
