"""
Application Routes

GET /opportunity-applications/mine - Current user's applications
PATCH /opportunity-applications/{application_id} - Edit own application
DELETE /opportunity-applications/{application_id} - Withdraw own application
"""

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from typing import List

from app.db.database import get_db_session, execute_raw_sql, first_or_none, decode_lists, build_update
from app.core.auth import get_current_user
from app.api.routes.opportunity_routes import APPLICATION_COLUMNS, OPPORTUNITY_COLUMNS
from app.schemas.schemas import (
    ApplicationUpdate, ApplicationResponse, ApplicationWithOpportunity, MessageResponse
)

router = APIRouter(prefix="/opportunity-applications", tags=["Applications"])


def _columns(alias: str, columns: str, prefix: str = "") -> str:
    return ", ".join(f"{alias}.{c.strip()} AS {prefix}{c.strip()}" for c in columns.split(","))


@router.get("/mine", response_model=List[ApplicationWithOpportunity])
async def my_applications(user: dict = Depends(get_current_user)):
    """Current user's applications with the opportunity embedded, newest first."""
    rows = execute_raw_sql(
        f"""
            SELECT {_columns("a", APPLICATION_COLUMNS)}, {_columns("o", OPPORTUNITY_COLUMNS, "opp_")}
            FROM opportunity_applications a
            JOIN opportunities o ON a.opportunity_id = o.id
            WHERE a.user_id = :uid
            ORDER BY a.applied_at DESC, a.id DESC
        """,
        {"uid": user["id"]}
    )

    applications = []
    for r in rows:
        opportunity = {k[len("opp_"):]: r.pop(k) for k in list(r) if k.startswith("opp_")}
        r["opportunity"] = decode_lists(opportunity, "required_skills")
        applications.append(r)
    return applications


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int, update: ApplicationUpdate, user: dict = Depends(get_current_user)
):
    """Edit the attachments or cover letter of your own application."""
    clause, params = build_update(update.model_dump(exclude_unset=True))
    params.update({"id": application_id, "uid": user["id"]})

    with get_db_session() as db:
        result = db.execute(
            text("SELECT id FROM opportunity_applications WHERE id = :id AND user_id = :uid"),
            {"id": application_id, "uid": user["id"]}
        )
        if not result.fetchone():
            raise HTTPException(status_code=404, detail="Application not found")

        if clause:
            db.execute(
                text(f"""
                    UPDATE opportunity_applications SET {clause}, updated_at = CURRENT_TIMESTAMP
                    WHERE id = :id AND user_id = :uid
                """),
                params
            )
        result = db.execute(
            text(f"SELECT {APPLICATION_COLUMNS} FROM opportunity_applications WHERE id = :id"),
            {"id": application_id}
        )
        return first_or_none(result)


@router.delete("/{application_id}", response_model=MessageResponse)
async def delete_application(application_id: int, user: dict = Depends(get_current_user)):
    with get_db_session() as db:
        result = db.execute(
            text("DELETE FROM opportunity_applications WHERE id = :id AND user_id = :uid"),
            {"id": application_id, "uid": user["id"]}
        )
        if result.rowcount == 0:
            raise HTTPException(status_code=404, detail="Application not found")

    return MessageResponse(message="Application deleted")
