"""
Dashboard Routes

GET /dashboard/stats - Admin totals or the student's own stats
GET /students/ranking - Student's rank by average skill level
"""

from fastapi import APIRouter, Depends
from typing import Union

from app.core.auth import get_current_user
from app.services.stats_service import get_admin_stats, get_student_stats, get_student_ranking
from app.schemas.schemas import AdminStatsResponse, StudentStatsResponse, RankingResponse

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=Union[AdminStatsResponse, StudentStatsResponse])
async def dashboard_stats(user: dict = Depends(get_current_user)):
    """Admins see portal-wide totals; students see their own progress."""
    if user["role"] == "admin":
        return AdminStatsResponse(**get_admin_stats())
    return StudentStatsResponse(**get_student_stats(user["id"]))


@router.get("/students/ranking", response_model=RankingResponse)
async def student_ranking(user: dict = Depends(get_current_user)):
    return get_student_ranking(user["id"])
