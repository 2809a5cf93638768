"""
Stats Service - counting and aggregation behind the dashboard and admin analytics.

Skill levels are tracked as an append-only series of progress records.
The newest record per skill (recorded_at, then id) is the current level.
"""

from typing import Dict, List

from app.db.database import execute_raw_sql


def _count(sql: str, params: dict = None) -> int:
    rows = execute_raw_sql(sql, params)
    return int(rows[0]["n"]) if rows else 0


def get_progress_records(user_id: int) -> List[dict]:
    """All progress records for a user, newest first."""
    return execute_raw_sql(
        """
            SELECT id, user_id, skill_name, level, recorded_at FROM progress_records
            WHERE user_id = :uid ORDER BY recorded_at DESC, id DESC
        """,
        {"uid": user_id}
    )


def latest_per_skill(records: List[dict]) -> List[dict]:
    """Keep the first record seen per skill; `records` must be newest first."""
    latest: Dict[str, dict] = {}
    for record in records:
        latest.setdefault(record["skill_name"], record)
    return list(latest.values())


def average_level(records: List[dict]) -> float:
    if not records:
        return 0.0
    return sum(r["level"] for r in records) / len(records)


def get_latest_skill_levels(user_id: int) -> List[dict]:
    return latest_per_skill(get_progress_records(user_id))


def get_admin_stats() -> dict:
    return {
        "total_students": _count("SELECT COUNT(*) AS n FROM users WHERE role = 'student'"),
        "total_careers": _count("SELECT COUNT(*) AS n FROM careers"),
        "total_opportunities": _count("SELECT COUNT(*) AS n FROM opportunities"),
        "total_resources": _count("SELECT COUNT(*) AS n FROM resources"),
    }


def get_student_stats(user_id: int) -> dict:
    params = {"uid": user_id}
    latest = get_latest_skill_levels(user_id)
    return {
        "total_goals": _count("SELECT COUNT(*) AS n FROM goals WHERE user_id = :uid", params),
        "completed_goals": _count(
            "SELECT COUNT(*) AS n FROM goals WHERE user_id = :uid AND status = 'completed'", params
        ),
        "saved_opportunities": _count(
            "SELECT COUNT(*) AS n FROM saved_opportunities WHERE user_id = :uid", params
        ),
        "applications": _count(
            "SELECT COUNT(*) AS n FROM opportunity_applications WHERE user_id = :uid", params
        ),
        "skills_tracked": len(latest),
        "average_skill_level": round(average_level(latest), 2),
    }


def get_student_ranking(user_id: int) -> dict:
    """
    Rank the user among all students by average current skill level.

    Rank is 1 + the number of students with a strictly higher score, so
    tied students share a rank. Students without records score 0.
    """
    students = execute_raw_sql("SELECT id FROM users WHERE role = 'student'")
    records = execute_raw_sql(
        """
            SELECT p.user_id, p.skill_name, p.level FROM progress_records p
            JOIN users u ON p.user_id = u.id
            WHERE u.role = 'student'
            ORDER BY p.recorded_at DESC, p.id DESC
        """
    )

    by_user: Dict[int, List[dict]] = {s["id"]: [] for s in students}
    for record in records:
        by_user.setdefault(record["user_id"], []).append(record)

    scores = {uid: average_level(latest_per_skill(recs)) for uid, recs in by_user.items()}
    score = scores.get(user_id, 0.0)
    total = len(scores)
    rank = 1 + sum(1 for s in scores.values() if s > score)
    percentile = 100.0 if total <= 1 else round((total - rank) / (total - 1) * 100, 2)

    return {
        "rank": rank,
        "total_students": total,
        "score": round(score, 2),
        "percentile": percentile,
    }
