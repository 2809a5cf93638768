"""
Career recommendation - ranks careers by overlap with a student's skills.

Matching is a case-insensitive set intersection between the profile's
skills and each career's required skills. Ties keep the incoming order,
so a student without a profile simply gets the first careers listed.
"""

from typing import Iterable, List


def normalize_skills(skills: Iterable[str]) -> set:
    return {s.strip().lower() for s in skills if s and s.strip()}


def skill_overlap(student_skills: set, required_skills: Iterable[str]) -> int:
    return len(student_skills & normalize_skills(required_skills))


def rank_careers(careers: List[dict], skills: Iterable[str], limit: int = 3) -> List[dict]:
    """Return the `limit` careers with the most matching skills."""
    student_skills = normalize_skills(skills)
    # sorted() is stable, so equal scores keep list order
    ranked = sorted(
        careers,
        key=lambda c: skill_overlap(student_skills, c.get("required_skills") or []),
        reverse=True,
    )
    return ranked[:limit]
