from __future__ import annotations

from app.db.database import build_update, load_list
from app.services.recommendation_service import rank_careers
from app.services.stats_service import average_level, latest_per_skill


def test_latest_per_skill_keeps_first_seen():
    records = [
        {"skill_name": "Python", "level": 70},
        {"skill_name": "SQL", "level": 40},
        {"skill_name": "Python", "level": 25},
    ]
    latest = latest_per_skill(records)
    assert [(r["skill_name"], r["level"]) for r in latest] == [("Python", 70), ("SQL", 40)]
    assert average_level(latest) == 55


def test_average_level_of_nothing_is_zero():
    assert average_level([]) == 0.0


def test_rank_careers_is_case_insensitive_and_stable():
    careers = [
        {"title": "A", "required_skills": []},
        {"title": "B", "required_skills": ["SQL"]},
        {"title": "C", "required_skills": []},
        {"title": "D", "required_skills": ["Python", "sql"]},
    ]
    ranked = rank_careers(careers, [" python ", "SQL"], limit=3)
    assert [c["title"] for c in ranked] == ["D", "B", "A"]


def test_rank_careers_without_skills_keeps_order():
    careers = [{"title": t, "required_skills": ["X"]} for t in "ABCD"]
    assert [c["title"] for c in rank_careers(careers, [])] == ["A", "B", "C"]


def test_build_update_encodes_json_fields():
    clause, params = build_update({"title": "T", "skills": ["a", "b"]}, ["skills"])
    assert clause == "title = :title, skills = :skills"
    assert params == {"title": "T", "skills": '["a", "b"]'}
    assert build_update({}) == ("", {})


def test_load_list_tolerates_null():
    assert load_list(None) == []
    assert load_list('["x"]') == ["x"]
