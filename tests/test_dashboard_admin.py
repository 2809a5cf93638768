from __future__ import annotations


def test_student_dashboard_stats(student_client, opportunity):
    student_client.post("/api/goals", json={"title": "A", "status": "completed"})
    student_client.post("/api/goals", json={"title": "B"})
    student_client.post(f"/api/opportunities/{opportunity['id']}/save")
    student_client.post(f"/api/opportunities/{opportunity['id']}/apply", json={})
    student_client.post("/api/progress/skills/Python", json={"level": 40})
    student_client.post("/api/progress/skills/SQL", json={"level": 60})

    stats = student_client.get("/api/dashboard/stats").json()
    assert stats == {
        "total_goals": 2,
        "completed_goals": 1,
        "saved_opportunities": 1,
        "applications": 1,
        "skills_tracked": 2,
        "average_skill_level": 50.0,
    }


def test_admin_dashboard_stats(admin_client, student_client, opportunity):
    admin_client.post("/api/careers", json={"title": "Engineer"})
    admin_client.post("/api/resources", json={"title": "Guide"})

    stats = admin_client.get("/api/dashboard/stats").json()
    assert stats == {
        "total_students": 1,
        "total_careers": 1,
        "total_opportunities": 1,
        "total_resources": 1,
    }


def test_dashboard_requires_login(client):
    assert client.get("/api/dashboard/stats").status_code == 401


def test_student_ranking(student_client, other_student_client):
    student_client.post("/api/progress/skills/Python", json={"level": 80})
    other_student_client.post("/api/progress/skills/Python", json={"level": 20})

    ranking = student_client.get("/api/students/ranking").json()
    assert ranking == {"rank": 1, "total_students": 2, "score": 80.0, "percentile": 100.0}

    ranking = other_student_client.get("/api/students/ranking").json()
    assert ranking["rank"] == 2
    assert ranking["percentile"] == 0.0


def test_list_students_excludes_admins(admin_client, student_client):
    students = admin_client.get("/api/admin/students").json()
    assert [s["email"] for s in students] == ["student@example.com"]
    assert "password_hash" not in students[0]


def test_admin_student_profile(admin_client, student_client):
    student_client.post("/api/profile", json={"bio": "Hello", "skills": ["Python"]})
    student_id = student_client.get("/api/auth/me").json()["user"]["id"]

    body = admin_client.get(f"/api/admin/students/{student_id}/profile").json()
    assert body["bio"] == "Hello"
    assert body["user"]["email"] == "student@example.com"
    assert body["user"]["year_level"] == 2
    assert body["skills"] == ["Python"]
    assert body["user_id"] == student_id


def test_admin_student_profile_without_profile_row(admin_client, student_client):
    student_id = student_client.get("/api/auth/me").json()["user"]["id"]
    body = admin_client.get(f"/api/admin/students/{student_id}/profile").json()
    assert body == {"user": {
        "name": "Sam Student", "email": "student@example.com", "year_level": 2,
        "course": "Computer Engineering", "avatar_url": None,
    }}


def test_admin_student_analytics(admin_client, student_client):
    student_client.post("/api/profile", json={"skills": ["Python", "SQL"]})
    student_client.post("/api/progress/skills/Python", json={"level": 75})
    student_client.post("/api/goals", json={"title": "Done", "status": "completed"})
    student_client.post("/api/goals", json={"title": "Doing", "status": "in-progress"})
    student_client.post("/api/goals", json={"title": "Later"})
    student_id = student_client.get("/api/auth/me").json()["user"]["id"]

    body = admin_client.get(f"/api/admin/students/{student_id}/analytics").json()
    assert body["stats"] == {
        "total_goals": 3,
        "completed_goals": 1,
        "in_progress_goals": 1,
        "total_skills": 2,
        "average_skill_level": 50.0,
    }
    assert {r["skill_name"]: r["level"] for r in body["progress_records"]} == {"Python": 75, "SQL": 25}
    assert body["user"]["email"] == "student@example.com"


def test_admin_unknown_student(admin_client):
    assert admin_client.get("/api/admin/students/999/analytics").status_code == 404
    assert admin_client.get("/api/admin/students/999/profile").status_code == 404
    r = admin_client.delete("/api/admin/students/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Student not found"


def test_admin_cannot_delete_admin_account(admin_client):
    admin_id = admin_client.get("/api/auth/me").json()["user"]["id"]
    assert admin_client.delete(f"/api/admin/students/{admin_id}").status_code == 404


def test_delete_student_removes_owned_rows(admin_client, student_client, other_student_client, opportunity):
    oid = opportunity["id"]
    for c in (student_client, other_student_client):
        c.post(f"/api/opportunities/{oid}/save")
        c.post(f"/api/opportunities/{oid}/apply", json={})
        c.post("/api/goals", json={"title": "Goal"})
        c.post("/api/profile", json={"skills": ["Python"]})
        c.post("/api/academic-modules", json={"name": "Math"})
    student_id = student_client.get("/api/auth/me").json()["user"]["id"]

    r = admin_client.delete(f"/api/admin/students/{student_id}")
    assert r.status_code == 200

    assert [s["email"] for s in admin_client.get("/api/admin/students").json()] == ["other@example.com"]
    received = admin_client.get(f"/api/admin/opportunities/{oid}/applications").json()
    assert [a["applicant_email"] for a in received] == ["other@example.com"]

    # The other student's data is untouched
    stats = other_student_client.get("/api/dashboard/stats").json()
    assert stats["total_goals"] == 1
    assert stats["saved_opportunities"] == 1
    assert stats["applications"] == 1
