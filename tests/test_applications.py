from __future__ import annotations


def _apply(client, opportunity_id, **body):
    return client.post(f"/api/opportunities/{opportunity_id}/apply", json=body)


def test_apply_creates_pending_application(student_client, opportunity):
    r = _apply(student_client, opportunity["id"], resume_url="https://cdn/resume.pdf", cover_letter="Hi")
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == "pending"
    assert body["resume_url"] == "https://cdn/resume.pdf"


def test_cannot_apply_twice(student_client, opportunity):
    assert _apply(student_client, opportunity["id"]).status_code == 201
    r = _apply(student_client, opportunity["id"], cover_letter="Again")
    assert r.status_code == 400
    assert r.json()["detail"] == "You have already applied to this opportunity"

    mine = student_client.get("/api/opportunity-applications/mine").json()
    assert len(mine) == 1


def test_two_students_can_apply(student_client, other_student_client, opportunity):
    assert _apply(student_client, opportunity["id"]).status_code == 201
    assert _apply(other_student_client, opportunity["id"]).status_code == 201


def test_apply_to_missing_opportunity(student_client):
    assert _apply(student_client, 999).status_code == 404


def test_apply_requires_login(client, opportunity):
    assert _apply(client, opportunity["id"]).status_code == 401


def test_my_applications_embed_opportunity(student_client, opportunity):
    _apply(student_client, opportunity["id"], cover_letter="Hello")
    mine = student_client.get("/api/opportunity-applications/mine").json()
    assert mine[0]["opportunity"]["title"] == "Backend Intern"
    assert mine[0]["opportunity"]["required_skills"] == ["Python", "SQL"]
    assert mine[0]["cover_letter"] == "Hello"


def test_edit_own_application(student_client, opportunity):
    app_id = _apply(student_client, opportunity["id"], cover_letter="v1").json()["id"]

    r = student_client.patch(f"/api/opportunity-applications/{app_id}", json={"cover_letter": "v2"})
    assert r.status_code == 200
    assert r.json()["cover_letter"] == "v2"


def test_cannot_touch_someone_elses_application(student_client, other_student_client, opportunity):
    app_id = _apply(student_client, opportunity["id"]).json()["id"]

    r = other_student_client.patch(f"/api/opportunity-applications/{app_id}", json={"cover_letter": "x"})
    assert r.status_code == 404
    assert other_student_client.delete(f"/api/opportunity-applications/{app_id}").status_code == 404


def test_delete_application_allows_reapplying(student_client, opportunity):
    app_id = _apply(student_client, opportunity["id"]).json()["id"]

    r = student_client.delete(f"/api/opportunity-applications/{app_id}")
    assert r.status_code == 200
    assert student_client.get("/api/opportunity-applications/mine").json() == []
    assert _apply(student_client, opportunity["id"]).status_code == 201


def test_admin_reviews_applications(admin_client, student_client, opportunity):
    app_id = _apply(student_client, opportunity["id"]).json()["id"]

    received = admin_client.get(f"/api/admin/opportunities/{opportunity['id']}/applications").json()
    assert received[0]["applicant_email"] == "student@example.com"

    r = admin_client.put(f"/api/admin/applications/{app_id}/status", json={"status": "accepted"})
    assert r.status_code == 200
    assert r.json()["status"] == "accepted"

    mine = student_client.get("/api/opportunity-applications/mine").json()
    assert mine[0]["status"] == "accepted"


def test_status_update_validates(admin_client, student_client, opportunity):
    app_id = _apply(student_client, opportunity["id"]).json()["id"]
    r = admin_client.put(f"/api/admin/applications/{app_id}/status", json={"status": "hired"})
    assert r.status_code == 422
    r = admin_client.put("/api/admin/applications/999/status", json={"status": "rejected"})
    assert r.status_code == 404
