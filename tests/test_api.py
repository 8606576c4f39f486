"""HTTP API contract tests."""

from conftest import FakeRenderer, bearer, make_client

from job_vault.config import Settings


def _seed(api, headers) -> dict:
    response = api.post("/api/resume/seed", headers=headers)
    assert response.status_code == 201
    return response.json()


def test_health(api):
    assert api.get("/health").json() == {"status": "healthy"}


def test_auth_user(api, auth_headers, user):
    response = api.get("/api/auth/user", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == user.id


def test_missing_token_is_401(api):
    response = api.get("/api/jobs")
    assert response.status_code == 401
    assert response.json() == {"code": "UNAUTHENTICATED", "message": "You are not authorized to perform this action."}


def test_invalid_token_is_401(api):
    response = api.get("/api/jobs", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_job_crud_and_pipeline(api, auth_headers):
    created = api.post(
        "/api/jobs",
        json={"position": "Engineer", "company": "Acme", "status": "applied", "deadline": "", "location": ""},
        headers=auth_headers,
    )
    assert created.status_code == 201
    job = created.json()
    assert job["status"] == "APPLIED"
    assert job["deadline"] is None
    assert job["location"] is None

    updated = api.put(f"/api/jobs/{job['id']}", json={"status": "INTERVIEWING"}, headers=auth_headers)
    assert updated.json()["status"] == "INTERVIEWING"
    assert updated.json()["position"] == "Engineer"

    pipeline = api.get("/api/jobs/pipeline", headers=auth_headers).json()
    assert pipeline["total"] == 1
    assert {s["status"]: s["width_class"] for s in pipeline["stages"]}["INTERVIEWING"] == "w-full"

    assert api.delete(f"/api/jobs/{job['id']}", headers=auth_headers).status_code == 204
    assert api.delete(f"/api/jobs/{job['id']}", headers=auth_headers).status_code == 404
    assert api.get("/api/jobs", headers=auth_headers).json() == []


def test_request_validation_uses_error_shape(api, auth_headers):
    response = api.post("/api/jobs", json={"company": "Acme"}, headers=auth_headers)
    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_FAILED"
    assert "devMessage" not in response.json()


def test_detailed_errors_flag(persistence, renderer, auth_headers):
    config = Settings(jwt_secret="test-secret", show_detailed_errors=True, database_url="", rate_limit_enabled=False)
    with make_client(persistence, renderer, config) as api:
        response = api.get("/api/resumes/missing", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["devMessage"] == "Resume not found"


def test_history_crud(api, auth_headers):
    experience = api.post(
        "/api/work-experiences",
        json={"company": "Acme", "title": "Engineer", "start_date": "2020-01-01", "technologies": "python, sql"},
        headers=auth_headers,
    ).json()
    assert experience["technologies"] == ["python", "sql"]

    achievement = api.post(
        "/api/achievements",
        json={"experience_id": experience["id"], "description": "Cut costs"},
        headers=auth_headers,
    )
    assert achievement.status_code == 201
    metric = api.post(
        "/api/achievement-metrics",
        json={"achievement_id": achievement.json()["id"], "metric_type": "cost", "value": 30, "unit": "%"},
        headers=auth_headers,
    )
    assert metric.status_code == 201

    project = api.post("/api/projects", json={"name": "Job Vault", "url": ""}, headers=auth_headers).json()
    assert project["url"] is None
    api.post(
        "/api/certifications",
        json={"name": "AWS SA", "issuer": "AWS", "issue_date": "2022-05-01"},
        headers=auth_headers,
    )

    history = api.get("/api/history", headers=auth_headers).json()
    assert history["work_experiences"][0]["achievements"][0]["metrics"][0]["value"] == 30
    assert [p["name"] for p in history["projects"]] == ["Job Vault"]
    assert len(history["certifications"]) == 1

    assert api.delete(f"/api/projects/{project['id']}", headers=auth_headers).status_code == 204
    assert api.get("/api/projects", headers=auth_headers).json() == []


def test_child_record_with_foreign_parent_is_404(api, auth_headers, other_headers):
    theirs = api.post(
        "/api/skills", json={"name": "Go"}, headers=other_headers
    ).json()

    response = api.post(
        "/api/skill-contexts",
        json={"skill_id": theirs["id"], "context_type": "project"},
        headers=auth_headers,
    )
    assert response.status_code == 404


def test_resume_sections_reorder_and_preview(api, auth_headers):
    resume = api.post("/api/resumes", json={"name": "Data Resume", "font_size": "lg"}, headers=auth_headers).json()
    for title in ["One", "Two", "Three"]:
        response = api.post(f"/api/resumes/{resume['id']}/sections", json={"title": title}, headers=auth_headers)
        assert response.status_code == 201

    reordered = api.post(
        f"/api/resumes/{resume['id']}/sections/reorder",
        json={"source_index": 2, "destination_index": 0},
        headers=auth_headers,
    )
    assert [(s["title"], s["order_index"]) for s in reordered.json()] == [("Three", 0), ("One", 1), ("Two", 2)]

    preview = api.get(f"/api/resumes/{resume['id']}/preview", headers=auth_headers).json()
    assert [s["title"] for s in preview["sections"]] == ["Three", "One", "Two"]
    assert preview["typography"]["font_size"] == "18px"

    html = api.get(f"/api/resumes/{resume['id']}/preview.html", headers=auth_headers)
    assert html.headers["content-type"].startswith("text/html")
    assert html.text.index("Three") < html.text.index("One")


def test_reorder_out_of_range_is_422(api, auth_headers):
    resume = _seed(api, auth_headers)
    response = api.post(
        f"/api/resumes/{resume['id']}/sections/reorder",
        json={"source_index": 0, "destination_index": 6},
        headers=auth_headers,
    )
    assert response.status_code == 422


def test_seed_returns_six_sections(api, auth_headers):
    resume = _seed(api, auth_headers)
    assert resume["name"] == "Full Stack Developer Resume"
    assert [s["order_index"] for s in resume["sections"]] == list(range(6))


def test_export_pdf(api, auth_headers, renderer):
    resume = _seed(api, auth_headers)
    record = api.post(f"/api/resumes/{resume['id']}/exports", headers=auth_headers)
    assert record.status_code == 201
    export = record.json()
    assert export["version"] == 1

    response = api.get(f"/api/resume/export/{export['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == f'attachment; filename="{export["file_path"]}"'
    assert response.content == renderer.content

    exports = api.get(f"/api/resumes/{resume['id']}/exports", headers=auth_headers).json()
    assert [e["id"] for e in exports] == [export["id"]]


def test_export_unknown_id_is_404(api, auth_headers):
    response = api.get("/api/resume/export/nope", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_export_requires_token(api):
    assert api.get("/api/resume/export/anything").status_code == 401


def test_export_of_other_users_resume_is_404(api, auth_headers, other_headers):
    resume = _seed(api, auth_headers)
    export = api.post(f"/api/resumes/{resume['id']}/exports", headers=auth_headers).json()

    assert api.get(f"/api/resume/export/{export['id']}", headers=other_headers).status_code == 404


def test_export_renderer_failure_is_json_500(persistence, test_settings, auth_headers):
    with make_client(persistence, FakeRenderer(error=RuntimeError("chromium crashed")), test_settings) as api:
        resume = _seed(api, auth_headers)
        export = api.post(f"/api/resumes/{resume['id']}/exports", headers=auth_headers).json()
        response = api.get(f"/api/resume/export/{export['id']}", headers=auth_headers)

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json()["code"] == "UPSTREAM_FAILURE"


def test_pages_redirect_to_login_without_session(api):
    response = api.get("/resume/abc", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/login?from=/resume/abc"


def test_public_pages_and_valid_session_pass_through(api, user):
    assert api.get("/login", follow_redirects=False).status_code != 307

    token = bearer(user.id)["Authorization"].split(" ", 1)[1]
    api.cookies.set("job-vault-auth", token)
    assert api.get("/jobs", follow_redirects=False).status_code != 307


def test_rate_limits_follow_app_config(persistence, renderer, auth_headers):
    config = Settings(jwt_secret="test-secret", database_url="", rate_limit_enabled=True, seed_rate_limit="2/minute")
    with make_client(persistence, renderer, config) as api:
        statuses = [api.post("/api/resume/seed", headers=auth_headers).status_code for _ in range(3)]

    assert statuses == [201, 201, 429]


def test_rate_limits_can_be_disabled_per_app(persistence, renderer, auth_headers):
    config = Settings(jwt_secret="test-secret", database_url="", rate_limit_enabled=False, seed_rate_limit="1/minute")
    with make_client(persistence, renderer, config) as api:
        statuses = [api.post("/api/resume/seed", headers=auth_headers).status_code for _ in range(3)]

    assert statuses == [201, 201, 201]
