FRONTEND_PROFILE = {
    "skills": ["React", "HTML"],
    "experience_years": 2,
    "job_titles": ["Frontend Intern"],
    "interests": ["frontend"],
}

JOBS = [
    {"id": "1", "title": "Senior Frontend Developer", "salary": "$140k-$180k",
     "skills": ["React", "TypeScript", "GraphQL", "AWS"]},
    {"id": "6", "title": "Junior React Developer", "salary": "$75k-$100k",
     "skills": ["React", "JavaScript", "HTML", "CSS"]},
]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["categories"] == 7


def test_taxonomy(client):
    data = client.get("/taxonomy").json()
    assert data["frontend"][0] == {"skill": "React", "weight": 3}


def test_match(client):
    response = client.post("/match", json={"profile": FRONTEND_PROFILE})
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 49
    assert data["details"] == {"skill_score": 25, "experience_score": 70, "role_score": 100}
    assert data["tier"] == "moderate"
    assert [r["skill"] for r in data["learning"]] == data["recommended_skills"]


def test_match_without_profile(client):
    data = client.post("/match", json={}).json()
    assert data["score"] == 0
    assert data["matched_skills"] == []


def test_match_uses_stored_profile(client):
    assert client.put("/profile", json=FRONTEND_PROFILE).status_code == 200
    data = client.post("/match", json={}).json()
    assert data["score"] == 49


def test_match_rejects_bad_profile(client):
    response = client.post("/match", json={"profile": {"experience_years": "lots"}})
    assert response.status_code == 422


def test_rank_jobs(client):
    response = client.post("/jobs/rank", json={"profile": FRONTEND_PROFILE, "jobs": JOBS})
    assert response.status_code == 200
    ranked = response.json()
    assert [r["job"]["id"] for r in ranked] == ["6", "1"]
    assert ranked[0]["match"]["score"] == 50


def test_rank_jobs_bad_sort(client):
    response = client.post("/jobs/rank", json={"jobs": JOBS, "sort_by": "random"})
    assert response.status_code == 400


def test_extract_skills(client):
    response = client.post("/jobs/extract-skills", json={"description": "Kotlin and Android, some Flutter"})
    assert response.json()["skills"] == ["Kotlin", "Android", "Flutter"]


def test_skill_gap(client):
    data = client.post("/skills/gap", json={"skills": ["python"]}).json()
    assert data["have"] == ["Python"]
    assert data["match_percentage"] == 7


def test_skill_resources(client):
    data = client.get("/skills/docker/resources").json()
    assert data[0]["title"] == "Docker Mastery"


def test_profile_roundtrip(client):
    assert client.get("/profile").json() is None
    client.put("/profile", json={**FRONTEND_PROFILE, "experience_years": -4})
    assert client.get("/profile").json()["experience_years"] == 0
    assert client.delete("/profile").status_code == 204
    assert client.get("/profile").json() is None


def test_saved_jobs(client):
    response = client.post("/saved-jobs", json={"job": JOBS[0], "match": 43})
    assert response.status_code == 200
    assert response.json()["match"] == 43
    assert len(client.get("/saved-jobs").json()) == 1
    assert client.delete("/saved-jobs/1").status_code == 204
    assert client.get("/saved-jobs").json() == []


def test_save_job_requires_id(client):
    response = client.post("/saved-jobs", json={"job": {"title": "No id"}})
    assert response.status_code == 400


def test_applications(client):
    created = client.post("/applications", json={"job_id": "6", "title": "Junior React Developer"})
    assert created.status_code == 201
    app_id = created.json()["id"]

    updated = client.patch(f"/applications/{app_id}", json={"status": "offer", "notes": "Yay"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "offer"
    assert updated.json()["notes"] == "Yay"

    assert client.delete(f"/applications/{app_id}").status_code == 204
    assert client.get("/applications").json() == []


def test_application_not_found(client):
    assert client.patch("/applications/app-nope", json={"status": "offer"}).status_code == 404
    assert client.delete("/applications/app-nope").status_code == 404


def test_application_bad_status(client):
    created = client.post("/applications", json={"job_id": "6"}).json()
    response = client.patch(f"/applications/{created['id']}", json={"status": "ghosted"})
    assert response.status_code == 422


def test_profile_patch(client):
    client.put("/profile", json=FRONTEND_PROFILE)
    response = client.patch("/profile", json={"interests": ["frontend", "design"]})
    assert response.status_code == 200
    assert response.json()["skills"] == ["React", "HTML"]
    assert response.json()["interests"] == ["frontend", "design"]


def test_profile_patch_rejects_unknown_field(client):
    client.put("/profile", json=FRONTEND_PROFILE)
    response = client.patch("/profile", json={"skill": ["Vue"]})
    assert response.status_code == 422
    assert client.get("/profile").json()["skills"] == ["React", "HTML"]


def test_saved_job_lookup_and_clear(client):
    client.post("/saved-jobs", json={"job": JOBS[0]})
    client.post("/saved-jobs", json={"job": JOBS[1]})
    assert client.get("/saved-jobs/1").json() == {"job_id": "1", "saved": True}
    assert client.get("/saved-jobs/99").json()["saved"] is False

    assert client.delete("/saved-jobs").status_code == 204
    assert client.get("/saved-jobs").json() == []
    assert client.get("/saved-jobs/1").json()["saved"] is False


def test_application_by_job_and_clear(client):
    created = client.post("/applications", json={"job_id": "6", "title": "Junior React Developer"}).json()
    found = client.get("/applications/by-job/6")
    assert found.status_code == 200
    assert found.json()["id"] == created["id"]
    assert client.get("/applications/by-job/1").status_code == 404

    client.post("/applications", json={"job_id": "1"})
    assert client.delete("/applications").status_code == 204
    assert client.get("/applications").json() == []
