"""Tests for job posting, browsing and manual applications."""

import uuid

import pytest


class TestJobs:

    @pytest.mark.asyncio
    async def test_recruiter_posts_job(self, client, register_and_login):
        headers = await register_and_login("hr@example.com", role="recruiter")

        response = await client.post(
            "/api/v1/jobs",
            json={
                "title": "Backend Engineer",
                "company_name": "Acme",
                "requirements": [" python ", "", "sql"],
                "location": "Remote",
            },
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Backend Engineer"
        assert body["requirements"] == ["python", "sql"]
        assert body["created_by"] is not None

    @pytest.mark.asyncio
    async def test_student_cannot_post_job(self, client, register_and_login):
        headers = await register_and_login("student@example.com")

        response = await client.post(
            "/api/v1/jobs",
            json={"title": "Nope", "company_name": "Acme", "requirements": []},
            headers=headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_and_filter_jobs(self, client, register_and_login, post_job):
        headers = await register_and_login("hr@example.com", role="recruiter")
        await post_job(headers, "Python Developer", ["python"])
        await post_job(headers, "Rust Developer", ["rust"])
        await post_job(headers, "Designer", ["figma"])

        everything = await client.get("/api/v1/jobs")
        developers = await client.get("/api/v1/jobs", params={"keyword": "developer"})
        first_page = await client.get("/api/v1/jobs", params={"page": 1, "size": 2})

        assert everything.json()["total"] == 3
        assert developers.json()["total"] == 2
        assert {job["title"] for job in developers.json()["jobs"]} == {"Python Developer", "Rust Developer"}
        assert first_page.json()["total"] == 3
        assert len(first_page.json()["jobs"]) == 2

    @pytest.mark.asyncio
    async def test_unknown_job_is_not_found(self, client):
        response = await client.get(f"/api/v1/jobs/{uuid.uuid4()}")

        assert response.status_code == 404


class TestApplications:

    @pytest.mark.asyncio
    async def test_manual_application(self, client, register_and_login, post_job):
        recruiter_headers = await register_and_login("hr@example.com", role="recruiter")
        job = await post_job(recruiter_headers, "Python Developer", ["python"])
        headers = await register_and_login("student@example.com")

        response = await client.post(f"/api/v1/applications/{job['id']}", headers=headers)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["is_auto_applied"] is False
        assert body["job"]["id"] == job["id"]

        mine = await client.get("/api/v1/applications/me", headers=headers)
        assert mine.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_cannot_apply_twice(self, client, register_and_login, post_job):
        recruiter_headers = await register_and_login("hr@example.com", role="recruiter")
        job = await post_job(recruiter_headers, "Python Developer", ["python"])
        headers = await register_and_login("student@example.com")

        await client.post(f"/api/v1/applications/{job['id']}", headers=headers)
        response = await client.post(f"/api/v1/applications/{job['id']}", headers=headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_manual_application_blocks_auto_apply(self, client, register_and_login, post_job):
        recruiter_headers = await register_and_login("hr@example.com", role="recruiter")
        job = await post_job(recruiter_headers, "Python Developer", ["python"])
        headers = await register_and_login("student@example.com")
        await client.post(f"/api/v1/applications/{job['id']}", headers=headers)

        response = await client.put(
            "/api/v1/profile", data={"skills": "Python", "auto_apply": "true"}, headers=headers
        )

        assert response.json()["auto_applied_count"] == 0
        mine = await client.get("/api/v1/applications/me", headers=headers)
        assert mine.json()["total"] == 1
        assert mine.json()["applications"][0]["is_auto_applied"] is False

    @pytest.mark.asyncio
    async def test_apply_to_unknown_job(self, client, register_and_login):
        headers = await register_and_login("student@example.com")

        response = await client.post(f"/api/v1/applications/{uuid.uuid4()}", headers=headers)

        assert response.status_code == 404
