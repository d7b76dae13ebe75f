"""Tests for job bookmarks."""

import uuid

import pytest


@pytest.fixture
def job_and_student(register_and_login, post_job):
    async def _setup():
        recruiter_headers = await register_and_login("hr@example.com", role="recruiter")
        job = await post_job(recruiter_headers, "Python Developer", ["python"])
        headers = await register_and_login("student@example.com")
        return job, headers

    return _setup


@pytest.mark.asyncio
async def test_toggle_adds_then_removes_bookmark(client, job_and_student):
    job, headers = await job_and_student()

    added = await client.post(f"/api/v1/saved-jobs/{job['id']}", headers=headers)
    removed = await client.post(f"/api/v1/saved-jobs/{job['id']}", headers=headers)

    assert added.status_code == 200
    assert added.json() == {"message": "Job bookmarked successfully", "is_bookmarked": True, "success": True}
    assert removed.json() == {"message": "Job removed from bookmarks", "is_bookmarked": False, "success": True}


@pytest.mark.asyncio
async def test_list_bookmarks_includes_job_details(client, job_and_student):
    job, headers = await job_and_student()
    await client.post(f"/api/v1/saved-jobs/{job['id']}", headers=headers)

    response = await client.get("/api/v1/saved-jobs", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["saved_jobs"][0]["job_id"] == job["id"]
    assert body["saved_jobs"][0]["job"]["title"] == "Python Developer"


@pytest.mark.asyncio
async def test_check_if_saved(client, job_and_student):
    job, headers = await job_and_student()

    before = await client.get(f"/api/v1/saved-jobs/check/{job['id']}", headers=headers)
    await client.post(f"/api/v1/saved-jobs/{job['id']}", headers=headers)
    after = await client.get(f"/api/v1/saved-jobs/check/{job['id']}", headers=headers)

    assert before.json()["is_saved"] is False
    assert after.json()["is_saved"] is True


@pytest.mark.asyncio
async def test_bookmarks_are_per_user(client, job_and_student, register_and_login):
    job, headers = await job_and_student()
    other_headers = await register_and_login("other@example.com")
    await client.post(f"/api/v1/saved-jobs/{job['id']}", headers=headers)

    response = await client.get("/api/v1/saved-jobs", headers=other_headers)

    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_bookmark_unknown_job(client, register_and_login):
    headers = await register_and_login("student@example.com")

    response = await client.post(f"/api/v1/saved-jobs/{uuid.uuid4()}", headers=headers)

    assert response.status_code == 404
