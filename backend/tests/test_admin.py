"""Tests for admin-only surfaces: access control, students, employers, resources, stats"""
import pytest

from backend.app.models.employer import Employer
from backend.app.models.enums import JobStatus
from backend.app.models.job import Job
from backend.app.models.resource import Resource

ADMIN_GETS = [
    "/api/admin/jobs",
    "/api/admin/students",
    "/api/admin/employers",
    "/api/admin/universities",
    "/api/admin/events",
    "/api/admin/resources",
    "/api/admin/stats",
    "/api/admin/profile",
    "/api/admin/analytics",
]


@pytest.mark.parametrize("path", ADMIN_GETS)
def test_admin_routes_require_cookie(client, db_session, path):
    assert client.get(path).status_code == 401


@pytest.mark.parametrize("path", ADMIN_GETS)
def test_admin_routes_reject_student_cookie(student_client, path):
    assert student_client.get(path).status_code == 401


@pytest.mark.parametrize("path", ADMIN_GETS)
def test_admin_routes_open_for_admin(admin_client, path):
    assert admin_client.get(path).status_code == 200


def test_admin_profile(admin_client, admin):
    data = admin_client.get("/api/admin/profile").json()["admin"]
    assert data["id"] == admin.id
    assert data["role"] == "ADMIN"
    assert "password" not in data


def test_stats(admin_client, student, employer, make_job, make_event, university):
    make_job(employer)
    make_job(employer, status=JobStatus.PENDING.value)
    make_event()
    assert admin_client.get("/api/admin/stats").json() == {
        "studentCount": 1,
        "employerCount": 1,
        "jobCount": 2,
        "pendingJobCount": 1,
        "eventCount": 1,
        "universityCount": 1,
    }


# --- students ---

def test_student_list_filters(admin_client, make_student, university):
    make_student(name="Verified", is_verified=True, university_id=university.id)
    make_student(name="Unverified", college="Other College")

    def names(**params):
        return sorted(s["name"] for s in admin_client.get("/api/admin/students", params=params).json()["items"])

    assert names() == ["Unverified", "Verified"]
    assert names(verified="true") == ["Verified"]
    assert names(verified="false") == ["Unverified"]
    assert names(universityId=university.id) == ["Verified"]
    assert names(search="other college") == ["Unverified"]


def test_verify_student(admin_client, student):
    r = admin_client.patch(f"/api/admin/students/{student.id}", json={"isVerified": True})
    assert r.status_code == 200
    assert r.json()["isVerified"] is True


def test_move_student_to_unknown_university_is_404(admin_client, student):
    r = admin_client.patch(f"/api/admin/students/{student.id}", json={"universityId": "ghost"})
    assert r.status_code == 404


def test_detach_student_from_university(admin_client, make_student, university):
    s = make_student(university_id=university.id)
    r = admin_client.patch(f"/api/admin/students/{s.id}", json={"universityId": None})
    assert r.status_code == 200
    assert r.json()["universityId"] is None


def test_delete_student(admin_client, student, employer, make_job, make_event):
    job = make_job(employer)
    event = make_event()
    admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": student.id})
    assert admin_client.delete(f"/api/admin/students/{student.id}").status_code == 200
    assert admin_client.get(f"/api/admin/students/{student.id}").status_code == 404
    assert admin_client.get(f"/api/admin/events/{event.id}/registrations").json()["count"] == 0
    assert admin_client.get(f"/api/admin/jobs/{job.id}").status_code == 200


# --- employers ---

def test_employer_list_includes_job_counts(admin_client, employer, make_employer, make_job):
    make_job(employer)
    make_job(employer)
    make_employer(company="Globex")

    data = admin_client.get("/api/admin/employers").json()
    counts = {e["company"]: e["jobCount"] for e in data["items"]}
    assert counts == {"Acme": 2, "Globex": 0}

    data = admin_client.get("/api/admin/employers", params={"search": "globex"}).json()
    assert [e["company"] for e in data["items"]] == ["Globex"]


def test_employer_detail_lists_jobs(admin_client, employer, make_job):
    make_job(employer, title="Only job")
    data = admin_client.get(f"/api/admin/employers/{employer.id}").json()
    assert data["jobCount"] == 1
    assert [j["title"] for j in data["jobs"]] == ["Only job"]


def test_delete_employer_removes_jobs(admin_client, employer, make_job, db_session):
    make_job(employer)
    assert admin_client.delete(f"/api/admin/employers/{employer.id}").status_code == 200
    db_session.expire_all()
    assert db_session.query(Employer).count() == 0
    assert db_session.query(Job).count() == 0


# --- resources ---

RESOURCE_BODY = {
    "title": "Resume guide",
    "description": "How to write a resume",
    "type": "PDF",
    "category": "Careers",
    "fileUrl": "https://example.com/resume.pdf",
}


def test_resource_crud(admin_client):
    r = admin_client.post("/api/admin/resources", json=RESOURCE_BODY)
    assert r.status_code == 201
    resource_id = r.json()["id"]

    r = admin_client.patch(f"/api/admin/resources/{resource_id}", json={"category": "Interviews"})
    assert r.json()["category"] == "Interviews"

    assert admin_client.delete(f"/api/admin/resources/{resource_id}").status_code == 200
    assert admin_client.get(f"/api/admin/resources/{resource_id}").status_code == 404


def test_resource_listing_filters_and_facets(client, admin_client, db_session):
    db_session.add_all([
        Resource(title="Guide", description="d", type="PDF", category="Careers", file_url="u1"),
        Resource(title="Talk", description="d", type="VIDEO", category="Careers", file_url="u2"),
        Resource(title="Sheet", description="d", type="PDF", category="Interviews", file_url="u3"),
    ])
    db_session.commit()

    data = client.get("/api/resources", params={"type": "PDF"}).json()
    assert sorted(r["title"] for r in data["items"]) == ["Guide", "Sheet"]
    assert data["categories"] == ["Careers", "Interviews"]
    assert data["types"] == ["PDF", "VIDEO"]
    assert data["pagination"]["pageSize"] == 12

    data = client.get("/api/resources", params={"type": "PDF", "category": "Careers"}).json()
    assert [r["title"] for r in data["items"]] == ["Guide"]

    data = admin_client.get("/api/admin/resources", params={"search": "talk"}).json()
    assert [r["title"] for r in data["items"]] == ["Talk"]
    assert data["pagination"]["pageSize"] == 10


def test_resource_detail_requires_student(client, student_client, db_session):
    resource = Resource(title="Guide", description="d", type="PDF", category="Careers", file_url="u1")
    db_session.add(resource)
    db_session.commit()
    assert client.get(f"/api/resources/{resource.id}").status_code == 401
    assert student_client.get(f"/api/resources/{resource.id}").json()["fileUrl"] == "u1"
