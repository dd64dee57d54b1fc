"""Tests for the shared pagination envelope and filter builder, and their use on list endpoints"""
import pytest

from backend.app.core.exceptions import ValidationFailure
from backend.app.models.job import Job
from backend.app.utils.pagination import FilterSpec, build_pagination, paginate

JOB_FILTERS = FilterSpec(
    search_fields=(Job.title, Job.description),
    exact_fields={"type": Job.type},
    contains_fields={"location": Job.location},
    boolean_fields={"remote": Job.is_remote},
)


def test_build_pagination_middle_page():
    p = build_pagination(page=2, page_size=10, total_count=25)
    assert p.total_pages == 3
    assert p.has_next_page is True
    assert p.has_previous_page is True


def test_build_pagination_last_page():
    p = build_pagination(page=3, page_size=10, total_count=25)
    assert p.has_next_page is False
    assert p.has_previous_page is True


def test_build_pagination_empty():
    p = build_pagination(page=1, page_size=10, total_count=0)
    assert p.total_pages == 0
    assert p.has_next_page is False
    assert p.has_previous_page is False


def test_build_pagination_exact_multiple():
    assert build_pagination(page=1, page_size=5, total_count=10).total_pages == 2


def test_filter_spec_skips_absent_params():
    assert JOB_FILTERS.build({}) == []
    assert JOB_FILTERS.build({"type": "", "location": None, "remote": None}) == []


def test_filter_spec_false_boolean_is_a_filter():
    assert len(JOB_FILTERS.build({"remote": False})) == 1


def test_filters_intersect(db_session, employer, make_job):
    make_job(employer, title="Remote data", type="Internship", location="Pune", is_remote=True)
    make_job(employer, title="Onsite data", type="Internship", location="Pune", is_remote=False)
    make_job(employer, title="Remote design", type="Full-Time", location="Pune", is_remote=True)

    query = db_session.query(Job)
    assert JOB_FILTERS.apply(query, {"remote": True}).count() == 2
    assert JOB_FILTERS.apply(query, {"remote": True, "type": "Internship"}).count() == 1
    assert JOB_FILTERS.apply(query, {"remote": True, "type": "Internship", "search": "design"}).count() == 0


def test_search_is_case_insensitive_and_literal(db_session, employer, make_job):
    make_job(employer, title="100% Remote Analyst")
    make_job(employer, title="Analyst")
    query = db_session.query(Job)
    assert JOB_FILTERS.apply(query, {"search": "analyst"}).count() == 2
    # % is matched literally, not as a wildcard
    assert JOB_FILTERS.apply(query, {"search": "100%"}).count() == 1


def test_paginate_slices_and_counts(db_session, employer, make_job):
    for i in range(7):
        make_job(employer, title=f"Job {i}")
    items, pagination = paginate(db_session.query(Job), page=2, page_size=3, order_by=(Job.title,))
    assert [j.title for j in items] == ["Job 3", "Job 4", "Job 5"]
    assert pagination.total_count == 7
    assert pagination.total_pages == 3


def test_paginate_rejects_non_positive_page(db_session):
    with pytest.raises(ValidationFailure):
        paginate(db_session.query(Job), page=0, page_size=10)
    with pytest.raises(ValidationFailure):
        paginate(db_session.query(Job), page=1, page_size=0)


def test_list_endpoint_envelope(client, employer, make_job):
    for i in range(12):
        make_job(employer, title=f"Job {i}")
    r = client.get("/api/public/jobs", params={"page": 2, "pageSize": 5})
    assert r.status_code == 200
    data = r.json()
    assert len(data["items"]) == 5
    assert data["pagination"] == {
        "page": 2,
        "pageSize": 5,
        "totalCount": 12,
        "totalPages": 3,
        "hasNextPage": True,
        "hasPreviousPage": True,
    }


def test_list_endpoint_default_page_size(client, employer, make_job):
    for i in range(12):
        make_job(employer, title=f"Job {i}")
    data = client.get("/api/public/jobs").json()
    assert data["pagination"]["pageSize"] == 10
    assert len(data["items"]) == 10


def test_page_past_the_end_is_empty(client, employer, make_job):
    make_job(employer)
    data = client.get("/api/public/jobs", params={"page": 5}).json()
    assert data["items"] == []
    assert data["pagination"]["hasNextPage"] is False


def test_invalid_page_size_is_400(client, db_session):
    assert client.get("/api/public/jobs", params={"pageSize": 0}).status_code == 400
    assert client.get("/api/public/jobs", params={"page": "abc"}).status_code == 400
