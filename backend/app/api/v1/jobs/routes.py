"""
Jobs API - public job board plus the employer's own postings
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session, joinedload

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_employer_id, get_db
from backend.app.core.logging_config import get_logger
from backend.app.models.enums import JobStatus
from backend.app.models.job import Job
from backend.app.schemas.common import MessageResponse, Page
from backend.app.schemas.job import JobCreate, JobOut
from backend.app.services.job_service import JobService
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

logger = get_logger("api.jobs")
router = APIRouter(tags=["jobs"])

PUBLIC_JOB_FILTERS = FilterSpec(
    search_fields=(Job.title, Job.description, Job.location),
    exact_fields={"type": Job.type},
    contains_fields={"location": Job.location, "degree": Job.required_degree},
    boolean_fields={"remote": Job.is_remote, "paid": Job.is_paid, "shortTerm": Job.is_short_term},
)


class JobCreated(BaseModel):
    message: str
    job: JobOut


class EmployerJobs(BaseModel):
    jobs: List[JobOut]


@router.get("/public/jobs", response_model=Page[JobOut])
def list_public_jobs(
    search: str | None = Query(None),
    type: str | None = Query(None),
    location: str | None = Query(None),
    degree: str | None = Query(None),
    remote: bool | None = Query(None),
    paid: bool | None = Query(None),
    short_term: bool | None = Query(None, alias="shortTerm"),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    """Approved jobs, newest first. Boolean filters apply only when present in the query."""
    query = db.query(Job).options(joinedload(Job.employer)).filter(
        Job.status == JobStatus.APPROVED.value
    )
    query = PUBLIC_JOB_FILTERS.apply(query, {
        "search": search,
        "type": type,
        "location": location,
        "degree": degree,
        "remote": remote,
        "paid": paid,
        "shortTerm": short_term,
    })
    jobs, pagination = paginate(query, paging.page, paging.page_size, (Job.created_at.desc(), Job.id))
    return Page[JobOut](items=[JobOut.model_validate(j) for j in jobs], pagination=pagination)


@router.get("/jobs", response_model=EmployerJobs)
def list_employer_jobs(
    employer_id: str = Depends(get_current_employer_id),
    db: Session = Depends(get_db),
):
    """All jobs posted by the calling employer, any status"""
    jobs = (
        db.query(Job)
        .filter(Job.employer_id == employer_id)
        .order_by(Job.created_at.desc())
        .all()
    )
    return EmployerJobs(jobs=[JobOut.model_validate(j) for j in jobs])


@router.post("/jobs", response_model=JobCreated, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    employer_id: str = Depends(get_current_employer_id),
    db: Session = Depends(get_db),
):
    """
    Post a job. It starts PENDING until an admin approves it.
    An employer can hold at most max_active_jobs_per_employer non-rejected jobs.
    """
    job = JobService.create_job(db, employer_id, payload)
    return JobCreated(message="Job posted successfully", job=JobOut.model_validate(job))


@router.delete("/jobs/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: str,
    employer_id: str = Depends(get_current_employer_id),
    db: Session = Depends(get_db),
):
    JobService.delete_own_job(db, employer_id, job_id)
    logger.info("Job deleted by owner job_id=%s employer_id=%s", job_id, employer_id)
    return MessageResponse(message="Job deleted successfully")
