"""
Admin jobs API - moderation (approve / reject), edits and deletion
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.logging_config import get_logger
from backend.app.models.job import Job
from backend.app.schemas.common import MessageResponse, Page
from backend.app.schemas.job import JobOut, JobUpdate
from backend.app.services.job_service import JobService
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

logger = get_logger("api.admin.jobs")
router = APIRouter(prefix="/admin/jobs", tags=["admin"], dependencies=[Depends(get_current_admin)])

ADMIN_JOB_FILTERS = FilterSpec(
    search_fields=(Job.title, Job.description, Job.location),
    exact_fields={"status": Job.status, "employerId": Job.employer_id},
)


@router.get("", response_model=Page[JobOut])
def list_jobs(
    search: str | None = Query(None),
    job_status: str | None = Query(None, alias="status"),
    employer_id: str | None = Query(None, alias="employerId"),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    query = ADMIN_JOB_FILTERS.apply(db.query(Job), {
        "search": search,
        "status": job_status,
        "employerId": employer_id,
    })
    jobs, pagination = paginate(query, paging.page, paging.page_size, (Job.created_at.desc(), Job.id))
    return Page[JobOut](items=[JobOut.model_validate(j) for j in jobs], pagination=pagination)


@router.get("/{job_id}", response_model=JobOut)
def get_job(job_id: str, db: Session = Depends(get_db)):
    return JobOut.model_validate(JobService.get_job(db, job_id))


@router.patch("/{job_id}", response_model=JobOut)
def update_job(job_id: str, payload: JobUpdate, db: Session = Depends(get_db)):
    """Edit fields or set status (PENDING, APPROVED, REJECTED)"""
    job = JobService.update_job(db, job_id, payload)
    logger.info("Job updated by admin job_id=%s status=%s", job.id, job.status)
    return JobOut.model_validate(job)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    JobService.delete_job(db, job_id)
    logger.info("Job deleted by admin job_id=%s", job_id)
    return MessageResponse(message="Job deleted successfully")
