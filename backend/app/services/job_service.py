"""
Job service - posting limits, ownership checks and admin moderation
"""
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.exceptions import ForbiddenAction, ResourceNotFound
from backend.app.core.logging_config import get_logger
from backend.app.models.employer import Employer
from backend.app.models.enums import JobStatus
from backend.app.models.job import Job
from backend.app.schemas.common import patch_fields
from backend.app.schemas.job import JobCreate, JobUpdate

logger = get_logger("services.job")


class JobService:
    @staticmethod
    def get_job(db: Session, job_id: str) -> Job:
        job = db.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise ResourceNotFound("Job")
        return job

    @staticmethod
    def active_job_count(db: Session, employer_id: str) -> int:
        """Jobs that count towards the posting limit (everything not rejected)"""
        return (
            db.query(Job)
            .filter(Job.employer_id == employer_id, Job.status != JobStatus.REJECTED.value)
            .count()
        )

    @staticmethod
    def create_job(db: Session, employer_id: str, payload: JobCreate) -> Job:
        """Create a PENDING job, refusing once the employer holds the maximum of active jobs"""
        employer = db.query(Employer).filter(Employer.id == employer_id).first()
        if not employer:
            raise ResourceNotFound("Employer")

        limit = settings.max_active_jobs_per_employer
        if JobService.active_job_count(db, employer_id) >= limit:
            logger.warning("Job limit reached employer_id=%s limit=%s", employer_id, limit)
            raise ForbiddenAction(f"You have reached the maximum limit of {limit} job postings")

        job = Job(employer_id=employer_id, status=JobStatus.PENDING.value, **payload.model_dump())
        db.add(job)
        db.commit()
        db.refresh(job)
        logger.info("Job created job_id=%s employer_id=%s", job.id, employer_id)
        return job

    @staticmethod
    def delete_own_job(db: Session, employer_id: str, job_id: str) -> None:
        job = JobService.get_job(db, job_id)
        if job.employer_id != employer_id:
            raise ForbiddenAction("You are not authorized to delete this job")
        db.delete(job)
        db.commit()

    @staticmethod
    def update_job(db: Session, job_id: str, payload: JobUpdate) -> Job:
        job = JobService.get_job(db, job_id)
        for key, value in patch_fields(payload, nullable=("required_degree",)).items():
            if key == "status":
                value = JobStatus(value).value
            setattr(job, key, value)
        db.commit()
        db.refresh(job)
        return job

    @staticmethod
    def delete_job(db: Session, job_id: str) -> None:
        job = JobService.get_job(db, job_id)
        db.delete(job)
        db.commit()
