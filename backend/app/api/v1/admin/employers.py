"""
Admin employers API - employer accounts with their job counts
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.exceptions import ResourceNotFound
from backend.app.core.logging_config import get_logger
from backend.app.models.employer import Employer
from backend.app.models.job import Job
from backend.app.schemas.common import MessageResponse, Page
from backend.app.schemas.job import JobOut
from backend.app.schemas.user import EmployerListItem
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

logger = get_logger("api.admin.employers")
router = APIRouter(prefix="/admin/employers", tags=["admin"], dependencies=[Depends(get_current_admin)])

EMPLOYER_FILTERS = FilterSpec(
    search_fields=(Employer.name, Employer.email, Employer.company, Employer.designation),
)


class EmployerDetail(EmployerListItem):
    jobs: List[JobOut] = []


def _job_counts(db: Session, employer_ids: list[str]) -> dict[str, int]:
    if not employer_ids:
        return {}
    rows = (
        db.query(Job.employer_id, func.count(Job.id))
        .filter(Job.employer_id.in_(employer_ids))
        .group_by(Job.employer_id)
        .all()
    )
    return {row[0]: row[1] for row in rows}


def _get_employer(db: Session, employer_id: str) -> Employer:
    employer = db.query(Employer).filter(Employer.id == employer_id).first()
    if not employer:
        raise ResourceNotFound("Employer")
    return employer


@router.get("", response_model=Page[EmployerListItem])
def list_employers(
    search: str | None = Query(None),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    query = EMPLOYER_FILTERS.apply(db.query(Employer), {"search": search})
    employers, pagination = paginate(
        query, paging.page, paging.page_size, (Employer.created_at.desc(), Employer.id)
    )
    counts = _job_counts(db, [e.id for e in employers])
    items = [
        EmployerListItem.model_validate(e).model_copy(update={"job_count": counts.get(e.id, 0)})
        for e in employers
    ]
    return Page[EmployerListItem](items=items, pagination=pagination)


@router.get("/{employer_id}", response_model=EmployerDetail)
def get_employer(employer_id: str, db: Session = Depends(get_db)):
    employer = _get_employer(db, employer_id)
    jobs = [JobOut.model_validate(j) for j in employer.jobs]
    return EmployerDetail.model_validate(employer).model_copy(
        update={"jobs": jobs, "job_count": len(jobs)}
    )


@router.delete("/{employer_id}", response_model=MessageResponse)
def delete_employer(employer_id: str, db: Session = Depends(get_db)):
    """Delete an employer and every job they posted"""
    db.delete(_get_employer(db, employer_id))
    db.commit()
    logger.info("Employer deleted employer_id=%s", employer_id)
    return MessageResponse(message="Employer deleted successfully")
