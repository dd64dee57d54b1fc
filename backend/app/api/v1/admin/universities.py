"""
Admin universities API - CRUD, guarded delete and display ordering
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.logging_config import get_logger
from backend.app.models.university import University
from backend.app.schemas.catalog import (
    UniversityCreate,
    UniversityOut,
    UniversityReorderIn,
    UniversityUpdate,
)
from backend.app.schemas.common import MessageResponse, Page, patch_fields
from backend.app.services.university_service import UniversityService
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

logger = get_logger("api.admin.universities")
router = APIRouter(prefix="/admin/universities", tags=["admin"], dependencies=[Depends(get_current_admin)])

UNIVERSITY_FILTERS = FilterSpec(
    search_fields=(University.name, University.location),
    boolean_fields={"isPartner": University.is_partner},
)

NULLABLE_FIELDS = ("website", "logo_url", "description", "partnership_benefits")


def _with_count(university: University, count: int) -> UniversityOut:
    return UniversityOut.model_validate(university).model_copy(update={"student_count": count})


@router.get("", response_model=Page[UniversityOut])
def list_universities(
    search: str | None = Query(None),
    is_partner: bool | None = Query(None, alias="isPartner"),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    query = UNIVERSITY_FILTERS.apply(db.query(University), {"search": search, "isPartner": is_partner})
    universities, pagination = paginate(
        query, paging.page, paging.page_size, (University.display_order, University.name, University.id)
    )
    counts = UniversityService.student_counts(db, [u.id for u in universities])
    return Page[UniversityOut](
        items=[_with_count(u, counts.get(u.id, 0)) for u in universities],
        pagination=pagination,
    )


@router.post("", response_model=UniversityOut, status_code=status.HTTP_201_CREATED)
def create_university(payload: UniversityCreate, db: Session = Depends(get_db)):
    university = University(**payload.model_dump())
    db.add(university)
    db.commit()
    db.refresh(university)
    logger.info("University created university_id=%s", university.id)
    return _with_count(university, 0)


@router.post("/reorder", response_model=MessageResponse)
def reorder_universities(payload: UniversityReorderIn, db: Session = Depends(get_db)):
    """Set display_order from list position"""
    UniversityService.reorder(db, [item.id for item in payload.universities])
    return MessageResponse(message="Universities reordered successfully")


@router.get("/{university_id}", response_model=UniversityOut)
def get_university(university_id: str, db: Session = Depends(get_db)):
    university = UniversityService.get_university(db, university_id)
    count = UniversityService.student_counts(db, [university.id]).get(university.id, 0)
    return _with_count(university, count)


@router.patch("/{university_id}", response_model=UniversityOut)
def update_university(university_id: str, payload: UniversityUpdate, db: Session = Depends(get_db)):
    university = UniversityService.get_university(db, university_id)
    for key, value in patch_fields(payload, nullable=NULLABLE_FIELDS).items():
        setattr(university, key, value)
    db.commit()
    db.refresh(university)
    count = UniversityService.student_counts(db, [university.id]).get(university.id, 0)
    return _with_count(university, count)


@router.delete("/{university_id}", response_model=MessageResponse)
def delete_university(university_id: str, db: Session = Depends(get_db)):
    """Refused with 400 while any student belongs to the university"""
    UniversityService.delete_university(db, university_id)
    logger.info("University deleted university_id=%s", university_id)
    return MessageResponse(message="University deleted successfully")
