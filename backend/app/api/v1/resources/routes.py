"""
Resources API - public listing of learning material, detail for signed-in students
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from backend.app.core.config import RESOURCES_PAGE_SIZE
from backend.app.core.dependencies import get_current_student_id, get_db
from backend.app.core.exceptions import ResourceNotFound
from backend.app.models.resource import Resource
from backend.app.schemas.catalog import ResourceOut, ResourcePage
from backend.app.utils.pagination import FilterSpec, PageParams, page_params, paginate

router = APIRouter(prefix="/resources", tags=["resources"])

RESOURCE_FILTERS = FilterSpec(
    search_fields=(Resource.title, Resource.description),
    exact_fields={"type": Resource.type, "category": Resource.category},
)


def distinct_values(db: Session, column) -> list[str]:
    return [row[0] for row in db.query(column).distinct().order_by(column).all()]


def resource_page(db: Session, params: dict, paging: PageParams) -> ResourcePage:
    """Filtered page of resources plus the distinct categories and types for filter menus"""
    query = RESOURCE_FILTERS.apply(db.query(Resource), params)
    resources, pagination = paginate(
        query, paging.page, paging.page_size, (Resource.created_at.desc(), Resource.id)
    )
    return ResourcePage(
        items=[ResourceOut.model_validate(r) for r in resources],
        pagination=pagination,
        categories=distinct_values(db, Resource.category),
        types=distinct_values(db, Resource.type),
    )


@router.get("", response_model=ResourcePage)
def list_resources(
    type: str | None = Query(None),
    category: str | None = Query(None),
    paging: PageParams = Depends(page_params(RESOURCES_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    return resource_page(db, {"type": type, "category": category}, paging)


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource(
    resource_id: str,
    student_id: str = Depends(get_current_student_id),
    db: Session = Depends(get_db),
):
    resource = db.query(Resource).filter(Resource.id == resource_id).first()
    if not resource:
        raise ResourceNotFound("Resource")
    return ResourceOut.model_validate(resource)
