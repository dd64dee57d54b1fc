"""
Admin resources API - CRUD over learning material
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from backend.app.api.v1.resources.routes import resource_page
from backend.app.core.config import DEFAULT_PAGE_SIZE
from backend.app.core.dependencies import get_current_admin, get_db
from backend.app.core.exceptions import ResourceNotFound
from backend.app.models.resource import Resource
from backend.app.schemas.catalog import ResourceCreate, ResourceOut, ResourcePage, ResourceUpdate
from backend.app.schemas.common import MessageResponse, patch_fields
from backend.app.utils.pagination import PageParams, page_params

router = APIRouter(prefix="/admin/resources", tags=["admin"], dependencies=[Depends(get_current_admin)])


def _get_resource(db: Session, resource_id: str) -> Resource:
    resource = db.query(Resource).filter(Resource.id == resource_id).first()
    if not resource:
        raise ResourceNotFound("Resource")
    return resource


@router.get("", response_model=ResourcePage)
def list_resources(
    search: str | None = Query(None),
    type: str | None = Query(None),
    category: str | None = Query(None),
    paging: PageParams = Depends(page_params(DEFAULT_PAGE_SIZE)),
    db: Session = Depends(get_db),
):
    return resource_page(db, {"search": search, "type": type, "category": category}, paging)


@router.post("", response_model=ResourceOut, status_code=status.HTTP_201_CREATED)
def create_resource(payload: ResourceCreate, db: Session = Depends(get_db)):
    resource = Resource(**payload.model_dump())
    db.add(resource)
    db.commit()
    db.refresh(resource)
    return ResourceOut.model_validate(resource)


@router.get("/{resource_id}", response_model=ResourceOut)
def get_resource(resource_id: str, db: Session = Depends(get_db)):
    return ResourceOut.model_validate(_get_resource(db, resource_id))


@router.patch("/{resource_id}", response_model=ResourceOut)
def update_resource(resource_id: str, payload: ResourceUpdate, db: Session = Depends(get_db)):
    resource = _get_resource(db, resource_id)
    for key, value in patch_fields(payload).items():
        setattr(resource, key, value)
    db.commit()
    db.refresh(resource)
    return ResourceOut.model_validate(resource)


@router.delete("/{resource_id}", response_model=MessageResponse)
def delete_resource(resource_id: str, db: Session = Depends(get_db)):
    db.delete(_get_resource(db, resource_id))
    db.commit()
    return MessageResponse(message="Resource deleted successfully")
