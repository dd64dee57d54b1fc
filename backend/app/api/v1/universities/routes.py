"""
Universities API - visible universities for the public site
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_db
from backend.app.models.university import University
from backend.app.schemas.catalog import UniversityOut

router = APIRouter(prefix="/universities", tags=["universities"])


class UniversityList(BaseModel):
    universities: List[UniversityOut]


@router.get("", response_model=UniversityList)
def list_universities(
    partners: bool = Query(True),
    db: Session = Depends(get_db),
):
    """Visible universities in display order. partners=false lists non-partners instead."""
    universities = (
        db.query(University)
        .filter(University.is_visible.is_(True), University.is_partner == partners)
        .order_by(University.display_order, University.name)
        .all()
    )
    return UniversityList(universities=[UniversityOut.model_validate(u) for u in universities])
