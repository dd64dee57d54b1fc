"""
Resource and university Pydantic schemas
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from backend.app.schemas.common import CamelModel, Page


# --- Resources ---
class ResourceCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    type: str = Field(min_length=1)
    category: str = Field(min_length=1)
    file_url: str = Field(min_length=1)


class ResourceUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    file_url: Optional[str] = None


class ResourceOut(CamelModel):
    id: str
    title: str
    description: str
    type: str
    category: str
    file_url: str
    created_at: Optional[datetime] = None


class ResourcePage(Page[ResourceOut]):
    categories: List[str]
    types: List[str]


# --- Universities ---
class UniversityCreate(CamelModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    website: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    partnership_benefits: Optional[str] = None
    is_partner: bool = False
    is_visible: bool = True
    display_order: int = 0


class UniversityUpdate(CamelModel):
    name: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    partnership_benefits: Optional[str] = None
    is_partner: Optional[bool] = None
    is_visible: Optional[bool] = None
    display_order: Optional[int] = None


class UniversityOut(CamelModel):
    id: str
    name: str
    location: str
    website: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    partnership_benefits: Optional[str] = None
    is_partner: bool
    is_visible: bool
    display_order: int
    student_count: int = 0
    created_at: Optional[datetime] = None


class UniversityOrderItem(CamelModel):
    id: str


class UniversityReorderIn(CamelModel):
    universities: List[UniversityOrderItem]
