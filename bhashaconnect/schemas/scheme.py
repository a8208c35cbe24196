from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bhashaconnect.services.pagination import Pagination


class SchemeRead(BaseModel):
    id: int
    title: str
    description: str
    eligibility: str
    link: Optional[str] = None
    language: str
    category: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SchemeItem(BaseModel):
    scheme: SchemeRead


class SchemeList(BaseModel):
    schemes: list[SchemeRead]
    pagination: Pagination


class SchemeSearchResults(BaseModel):
    results: list[SchemeRead]
    pagination: Pagination
