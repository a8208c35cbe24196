from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from bhashaconnect.services.pagination import Pagination


class JobRead(BaseModel):
    id: int
    title: str
    description: str
    category: str
    location: str
    language: str
    created_by: int
    created_by_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class JobItem(BaseModel):
    job: JobRead


class JobList(BaseModel):
    jobs: list[JobRead]
    pagination: Pagination
