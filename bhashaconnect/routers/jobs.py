# jobs.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.routers.dependencies import get_current_caller, get_page_params
from bhashaconnect.schemas.common import Acknowledgement, Envelope
from bhashaconnect.schemas.job import JobItem, JobList, JobRead
from bhashaconnect.services.jobs import job_service
from bhashaconnect.services.pagination import PageParams
from bhashaconnect.services.permissions import Caller


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=Envelope[JobList])
def list_jobs(
    category: str | None = Query(default=None, description="Case-insensitive substring"),
    location: str | None = Query(default=None, description="Case-insensitive substring"),
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[JobList]:
    filters = {"category": category, "location": location, "language": language}
    rows, pagination = job_service.list(db, filters, params)
    return Envelope(data=JobList(jobs=[JobRead.model_validate(r) for r in rows], pagination=pagination))


@router.get("/{job_id}", response_model=Envelope[JobItem])
def get_job(job_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Envelope[JobItem]:
    job = job_service.get(db, job_id)
    return Envelope(data=JobItem(job=JobRead.model_validate(job)))


@router.post("", response_model=Envelope[JobItem], status_code=status.HTTP_201_CREATED)
def create_job(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Envelope[JobItem]:
    job = job_service.create(db, payload, caller)
    return Envelope(message="Job created successfully", data=JobItem(job=JobRead.model_validate(job)))


@router.put("/{job_id}", response_model=Envelope[JobItem])
def update_job(
    job_id: int = Path(..., ge=1),
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Envelope[JobItem]:
    job = job_service.update(db, job_id, payload, caller)
    return Envelope(message="Job updated successfully", data=JobItem(job=JobRead.model_validate(job)))


@router.delete("/{job_id}", response_model=Acknowledgement)
def delete_job(
    job_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Acknowledgement:
    job_service.delete(db, job_id, caller)
    return Acknowledgement(message="Job deleted successfully")
