# schemes.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.routers.dependencies import get_page_params, require_roles
from bhashaconnect.schemas.common import Acknowledgement, Envelope
from bhashaconnect.schemas.scheme import SchemeItem, SchemeList, SchemeRead, SchemeSearchResults
from bhashaconnect.services.pagination import PageParams
from bhashaconnect.services.permissions import Caller
from bhashaconnect.services.schemes import ADMIN_ONLY, scheme_service


router = APIRouter(prefix="/schemes", tags=["schemes"])

require_admin = require_roles(*ADMIN_ONLY)


def _item(row: Any) -> SchemeItem:
    return SchemeItem(scheme=SchemeRead.model_validate(row))


def _list(rows: list[Any]) -> list[SchemeRead]:
    return [SchemeRead.model_validate(r) for r in rows]


@router.get("", response_model=Envelope[SchemeList])
def list_schemes(
    language: str | None = Query(default=None, description="Exact match"),
    category: str | None = Query(default=None, description="Case-insensitive substring"),
    is_active: bool = Query(default=True, description="Inactive schemes are only listed on request"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[SchemeList]:
    filters = {"language": language, "category": category, "is_active": is_active}
    rows, pagination = scheme_service.list(db, filters, params)
    return Envelope(data=SchemeList(schemes=_list(rows), pagination=pagination))


@router.get("/search/{query}", response_model=Envelope[SchemeSearchResults])
def search_schemes(
    query: str = Path(..., min_length=1),
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[SchemeSearchResults]:
    rows, pagination = scheme_service.search(db, query, params, language=language)
    return Envelope(data=SchemeSearchResults(results=_list(rows), pagination=pagination))


@router.get("/category/{category}", response_model=Envelope[SchemeList])
def list_schemes_by_category(
    category: str = Path(..., min_length=1),
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[SchemeList]:
    rows, pagination = scheme_service.list(db, {"category": category, "language": language}, params)
    return Envelope(data=SchemeList(schemes=_list(rows), pagination=pagination))


@router.get("/{scheme_id}", response_model=Envelope[SchemeItem])
def get_scheme(scheme_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Envelope[SchemeItem]:
    return Envelope(data=_item(scheme_service.get(db, scheme_id)))


@router.post("", response_model=Envelope[SchemeItem], status_code=status.HTTP_201_CREATED)
def create_scheme(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_admin),
) -> Envelope[SchemeItem]:
    row = scheme_service.create(db, payload, caller)
    return Envelope(message="Scheme created successfully", data=_item(row))


@router.put("/{scheme_id}", response_model=Envelope[SchemeItem])
def update_scheme(
    scheme_id: int = Path(..., ge=1),
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_admin),
) -> Envelope[SchemeItem]:
    row = scheme_service.update(db, scheme_id, payload, caller)
    return Envelope(message="Scheme updated successfully", data=_item(row))


@router.delete("/{scheme_id}", response_model=Acknowledgement)
def delete_scheme(
    scheme_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_admin),
) -> Acknowledgement:
    scheme_service.delete(db, scheme_id, caller)
    return Acknowledgement(message="Scheme deleted successfully")
