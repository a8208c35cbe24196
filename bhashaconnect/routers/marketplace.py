# marketplace.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.routers.dependencies import get_current_caller, get_page_params
from bhashaconnect.schemas.common import Acknowledgement, Envelope
from bhashaconnect.schemas.marketplace import (
    MarketplaceEntryItem,
    MarketplaceEntryList,
    MarketplaceEntryRead,
    MarketplaceSearchResults,
)
from bhashaconnect.services.marketplace import marketplace_service
from bhashaconnect.services.pagination import PageParams
from bhashaconnect.services.permissions import Caller


router = APIRouter(prefix="/marketplace", tags=["marketplace"])


def _item(row: Any) -> MarketplaceEntryItem:
    return MarketplaceEntryItem(entry=MarketplaceEntryRead.model_validate(row))


@router.get("", response_model=Envelope[MarketplaceEntryList])
def list_marketplace_entries(
    language: str | None = Query(default=None, description="Exact match"),
    location: str | None = Query(default=None, description="Case-insensitive substring"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[MarketplaceEntryList]:
    rows, pagination = marketplace_service.list(db, {"language": language, "location": location}, params)
    return Envelope(
        data=MarketplaceEntryList(
            marketplace=[MarketplaceEntryRead.model_validate(r) for r in rows],
            pagination=pagination,
        )
    )


@router.get("/search/{query}", response_model=Envelope[MarketplaceSearchResults])
def search_marketplace(
    query: str = Path(..., min_length=1),
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[MarketplaceSearchResults]:
    rows, pagination = marketplace_service.search(db, query, params, language=language)
    return Envelope(
        data=MarketplaceSearchResults(
            results=[MarketplaceEntryRead.model_validate(r) for r in rows],
            pagination=pagination,
        )
    )


@router.get("/{entry_id}", response_model=Envelope[MarketplaceEntryItem])
def get_marketplace_entry(entry_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Envelope[MarketplaceEntryItem]:
    return Envelope(data=_item(marketplace_service.get(db, entry_id)))


@router.post("", response_model=Envelope[MarketplaceEntryItem], status_code=status.HTTP_201_CREATED)
def create_marketplace_entry(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Envelope[MarketplaceEntryItem]:
    row = marketplace_service.create(db, payload, caller)
    return Envelope(message="Marketplace entry created successfully", data=_item(row))


@router.put("/{entry_id}", response_model=Envelope[MarketplaceEntryItem])
def update_marketplace_entry(
    entry_id: int = Path(..., ge=1),
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Envelope[MarketplaceEntryItem]:
    row = marketplace_service.update(db, entry_id, payload, caller)
    return Envelope(message="Marketplace entry updated successfully", data=_item(row))


@router.delete("/{entry_id}", response_model=Acknowledgement)
def delete_marketplace_entry(
    entry_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    caller: Caller = Depends(get_current_caller),
) -> Acknowledgement:
    marketplace_service.delete(db, entry_id, caller)
    return Acknowledgement(message="Marketplace entry deleted successfully")
