# training.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, status
from sqlalchemy.orm import Session

from bhashaconnect.database import get_db
from bhashaconnect.routers.dependencies import get_page_params, require_roles
from bhashaconnect.schemas.common import Acknowledgement, Envelope
from bhashaconnect.schemas.training import (
    TrainingContentByType,
    TrainingContentItem,
    TrainingContentList,
    TrainingContentRead,
)
from bhashaconnect.services.pagination import PageParams
from bhashaconnect.services.permissions import Caller
from bhashaconnect.services.training import TRAINING_AUTHOR_ROLES, training_service


router = APIRouter(prefix="/training", tags=["training"])

require_author = require_roles(*TRAINING_AUTHOR_ROLES)


def _item(row: Any) -> TrainingContentItem:
    return TrainingContentItem(content=TrainingContentRead.model_validate(row))


@router.get("", response_model=Envelope[TrainingContentList])
def list_training_content(
    content_type: str | None = Query(default=None, alias="type"),
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[TrainingContentList]:
    rows, pagination = training_service.list(db, {"type": content_type, "language": language}, params)
    return Envelope(
        data=TrainingContentList(
            training_content=[TrainingContentRead.model_validate(r) for r in rows],
            pagination=pagination,
        )
    )


@router.get("/type/{content_type}", response_model=Envelope[TrainingContentByType])
def list_training_content_by_type(
    content_type: str,
    language: str | None = Query(default=None, description="Exact match"),
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> Envelope[TrainingContentByType]:
    rows, pagination = training_service.list(db, {"type": content_type, "language": language}, params)
    return Envelope(
        data=TrainingContentByType(
            content=[TrainingContentRead.model_validate(r) for r in rows],
            pagination=pagination,
        )
    )


@router.get("/{content_id}", response_model=Envelope[TrainingContentItem])
def get_training_content(content_id: int = Path(..., ge=1), db: Session = Depends(get_db)) -> Envelope[TrainingContentItem]:
    return Envelope(data=_item(training_service.get(db, content_id)))


@router.post("", response_model=Envelope[TrainingContentItem], status_code=status.HTTP_201_CREATED)
def create_training_content(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_author),
) -> Envelope[TrainingContentItem]:
    row = training_service.create(db, payload, caller)
    return Envelope(message="Training content created successfully", data=_item(row))


@router.put("/{content_id}", response_model=Envelope[TrainingContentItem])
def update_training_content(
    content_id: int = Path(..., ge=1),
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_author),
) -> Envelope[TrainingContentItem]:
    row = training_service.update(db, content_id, payload, caller)
    return Envelope(message="Training content updated successfully", data=_item(row))


@router.delete("/{content_id}", response_model=Acknowledgement)
def delete_training_content(
    content_id: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    caller: Caller = Depends(require_author),
) -> Acknowledgement:
    training_service.delete(db, content_id, caller)
    return Acknowledgement(message="Training content deleted successfully")
