from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bhashaconnect.models.enums import TrainingType
from bhashaconnect.services.pagination import Pagination


class TrainingContentRead(BaseModel):
    id: int
    title: str
    type: TrainingType
    url: str
    language: str
    description: Optional[str] = None
    created_by: int
    created_by_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TrainingContentItem(BaseModel):
    content: TrainingContentRead


class TrainingContentList(BaseModel):
    training_content: list[TrainingContentRead] = Field(alias="trainingContent")
    pagination: Pagination

    model_config = ConfigDict(populate_by_name=True)


class TrainingContentByType(BaseModel):
    content: list[TrainingContentRead]
    pagination: Pagination
