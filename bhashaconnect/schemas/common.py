from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from bhashaconnect.services.pagination import Pagination


DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Uniform response wrapper: ``{success, data?, message?, errors?}``."""

    success: bool = True
    message: str | None = None
    data: DataT | None = None
    errors: list[str] | None = None


class Acknowledgement(BaseModel):
    success: bool = True
    message: str


__all__ = ["Acknowledgement", "Envelope", "Pagination"]
