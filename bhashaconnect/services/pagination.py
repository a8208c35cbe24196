from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Query


@dataclass(frozen=True)
class PageParams:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_items: int = Field(alias="totalItems")
    items_per_page: int = Field(alias="itemsPerPage")

    model_config = ConfigDict(populate_by_name=True)


def total_pages(total_items: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total_items / limit)


def build_pagination(params: PageParams, total_items: int) -> Pagination:
    return Pagination(
        current_page=params.page,
        total_pages=total_pages(total_items, params.limit),
        total_items=total_items,
        items_per_page=params.limit,
    )


def paginate(query: Query, params: PageParams, *order_by: Any) -> tuple[list[Any], Pagination]:
    """Count and slice one already-filtered query.

    Counting the same query that produces the page keeps ``totalItems`` and the
    returned rows consistent for every filter combination.
    """

    total_items = query.order_by(None).count()
    rows = query.order_by(*order_by).offset(params.offset).limit(params.limit).all()
    return rows, build_pagination(params, int(total_items))
