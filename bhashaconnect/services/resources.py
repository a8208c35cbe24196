"""Generic CRUD service shared by the four listing resources.

Jobs, training content, marketplace entries and schemes differ only in their
columns, filters and permission rules, so each one is described by a
:class:`ResourceSpec` and served by the same :class:`ResourceService`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from sqlalchemy import false, func, or_
from sqlalchemy.orm import Query, Session, joinedload

from bhashaconnect.errors import PayloadInvalid, PermissionDenied, ResourceNotFound
from bhashaconnect.models.enums import Role
from bhashaconnect.services.pagination import PageParams, Pagination, paginate
from bhashaconnect.services.permissions import Caller, check_permission
from bhashaconnect.services.validation import ResourceConstraints, validate_payload


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListFilter:
    """One optional listing filter.

    ``exact`` compares with ``=`` (case-sensitive, used for language and enums);
    ``contains`` is a case-insensitive substring match.
    ``choices`` limits an exact filter to known values; anything else matches
    no rows instead of reaching an enum column.
    """

    name: str
    column: str
    match: Literal["exact", "contains"] = "exact"
    choices: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    model: type
    constraints: ResourceConstraints
    label: str
    plural_label: str
    filters: tuple[ListFilter, ...] = ()
    search_columns: tuple[str, ...] = ()
    owned: bool = True
    # Rows hidden unless explicitly requested, e.g. inactive schemes.
    active_column: str | None = None
    create_roles: frozenset[Role] | None = None
    mutate_roles: frozenset[Role] | None = None


def like_pattern(term: str) -> str:
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _contains(column: Any, term: str) -> Any:
    return func.lower(column).like(like_pattern(term), escape="\\")


class ResourceService:
    def __init__(self, spec: ResourceSpec) -> None:
        self.spec = spec

    @property
    def model(self) -> type:
        return self.spec.model

    def _column(self, name: str) -> Any:
        return getattr(self.model, name)

    def _base_query(self, db: Session) -> Query:
        query = db.query(self.model)
        if self.spec.owned:
            query = query.options(joinedload(self.model.creator))
        return query

    def _ordering(self) -> tuple[Any, ...]:
        return (self.model.created_at.desc(), self.model.id.desc())

    def apply_filters(self, query: Query, filters: Mapping[str, Any]) -> Query:
        """Apply the listing predicate. Used for both the page and its count."""

        for flt in self.spec.filters:
            value = filters.get(flt.name)
            if value is None or value == "":
                continue
            if flt.choices is not None and value not in flt.choices:
                query = query.filter(false())
                continue
            column = self._column(flt.column)
            if flt.match == "contains":
                query = query.filter(_contains(column, str(value)))
            else:
                query = query.filter(column == value)

        if self.spec.active_column:
            active = filters.get(self.spec.active_column)
            query = query.filter(self._column(self.spec.active_column).is_(True if active is None else bool(active)))
        return query

    def apply_search(self, query: Query, term: str) -> Query:
        clauses = [_contains(self._column(name), term) for name in self.spec.search_columns]
        return query.filter(or_(*clauses))

    # Reads

    def list(self, db: Session, filters: Mapping[str, Any], params: PageParams) -> tuple[list[Any], Pagination]:
        query = self.apply_filters(self._base_query(db), filters)
        return paginate(query, params, *self._ordering())

    def search(
        self,
        db: Session,
        term: str,
        params: PageParams,
        *,
        language: str | None = None,
    ) -> tuple[list[Any], Pagination]:
        query = self.apply_search(self._base_query(db), term)
        # Search only narrows by language; an active-only resource stays active-only.
        query = self.apply_filters(query, {"language": language})
        return paginate(query, params, *self._ordering())

    def get(self, db: Session, item_id: int) -> Any:
        row = self._base_query(db).filter(self.model.id == item_id).first()
        if row is None:
            raise ResourceNotFound(f"{self.spec.label} not found")
        return row

    # Writes

    def _validated(self, payload: Any) -> dict[str, Any]:
        result = validate_payload(payload, self.spec.constraints)
        if not result.ok:
            raise PayloadInvalid(result.messages)
        return result.values

    def _authorize(self, caller: Caller, row: Any, action: str) -> None:
        owner_id = row.created_by if self.spec.owned else None
        decision = check_permission(caller, owner_id, self.spec.mutate_roles)
        if not decision:
            logger.info(
                "%s.%s denied id=%s user=%s reason=%s", self.spec.name, action, row.id, caller.id, decision.reason
            )
            if decision.reason == "ownership":
                raise PermissionDenied(f"You can only {action} your own {self.spec.plural_label}")
            raise PermissionDenied("Insufficient permissions")

    def create(self, db: Session, payload: Any, caller: Caller) -> Any:
        decision = check_permission(caller, None, self.spec.create_roles)
        if not decision:
            raise PermissionDenied("Insufficient permissions")

        values = self._validated(payload)
        if self.spec.owned:
            values["created_by"] = caller.id
        row = self.model(**values)
        db.add(row)
        db.commit()
        logger.info("%s.create id=%s user=%s", self.spec.name, row.id, caller.id)
        return self.get(db, row.id)

    def update(self, db: Session, item_id: int, payload: Any, caller: Caller) -> Any:
        values = self._validated(payload)
        row = self.get(db, item_id)
        self._authorize(caller, row, "update")

        for name, value in values.items():
            setattr(row, name, value)
        db.commit()
        logger.info("%s.update id=%s user=%s", self.spec.name, item_id, caller.id)
        return self.get(db, item_id)

    def delete(self, db: Session, item_id: int, caller: Caller) -> None:
        row = self.get(db, item_id)
        self._authorize(caller, row, "delete")

        db.delete(row)
        db.commit()
        logger.info("%s.delete id=%s user=%s", self.spec.name, item_id, caller.id)
