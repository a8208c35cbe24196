from __future__ import annotations

from bhashaconnect.models.enums import Role
from bhashaconnect.services.pagination import PageParams, build_pagination, total_pages
from bhashaconnect.services.permissions import Caller, check_permission


ADMIN = Caller(id=1, role=Role.admin)
OWNER = Caller(id=3, role=Role.entrepreneur)
OTHER = Caller(id=4, role=Role.jobseeker)


def test_owner_and_admin_may_mutate_owned_rows() -> None:
    assert check_permission(OWNER, owner_id=3).allowed
    assert check_permission(ADMIN, owner_id=3).allowed


def test_non_owner_is_denied_for_ownership() -> None:
    decision = check_permission(OTHER, owner_id=3)
    assert not decision
    assert decision.reason == "ownership"


def test_role_gate_runs_before_ownership() -> None:
    decision = check_permission(OTHER, owner_id=4, required_roles={Role.entrepreneur, Role.admin})
    assert not decision.allowed
    assert decision.reason == "role"


def test_admin_only_gate() -> None:
    assert check_permission(ADMIN, required_roles=[Role.admin])
    assert not check_permission(OWNER, required_roles=[Role.admin])


def test_no_constraints_allows_any_caller() -> None:
    assert check_permission(OTHER).allowed


def test_total_pages_is_ceiling() -> None:
    assert total_pages(0, 10) == 0
    assert total_pages(10, 10) == 1
    assert total_pages(11, 10) == 2
    assert total_pages(5, 2) == 3


def test_pagination_serializes_camel_case() -> None:
    pagination = build_pagination(PageParams(page=2, limit=5), total_items=12)
    assert pagination.model_dump(by_alias=True) == {
        "currentPage": 2,
        "totalPages": 3,
        "totalItems": 12,
        "itemsPerPage": 5,
    }
