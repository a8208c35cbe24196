from __future__ import annotations

import os
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ.setdefault("JWT_SECRET", "test-secret")

    # Ensure local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["DEBUG"] = "false"


@pytest.fixture()
def app() -> Any:
    from bhashaconnect.database import Base, engine
    from bhashaconnect.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return create_app()


@pytest.fixture()
def client(app: Any) -> Any:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_user(app: Any) -> Callable[..., dict[str, Any]]:
    """Insert a user directly and return its id, role and bearer headers."""

    from bhashaconnect.database import SessionLocal
    from bhashaconnect.models import Role, User
    from bhashaconnect.utils.jwt_handler import create_access_token

    counter = {"n": 0}

    def _make(role: str = "jobseeker", name: str | None = None) -> dict[str, Any]:
        counter["n"] += 1
        n = counter["n"]
        with SessionLocal() as db:
            user = User(
                name=name or f"{role.title()} {n}",
                email=f"{role}{n}@example.com",
                # Login is covered in test_auth.py; these users only need a token.
                password="not-a-real-hash",
                role=Role(role),
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            user_id = user.id
        token = create_access_token({"sub": str(user_id)})
        return {"id": user_id, "role": role, "headers": {"Authorization": f"Bearer {token}"}}

    return _make
