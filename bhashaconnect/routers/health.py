from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.engine import make_url

from bhashaconnect.config import build_sqlalchemy_db_url, settings
from bhashaconnect.database import engine


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class DBHealthStatus(BaseModel):
    orm: str
    orm_db_url: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check() -> DBHealthStatus:
    orm_status = "ok"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        orm_status = "error"

    orm_url = build_sqlalchemy_db_url(settings)
    try:
        masked = str(make_url(orm_url).set(password="***"))
    except Exception:
        masked = orm_url

    return DBHealthStatus(orm=orm_status, orm_db_url=masked, timestamp=datetime.now(timezone.utc))
