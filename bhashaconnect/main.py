# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bhashaconnect.config import build_sqlalchemy_db_url, settings
from bhashaconnect.database import Base, engine
from bhashaconnect.errors import register_exception_handlers
from bhashaconnect.models import Job, MarketplaceEntry, Scheme, TrainingContent, User  # noqa: F401 - register tables
from bhashaconnect.routers import auth, health, jobs, marketplace, schemes, training, users


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Local/test sqlite gets its tables on start-up; shared databases are
        # provisioned with scripts/create_tables.py instead.
        if build_sqlalchemy_db_url(settings).startswith("sqlite"):
            Base.metadata.create_all(bind=engine)
        logger.info("%s %s started (environment=%s)", settings.app_name, settings.version, settings.environment)
        yield
        engine.dispose()

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health.router)

    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(jobs.router, prefix=settings.api_prefix)
    application.include_router(training.router, prefix=settings.api_prefix)
    application.include_router(marketplace.router, prefix=settings.api_prefix)
    application.include_router(schemes.router, prefix=settings.api_prefix)
    return application


app = create_app()
