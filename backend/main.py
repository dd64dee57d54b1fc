"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api.v1.admin import (
    analytics as admin_analytics,
    employers as admin_employers,
    events as admin_events,
    jobs as admin_jobs,
    overview as admin_overview,
    resources as admin_resources,
    students as admin_students,
    universities as admin_universities,
)
from backend.app.api.v1.auth import routes as auth_routes
from backend.app.api.v1.events import routes as event_routes
from backend.app.api.v1.jobs import routes as job_routes
from backend.app.api.v1.resources import routes as resource_routes
from backend.app.api.v1.students import routes as student_routes
from backend.app.api.v1.tracking import routes as tracking_routes
from backend.app.api.v1.universities import routes as university_routes
from backend.app.core.config import settings
from backend.app.core.exceptions import PortalException
from backend.app.core.logging_config import get_logger, setup_logging
from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.utils import cache

# Import models so they register with Base.metadata
import backend.app.models  # noqa: F401

setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns migrations; create_all only fills in a fresh database
    Base.metadata.create_all(bind=engine)
    await cache.connect()
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield
    await cache.close()


# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Student career portal: jobs, events, resources, universities and visitor analytics",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PortalException)
async def portal_exception_handler(request: Request, exc: PortalException):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Validation failed %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Missing or invalid fields", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Include routers
for module in (
    auth_routes,
    tracking_routes,
    job_routes,
    event_routes,
    resource_routes,
    university_routes,
    student_routes,
    admin_analytics,
    admin_overview,
    admin_jobs,
    admin_students,
    admin_employers,
    admin_universities,
    admin_events,
    admin_resources,
):
    app.include_router(module.router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": f"{settings.app_name} API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
