import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from multievent.config import settings
from multievent.core.exceptions import RepositoryException
from multievent.core.logging import configure_logging
from multievent.models.errors import ErrorResponse

# IMPORT ROUTERS
from multievent.routers.achievements import router as achievements_router
from multievent.routers.events import router as events_router
from multievent.routers.health import router as health_router
from multievent.routers.performances import router as performances_router
from multievent.routers.performances import validation_exception_handler
from multievent.routers.scoring import router as scoring_router
from multievent.services.cache import reset_cache

configure_logging(settings)
logger = logging.getLogger(__name__)


# SWAGGER UI: tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Events", "description": "Competition and event configuration"},
    {"name": "Scoring", "description": "Result to points and back"},
    {"name": "Performances", "description": "Saved performances"},
    {"name": "Achievements", "description": "Badges unlocked from the performance history"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def repository_exception_handler(request: Request, exc: RepositoryException):
    logger.exception("Repository failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error_code="INTERNAL_SERVER_ERROR",
            message="An internal error occurred",
        ).model_dump(mode="json"),
    )


# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RepositoryException, repository_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)           # Health
app.include_router(events_router)           # Events
app.include_router(scoring_router)          # Scoring
app.include_router(performances_router)     # Performances
app.include_router(achievements_router)     # Achievements


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    logger.info("Starting %s %s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    logger.info("Swagger UI available at /docs")


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down %s", settings.APP_NAME)
    reset_cache()


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "multievent.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
