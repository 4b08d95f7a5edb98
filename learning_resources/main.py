"""
Learning Resources Backend — FastAPI application entry point.

This module initializes the FastAPI application behind the learning
resource catalog. It configures logging and CORS, connects to MongoDB,
seeds the demonstration dataset into an empty store, and registers the
API routes for resources and categories.

Run locally with:
    uvicorn learning_resources.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from learning_resources.config import get_settings
from learning_resources.db.client import close_mongo, init_mongo
from learning_resources.db.seed import SAMPLE_RESOURCES
from learning_resources.routes import categories_routes, resources_routes
from learning_resources.services.resources_service import seed_if_empty

API_VERSION = "1.0.0"

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# Application lifespan
# ------------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to MongoDB on startup and disconnect on shutdown.

    When `SEED_ON_STARTUP` is enabled the demonstration dataset is inserted
    if the resource collection is empty. A storage failure while seeding is logged
    and startup continues; later requests report it as a 500.
    """

    await init_mongo()
    if settings.seed_on_startup:
        try:
            await seed_if_empty(SAMPLE_RESOURCES)
        except PyMongoError:
            logger.exception("Seeding skipped: MongoDB is unavailable")
    yield
    close_mongo()

# ------------------------------------------------------------------------------
# Application initialization
# ------------------------------------------------------------------------------

app = FastAPI(
    title="Learning Resource Management System",
    description="API to browse, search and upload educational resources",
    version=API_VERSION,
    lifespan=lifespan,
)

# ------------------------------------------------------------------------------
# Middleware configuration
# ------------------------------------------------------------------------------

# CORS middleware: allows the single-page frontend to call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------------------------------------------------------
# Error handlers
# ------------------------------------------------------------------------------

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Report invalid request data as a 400 response with messages per field.

    Example response:
        {
            "message": "Invalid resource data",
            "errors": {"type": ["Input should be 'ebook', 'lecture-notes', ..."]}
        }
    """

    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.info("Rejected invalid request to %s: %s", request.url.path, errors)
    return JSONResponse(status_code=400, content={"message": "Invalid resource data", "errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# ------------------------------------------------------------------------------
# API routes registration
# ------------------------------------------------------------------------------

app.include_router(resources_routes.router, prefix="/api/resources", tags=["Resources"])
app.include_router(categories_routes.router, prefix="/api/categories", tags=["Categories"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Liveness probe."""

    return {"status": "healthy", "version": API_VERSION}
