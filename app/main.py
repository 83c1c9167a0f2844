"""FastAPI application entry point.

Employee Directory Service - CRUD, search and reporting-hierarchy endpoints
over a single Employee table.
"""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from routers import router as api_router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Employee Directory Service",
    description="""
    Directory of employees and their reporting lines.

    ## Features

    - Create, read, update and delete employees
    - Lightweight id/name listing
    - Nested reporting hierarchy
    - Paginated search with an optional "my circle" filter
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Check if the service is running.",
)
async def health_check() -> dict:
    """Return service health status."""
    return {
        "status": "healthy",
        "service": "employee-directory-service",
        "version": "1.0.0",
    }


# Include API routers
app.include_router(api_router)

logger.info("Employee Directory Service initialized")
