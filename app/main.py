"""FastAPI application entry point.

Employee Manager Service - CRUD backend for employee records, serving the
employee manager frontend.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.database import init_db
from config.settings import settings
from routers.v1 import router as v1_router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables before serving requests."""
    init_db()
    yield


# Create FastAPI application
app = FastAPI(
    title="Employee Manager Service",
    description="""
    Backend for managing employee records.

    ## Endpoints

    - List all employees
    - Find an employee by ID
    - Add an employee (a unique employee code is generated)
    - Update an employee
    - Delete an employee
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
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
        "service": "employee-manager-service",
        "version": "1.0.0",
    }


# Include API routers
app.include_router(
    v1_router,
    prefix="/api",
)

logger.info("Employee Manager Service initialized")
