"""
FastAPI application main entry point.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drip_agent.agents.orchestrator import build_orchestrator
from drip_agent.api.routes import analysis_router
from drip_agent.catalog.store import CatalogStore
from drip_agent.core.config import settings
from drip_agent.core.llm_clients import LLMClient
from drip_agent.core.logging_config import configure_logging
from drip_agent.core.store import build_job_store

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Builds the pipeline on startup; drains jobs and closes the store on shutdown.
    """
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Starting Drip Agent", environment=settings.environment)

    store = build_job_store(settings)
    await store.connect()
    logger.info("Job store connected", backend=settings.store_backend)

    catalog = CatalogStore()
    llm = LLMClient(settings)

    app.state.catalog = catalog
    app.state.orchestrator = build_orchestrator(settings, llm, store, catalog)

    yield

    logger.info("Shutting down Drip Agent")
    await app.state.orchestrator.shutdown()
    await store.disconnect()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Drip Agent: social-profile style analysis.

    Reads a social handle, infers its vibe, color season and local weather,
    maps it to fashion archetypes and builds a ranked lookbook of products.
    """,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
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

app.include_router(analysis_router, prefix=settings.api_v1_prefix)


# Health check endpoint
@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
    }


# Root endpoint
@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "endpoints": {
            "analyze": f"{settings.api_v1_prefix}/analyze",
            "status": f"{settings.api_v1_prefix}/status/{{job_id}}",
            "lookbook": f"{settings.api_v1_prefix}/lookbook/{{lookbook_id}}",
            "catalog": f"{settings.api_v1_prefix}/catalog",
        },
    }
