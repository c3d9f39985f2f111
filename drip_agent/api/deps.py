"""
FastAPI dependencies for the pipeline components held on app state.
"""

from fastapi import HTTPException, Request, status

from drip_agent.agents.orchestrator import JobOrchestrator
from drip_agent.catalog.store import CatalogStore


async def get_orchestrator(request: Request) -> JobOrchestrator:
    """Return the job orchestrator built during application startup."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analysis pipeline not initialized",
        )
    return orchestrator


async def get_catalog(request: Request) -> CatalogStore:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog not initialized",
        )
    return catalog
