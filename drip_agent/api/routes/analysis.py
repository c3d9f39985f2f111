"""
Analysis API endpoints: start a job, poll its status, fetch the lookbook.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from drip_agent.agents.orchestrator import JobOrchestrator
from drip_agent.api.deps import get_catalog, get_orchestrator
from drip_agent.catalog.store import CatalogStore
from drip_agent.models.job import AnalysisJob, Lookbook
from drip_agent.services.profile_source import clean_handle

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["analysis"])

DEFAULT_HANDLE = "demo_user"


class AnalyzeRequest(BaseModel):
    """Request to analyze a handle, or pasted posts when scraping is unavailable."""
    handle: Optional[str] = Field(None, max_length=100)
    direct_input: Optional[str] = Field(None, max_length=20000)


class AnalyzeResponse(BaseModel):
    job_id: str
    handle: str


class CatalogStats(BaseModel):
    archetypes: int
    products: int
    seeded: bool


@router.post("/analyze", response_model=AnalyzeResponse)
async def start_analysis(
    request: AnalyzeRequest,
    orchestrator: JobOrchestrator = Depends(get_orchestrator),
) -> AnalyzeResponse:
    """
    Start an analysis job.

    Returns immediately with the job id; poll `/status/{job_id}` for progress.
    """
    handle = clean_handle(request.handle or "")
    direct_input = (request.direct_input or "").strip() or None

    if not handle and not direct_input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Handle or direct_input required",
        )

    handle = handle or DEFAULT_HANDLE
    logger.info("Starting analysis", handle=handle)

    job_id = await orchestrator.start_analysis(handle, direct_input)
    return AnalyzeResponse(job_id=job_id, handle=handle)


@router.get("/status/{job_id}", response_model=AnalysisJob)
async def get_status(
    job_id: str,
    orchestrator: JobOrchestrator = Depends(get_orchestrator),
) -> AnalysisJob:
    job = await orchestrator.get_job_status(job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.get("/lookbook/{lookbook_id}", response_model=Lookbook)
async def get_lookbook(
    lookbook_id: str,
    orchestrator: JobOrchestrator = Depends(get_orchestrator),
) -> Lookbook:
    lookbook = await orchestrator.get_lookbook(lookbook_id)
    if lookbook is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lookbook not found")
    return lookbook


@router.get("/catalog", response_model=CatalogStats)
async def get_catalog_stats(catalog: CatalogStore = Depends(get_catalog)) -> CatalogStats:
    """Archetype and product counts for the loaded catalog."""
    return CatalogStats(**await catalog.stats())
