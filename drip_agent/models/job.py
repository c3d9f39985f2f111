"""
Analysis job record and the lookbook it produces.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from drip_agent.models.enums import JobStatus
from drip_agent.models.product import ShoppingResult
from drip_agent.models.profile import Profile
from drip_agent.models.style import StyleRecommendation
from drip_agent.models.vibe import VibeProfile


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisJob(BaseModel):
    """
    Progress record for one analysis run.

    Mutated in place by the orchestrator at each stage transition;
    terminal once status is complete or error.
    """

    id: str
    handle: str
    status: JobStatus = JobStatus.PENDING
    progress: int = Field(default=0, ge=0, le=100)
    error: Optional[str] = None
    lookbook_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Lookbook(BaseModel):
    """Final bundle for a completed job. Written once, never updated."""

    model_config = ConfigDict(frozen=True)

    id: str
    handle: str
    profile: Profile
    vibe: VibeProfile
    style: StyleRecommendation
    products: ShoppingResult
    created_at: datetime = Field(default_factory=utcnow)
