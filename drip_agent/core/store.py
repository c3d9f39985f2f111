"""
Job and lookbook persistence.

Key-value documents keyed by generated ids. Each job owns its own record,
so partial updates are a plain read-merge-write without transactions.

Key Patterns (Redis backend):
- job:{job_id} - AnalysisJob document (TTL: redis_job_ttl)
- lookbook:{lookbook_id} - Lookbook document (TTL: redis_lookbook_ttl)
"""

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Optional

import redis.asyncio as redis
import structlog

from drip_agent.core.config import Settings
from drip_agent.core.exceptions import JobNotFoundError
from drip_agent.models.job import AnalysisJob, Lookbook, utcnow

logger = structlog.get_logger(__name__)


class JobStore(ABC):
    """Persistence contract used by the job orchestrator."""

    async def connect(self) -> None:
        """Open backend resources."""

    async def disconnect(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def create_job(self, job: AnalysisJob) -> None:
        pass

    @abstractmethod
    async def get_job(self, job_id: str) -> Optional[AnalysisJob]:
        pass

    @abstractmethod
    async def update_job(self, job_id: str, **fields: Any) -> AnalysisJob:
        """
        Merge fields into a stored job and refresh updated_at.

        Raises:
            JobNotFoundError: if the job does not exist
        """

    @abstractmethod
    async def save_lookbook(self, lookbook: Lookbook) -> None:
        pass

    @abstractmethod
    async def get_lookbook(self, lookbook_id: str) -> Optional[Lookbook]:
        pass


class InMemoryJobStore(JobStore):
    """Process-local store for development and tests."""

    def __init__(self):
        self._jobs: dict[str, dict] = {}
        self._lookbooks: dict[str, dict] = {}

    async def create_job(self, job: AnalysisJob) -> None:
        self._jobs[job.id] = job.model_dump(mode="json")

    async def get_job(self, job_id: str) -> Optional[AnalysisJob]:
        data = self._jobs.get(job_id)
        return AnalysisJob.model_validate(copy.deepcopy(data)) if data else None

    async def update_job(self, job_id: str, **fields: Any) -> AnalysisJob:
        data = self._jobs.get(job_id)
        if data is None:
            raise JobNotFoundError(f"Job not found: {job_id}")

        merged = AnalysisJob.model_validate({**data, **fields, "updated_at": utcnow()})
        self._jobs[job_id] = merged.model_dump(mode="json")
        return merged

    async def save_lookbook(self, lookbook: Lookbook) -> None:
        self._lookbooks[lookbook.id] = lookbook.model_dump(mode="json")

    async def get_lookbook(self, lookbook_id: str) -> Optional[Lookbook]:
        data = self._lookbooks.get(lookbook_id)
        return Lookbook.model_validate(copy.deepcopy(data)) if data else None


class RedisJobStore(JobStore):
    """Redis-backed store storing JSON documents with TTLs."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Establish Redis connection."""
        if self._client is None:
            self._client = redis.from_url(
                str(self.settings.redis_url),
                encoding="utf-8",
                decode_responses=True,
            )

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._client:
            await self._client.close()
            self._client = None

    @property
    def client(self) -> redis.Redis:
        """Get Redis client, raising if not connected."""
        if self._client is None:
            raise RuntimeError("Redis not connected. Call connect() first.")
        return self._client

    @staticmethod
    def _job_key(job_id: str) -> str:
        return f"job:{job_id}"

    @staticmethod
    def _lookbook_key(lookbook_id: str) -> str:
        return f"lookbook:{lookbook_id}"

    async def create_job(self, job: AnalysisJob) -> None:
        await self.client.setex(
            self._job_key(job.id),
            self.settings.redis_job_ttl,
            job.model_dump_json(),
        )

    async def get_job(self, job_id: str) -> Optional[AnalysisJob]:
        data = await self.client.get(self._job_key(job_id))
        return AnalysisJob.model_validate_json(data) if data else None

    async def update_job(self, job_id: str, **fields: Any) -> AnalysisJob:
        key = self._job_key(job_id)
        data = await self.client.get(key)
        if not data:
            raise JobNotFoundError(f"Job not found: {job_id}")

        merged = AnalysisJob.model_validate({**json.loads(data), **fields, "updated_at": utcnow()})
        await self.client.setex(key, self.settings.redis_job_ttl, merged.model_dump_json())
        return merged

    async def save_lookbook(self, lookbook: Lookbook) -> None:
        await self.client.setex(
            self._lookbook_key(lookbook.id),
            self.settings.redis_lookbook_ttl,
            lookbook.model_dump_json(),
        )

    async def get_lookbook(self, lookbook_id: str) -> Optional[Lookbook]:
        data = await self.client.get(self._lookbook_key(lookbook_id))
        return Lookbook.model_validate_json(data) if data else None


def build_job_store(settings: Settings) -> JobStore:
    """Create the store selected by settings.store_backend."""
    if settings.store_backend == "redis":
        logger.info("Using Redis job store", url=str(settings.redis_url))
        return RedisJobStore(settings)
    logger.info("Using in-memory job store")
    return InMemoryJobStore()
