"""Core infrastructure modules"""

from drip_agent.core.config import Settings, get_settings, settings
from drip_agent.core.llm_clients import LLMClient
from drip_agent.core.store import InMemoryJobStore, JobStore, RedisJobStore, build_job_store

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "LLMClient",
    "JobStore",
    "InMemoryJobStore",
    "RedisJobStore",
    "build_job_store",
]
