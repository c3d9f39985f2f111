"""
Typed failures raised across the analysis pipeline.

Components either recover internally with a fallback or raise one of these;
the job orchestrator catches them once at the top of a job's processing.
"""

from typing import Optional


class DripAgentError(Exception):
    """Base class for all pipeline errors."""


class LLMProviderError(DripAgentError):
    """The inference endpoint failed or returned nothing."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class StructuredOutputError(DripAgentError):
    """Inference output could not be parsed into the expected structure."""


class ProfileSourceError(DripAgentError):
    """Profile acquisition failed."""

    def __init__(self, message: str, handle: Optional[str] = None):
        super().__init__(message)
        self.handle = handle


class ProfileNotFoundError(ProfileSourceError):
    """The handle does not resolve to a profile."""


class ProfileRateLimitedError(ProfileSourceError):
    """The scraping collaborator refused the request."""


class ProfileTimeoutError(ProfileSourceError):
    """The scraping collaborator did not answer in time."""


class WeatherLookupError(DripAgentError):
    """The external weather lookup failed."""


class PersonalityInferenceError(DripAgentError):
    """Personality analysis failed; fatal for the job."""


class JobNotFoundError(DripAgentError):
    """No analysis job with the given id."""
