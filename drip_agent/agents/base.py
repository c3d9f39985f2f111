"""
Base agent class with common functionality.
Every inference-backed agent receives its LLM client at construction.
"""

from typing import Optional

import structlog

from drip_agent.core.llm_clients import LLMClient, parse_json_response

logger = structlog.get_logger(__name__)


class BaseAgent:
    """
    Abstract base for the inference agents.

    Subclasses set `name` and implement their own `execute`.
    """

    name: str = "base_agent"
    temperature: Optional[float] = None

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def _complete_json(self, system_prompt: str, user_prompt: str) -> dict:
        """
        One structured-output inference call.

        Raises:
            LLMProviderError: the endpoint failed
            StructuredOutputError: the completion is not a JSON object
        """
        response = await self.llm.complete(
            system_prompt,
            user_prompt,
            json_mode=True,
            temperature=self.temperature,
        )
        return parse_json_response(response)
