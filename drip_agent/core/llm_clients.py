"""
LLM client abstraction for OpenAI-compatible endpoints (Fireworks, OpenAI) and Anthropic.
Provides unified interface with retry logic, token tracking, and cost estimation.
"""

import asyncio
import json
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

import structlog
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI
from pydantic import BaseModel
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from drip_agent.core.config import Settings, get_settings
from drip_agent.core.exceptions import LLMProviderError, StructuredOutputError

logger = structlog.get_logger(__name__)

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    FIREWORKS = "fireworks"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class LLMMessage(BaseModel):
    """Message format for LLM conversations."""
    role: str  # "system", "user", "assistant"
    content: str


class LLMResponse(BaseModel):
    """Standardized LLM response."""
    content: str
    model: str
    provider: LLMProvider
    tokens_used: int
    prompt_tokens: int
    completion_tokens: int
    estimated_cost: float


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients."""

    PRICING: dict[str, dict[str, float]] = {}
    DEFAULT_PRICING_MODEL: str = ""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _estimate_cost(self, model: str, prompt_tokens: int, completion_tokens: int) -> float:
        """Estimate cost based on token usage."""
        pricing = self.PRICING.get(model) or self.PRICING.get(self.DEFAULT_PRICING_MODEL)
        if not pricing:
            return 0.0
        input_cost = (prompt_tokens / 1000) * pricing["input"]
        output_cost = (completion_tokens / 1000) * pricing["output"]
        return round(input_cost + output_cost, 6)

    @abstractmethod
    async def generate(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate completion from messages."""
        pass


class OpenAICompatibleClient(BaseLLMClient):
    """
    Client for any endpoint speaking the OpenAI chat completions API.
    Used for Fireworks (default) and OpenAI itself.
    """

    # Pricing per 1K tokens
    PRICING = {
        "accounts/fireworks/models/llama-v3p3-70b-instruct": {"input": 0.0009, "output": 0.0009},
        "gpt-4o": {"input": 0.0025, "output": 0.01},
        "gpt-4o-mini": {"input": 0.00015, "output": 0.0006},
    }
    DEFAULT_PRICING_MODEL = "accounts/fireworks/models/llama-v3p3-70b-instruct"

    def __init__(self, settings: Settings, provider: LLMProvider = LLMProvider.FIREWORKS):
        super().__init__(settings)
        self.provider = provider
        if provider == LLMProvider.FIREWORKS:
            self.client = AsyncOpenAI(
                api_key=settings.fireworks_api_key or "missing",
                base_url=settings.fireworks_base_url,
            )
            self.default_model = settings.fireworks_model_primary
        else:
            self.client = AsyncOpenAI(api_key=settings.openai_api_key or "missing")
            self.default_model = settings.openai_model_primary

    @retry(
        retry=retry_if_exception_type((TimeoutError, ConnectionError)),
        stop=stop_after_attempt(get_settings().llm_max_retries),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def generate(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate completion using the chat completions API."""
        model = model or self.default_model
        temperature = temperature if temperature is not None else self.settings.llm_temperature
        max_tokens = max_tokens or self.settings.llm_max_tokens

        request_params: dict[str, Any] = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        if json_mode:
            request_params["response_format"] = {"type": "json_object"}

        logger.debug("Chat completion request", provider=self.provider.value, model=model)

        response = await asyncio.wait_for(
            self.client.chat.completions.create(**request_params),
            timeout=self.settings.llm_timeout,
        )

        usage = response.usage
        prompt_tokens = usage.prompt_tokens if usage else 0
        completion_tokens = usage.completion_tokens if usage else 0

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=model,
            provider=self.provider,
            tokens_used=prompt_tokens + completion_tokens,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            estimated_cost=self._estimate_cost(model, prompt_tokens, completion_tokens),
        )


class AnthropicClient(BaseLLMClient):
    """Anthropic API client with retry logic."""

    # Pricing per 1K tokens
    PRICING = {
        "claude-3-5-sonnet-20241022": {"input": 0.003, "output": 0.015},
        "claude-3-haiku-20240307": {"input": 0.00025, "output": 0.00125},
    }
    DEFAULT_PRICING_MODEL = "claude-3-5-sonnet-20241022"

    def __init__(self, settings: Settings):
        super().__init__(settings)
        self.client = AsyncAnthropic(api_key=settings.anthropic_api_key or "missing")
        self.default_model = settings.anthropic_model_primary

    @retry(
        retry=retry_if_exception_type((TimeoutError, ConnectionError)),
        stop=stop_after_attempt(get_settings().llm_max_retries),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    async def generate(
        self,
        messages: list[LLMMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate completion using Anthropic API."""
        model = model or self.default_model
        temperature = temperature if temperature is not None else self.settings.llm_temperature
        max_tokens = max_tokens or self.settings.llm_max_tokens

        # Separate system message from conversation
        system_message = ""
        conversation_messages = []

        for msg in messages:
            if msg.role == "system":
                system_message = msg.content
            else:
                conversation_messages.append({
                    "role": msg.role,
                    "content": msg.content,
                })

        # Anthropic has no JSON response format; the prompts already demand JSON only
        if json_mode and system_message:
            system_message += "\n\nRespond with a single JSON object and nothing else."

        logger.debug("Anthropic request", model=model, message_count=len(messages))

        request_params: dict[str, Any] = {
            "model": model,
            "messages": conversation_messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        if system_message:
            request_params["system"] = system_message

        response = await asyncio.wait_for(
            self.client.messages.create(**request_params),
            timeout=self.settings.llm_timeout,
        )

        prompt_tokens = response.usage.input_tokens
        completion_tokens = response.usage.output_tokens

        return LLMResponse(
            content=response.content[0].text,
            model=model,
            provider=LLMProvider.ANTHROPIC,
            tokens_used=prompt_tokens + completion_tokens,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            estimated_cost=self._estimate_cost(model, prompt_tokens, completion_tokens),
        )


class LLMClient:
    """
    Unified LLM client that routes to appropriate provider.
    Constructed once at startup and handed to every agent that needs inference.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        default_provider: Optional[LLMProvider] = None,
    ):
        self.settings = settings or get_settings()
        self._clients: dict[LLMProvider, BaseLLMClient] = {}

        if default_provider:
            self.default_provider = default_provider
        else:
            try:
                self.default_provider = LLMProvider(self.settings.default_llm_provider.lower())
            except ValueError:
                self.default_provider = LLMProvider.FIREWORKS

    def _get_client(self, provider: Optional[LLMProvider] = None) -> BaseLLMClient:
        """Get (lazily creating) the client for a provider."""
        provider = provider or self.default_provider
        if provider not in self._clients:
            if provider == LLMProvider.ANTHROPIC:
                self._clients[provider] = AnthropicClient(self.settings)
            else:
                self._clients[provider] = OpenAICompatibleClient(self.settings, provider)
        return self._clients[provider]

    async def generate(
        self,
        messages: list[LLMMessage],
        provider: Optional[LLMProvider] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate completion using specified provider."""
        client = self._get_client(provider)
        return await client.generate(
            messages=messages,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=json_mode,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        json_mode: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Single system + user turn, returning the raw completion text.

        Raises:
            LLMProviderError: on any provider failure or an empty completion
        """
        messages = [
            LLMMessage(role="system", content=system_prompt),
            LLMMessage(role="user", content=user_prompt),
        ]
        try:
            response = await self.generate(
                messages,
                temperature=temperature,
                json_mode=json_mode,
            )
        except Exception as e:
            logger.warning(
                "Inference call failed",
                provider=self.default_provider.value,
                error=str(e),
            )
            raise LLMProviderError(str(e) or type(e).__name__, provider=self.default_provider.value) from e

        if not response.content.strip():
            raise LLMProviderError("Empty completion", provider=response.provider.value)

        logger.debug(
            "Inference call completed",
            model=response.model,
            tokens=response.tokens_used,
            cost=response.estimated_cost,
        )
        return response.content


def parse_json_response(text: str) -> dict:
    """
    Parse a JSON object out of a model completion.

    Markdown code fences around the payload are stripped first.

    Raises:
        StructuredOutputError: if the text is not a JSON object
    """
    cleaned = _CODE_FENCE_RE.sub("", (text or "").strip()).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise StructuredOutputError(f"Invalid JSON from model: {e}") from e

    if not isinstance(data, dict):
        raise StructuredOutputError(f"Expected a JSON object, got {type(data).__name__}")

    return data
