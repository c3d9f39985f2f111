"""
Pytest configuration and fixtures.
"""

import json
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from drip_agent.agents.demographics import DEMOGRAPHICS_SYSTEM_PROMPT
from drip_agent.agents.orchestrator import JobOrchestrator, build_orchestrator
from drip_agent.agents.personality import PERSONALITY_SYSTEM_PROMPT
from drip_agent.agents.shopping import MATCH_REASON_SYSTEM_PROMPT
from drip_agent.catalog.store import CatalogStore
from drip_agent.core.config import Settings
from drip_agent.core.exceptions import LLMProviderError
from drip_agent.core.store import InMemoryJobStore
from drip_agent.models.enums import Gender, ProfessionArchetype
from drip_agent.models.vibe import VibeProfile
from drip_agent.services.profile_source import ProfileSource
from drip_agent.services.weather import WeatherAdvisor

# Mid-January: northern winter, southern summer
WINTER_DAY = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


PERSONALITY_RESULT = {
    "personality_traits": ["driven", "dry-humored", "pragmatic"],
    "interests": ["distributed systems", "coffee", "open source"],
    "communication_style": "Short, punchy one-liners with a technical edge",
    "aesthetic_keywords": ["utilitarian", "minimal", "technical", "monochrome", "functional"],
    "energy": "Quietly relentless builder",
    "vibe_summary": "A systems thinker who values function over flash. Technical layers suit them.",
}

DEMOGRAPHICS_RESULT = {
    "gender": "male",
    "gender_confidence": 0.8,
    "age_range": "25-34",
    "profession_archetype": "developer",
    "location": "Seattle",
    "appearance": {
        "hair_color": "dark brown",
        "eye_color": "brown",
        "skin_tone": "fair",
        "undertone": "neutral",
        "era_preference": "modern",
    },
}

STYLE_RESULT = {
    "primary_archetype": "techwear",
    "secondary_archetype": "Minimalist",
    "color_palette": ["#1A1A1A", "#4B5320", "#36454F", "#F5F5F5"],
    "style_notes": "Lean into technical layers, keep the palette monochrome.",
    "avoid": ["Logos", "Skinny fits"],
    "gender_notes": "Relaxed tapered trousers suit a lean frame.",
    "profession_tips": "Hoodie upgrades read as intentional in engineering teams.",
    "seasonal_adjustments": "Add a waterproof shell for Seattle rain.",
    "budget_tier": "mid-range",
    "signature_pieces": ["Technical shell", "Cargo pants", "Trail runners"],
}


class FakeLLMClient:
    """
    Scripted stand-in for LLMClient.

    Each response is a dict (returned as JSON), a string, or an exception
    to raise. Responses are picked by the calling agent's system prompt.
    """

    def __init__(
        self,
        personality: Any = None,
        demographics: Any = None,
        style: Any = None,
        reason: Any = "Sharp utility with zero wasted motion.",
    ):
        self.responses = {
            "personality": PERSONALITY_RESULT if personality is None else personality,
            "demographics": DEMOGRAPHICS_RESULT if demographics is None else demographics,
            "style": STYLE_RESULT if style is None else style,
            "reason": reason,
        }
        self.calls: list[tuple[str, str]] = []

    @staticmethod
    def _kind(system_prompt: str) -> str:
        if system_prompt == PERSONALITY_SYSTEM_PROMPT:
            return "personality"
        if system_prompt == DEMOGRAPHICS_SYSTEM_PROMPT:
            return "demographics"
        if system_prompt == MATCH_REASON_SYSTEM_PROMPT:
            return "reason"
        return "style"

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        json_mode: bool = False,
        temperature: Optional[float] = None,
    ) -> str:
        kind = self._kind(system_prompt)
        self.calls.append((kind, user_prompt))

        response = self.responses[kind]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, (dict, list)):
            return json.dumps(response)
        return response

    def count(self, kind: str) -> int:
        return sum(1 for called, _ in self.calls if called == kind)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with every external collaborator unconfigured."""
    return Settings(
        _env_file=None,
        apify_api_token="",
        openweather_api_key="",
        fireworks_api_key="",
        store_backend="memory",
    )


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def failing_llm() -> FakeLLMClient:
    """Every inference call fails."""
    error = LLMProviderError("provider unavailable", provider="fireworks")
    return FakeLLMClient(personality=error, demographics=error, style=error, reason=error)


@pytest.fixture
def catalog() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def store() -> InMemoryJobStore:
    return InMemoryJobStore()


@pytest.fixture
def weather_advisor(test_settings: Settings) -> WeatherAdvisor:
    return WeatherAdvisor(test_settings, clock=lambda: WINTER_DAY)


@pytest.fixture
def orchestrator(
    test_settings: Settings,
    fake_llm: FakeLLMClient,
    store: InMemoryJobStore,
    catalog: CatalogStore,
    weather_advisor: WeatherAdvisor,
) -> JobOrchestrator:
    """Orchestrator whose scraper has no token, so every scrape falls back to a demo profile."""
    return build_orchestrator(
        test_settings,
        fake_llm,
        store,
        catalog,
        profile_source=ProfileSource(test_settings),
        weather_advisor=weather_advisor,
    )


@pytest.fixture
def make_vibe():
    """Factory for vibe profiles with sensible defaults."""

    def _make(**overrides) -> VibeProfile:
        fields = {
            "personality_traits": ["curious"],
            "interests": ["design"],
            "communication_style": "thoughtful",
            "aesthetic_keywords": ["minimal", "clean"],
            "energy": "calm focus",
            "vibe_summary": "Understated and precise.",
            "gender": Gender.UNKNOWN,
            "profession_archetype": ProfessionArchetype.GENERAL,
        }
        fields.update(overrides)
        return VibeProfile(**fields)

    return _make


@pytest_asyncio.fixture
async def client(
    orchestrator: JobOrchestrator,
    catalog: CatalogStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with the pipeline wired onto app state."""
    from drip_agent.api.main import app

    app.state.orchestrator = orchestrator
    app.state.catalog = catalog

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    await orchestrator.shutdown()
