"""
Demographics Inference Agent - Guesses demographic and appearance attributes.

Guesses are speculative by nature, so this agent never fails: every field
is coerced into its closed value set or backfilled with a safe default.
"""

from typing import Any, Optional

import structlog

from drip_agent.agents.base import BaseAgent
from drip_agent.agents.personality import format_tweets
from drip_agent.core.exceptions import DripAgentError
from drip_agent.models.enums import Gender, ProfessionArchetype, Undertone
from drip_agent.models.profile import Profile
from drip_agent.models.vibe import DemographicsAnalysis, InferredAppearance

logger = structlog.get_logger(__name__)

_UNKNOWN_STRINGS = {"", "unknown", "none", "null", "n/a", "not specified"}


DEMOGRAPHICS_SYSTEM_PROMPT = """You are a perceptive personal stylist reading a social media profile.
Infer demographic context that helps tailor fashion advice. When unsure, say "unknown" rather than guessing wildly.

You MUST return a valid JSON object with this EXACT structure (no markdown, no extra text):
{
  "gender": "male | female | non-binary | unknown",
  "gender_confidence": 0.0,
  "age_range": "18-24 | 25-34 | 35-44 | 45-54 | 55+",
  "profession_archetype": "tech-founder | developer | creative | finance | executive | academic | healthcare | content-creator | fitness | general",
  "location": "city or region if mentioned, otherwise null",
  "appearance": {
    "hair_color": "best guess or null",
    "eye_color": "best guess or null",
    "skin_tone": "best guess or null",
    "undertone": "warm | cool | neutral",
    "era_preference": "modern | vintage | retro | timeless"
  }
}

Return ONLY the JSON object, nothing else."""


DEMOGRAPHICS_USER_PROMPT = """Infer demographics for this profile:

**Handle:** @{handle}
**Display Name:** {name}
**Bio:** {bio}
**Location:** {location}

**Recent Tweets:**
{tweets}"""


def _clean_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return None if value.lower() in _UNKNOWN_STRINGS else value


def _clamp_confidence(value: Any) -> float:
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.0
    if confidence != confidence:  # NaN
        return 0.0
    return min(1.0, max(0.0, confidence))


def coerce_demographics(data: dict) -> DemographicsAnalysis:
    """Coerce a raw model result into a valid DemographicsAnalysis."""
    raw_appearance = data.get("appearance")
    if not isinstance(raw_appearance, dict):
        raw_appearance = {}

    appearance = InferredAppearance(
        hair_color=_clean_text(raw_appearance.get("hair_color")),
        eye_color=_clean_text(raw_appearance.get("eye_color")),
        skin_tone=_clean_text(raw_appearance.get("skin_tone")),
        undertone=Undertone.parse(raw_appearance.get("undertone")),
        era_preference=_clean_text(raw_appearance.get("era_preference")) or "modern",
    )

    return DemographicsAnalysis(
        gender=Gender.parse(data.get("gender")),
        gender_confidence=_clamp_confidence(data.get("gender_confidence")),
        age_range=_clean_text(data.get("age_range")) or "25-34",
        profession_archetype=ProfessionArchetype.parse(data.get("profession_archetype")),
        location=_clean_text(data.get("location")),
        appearance=appearance,
    )


class DemographicsAgent(BaseAgent):
    """Demographic and appearance inference with self-healing output."""

    name = "demographics_agent"
    temperature = 0.3

    async def execute(self, profile: Profile) -> DemographicsAnalysis:
        logger.info("Inferring demographics", handle=profile.handle)

        user_prompt = DEMOGRAPHICS_USER_PROMPT.format(
            handle=profile.handle,
            name=profile.name or "Not provided",
            bio=profile.bio or "No bio provided",
            location=profile.location or "Not provided",
            tweets=format_tweets(profile),
        )

        try:
            data = await self._complete_json(DEMOGRAPHICS_SYSTEM_PROMPT, user_prompt)
        except DripAgentError as e:
            logger.warning("Demographics inference failed, using defaults", handle=profile.handle, error=str(e))
            return DemographicsAnalysis()

        demographics = coerce_demographics(data)
        logger.info(
            "Demographics inferred",
            handle=profile.handle,
            gender=demographics.gender.value,
            profession=demographics.profession_archetype.value,
        )
        return demographics
