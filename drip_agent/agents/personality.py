"""
Personality Inference Agent - Extracts personality and aesthetic vibe from a profile.
"""

import structlog
from pydantic import ValidationError

from drip_agent.agents.base import BaseAgent
from drip_agent.core.exceptions import DripAgentError, PersonalityInferenceError
from drip_agent.models.profile import Profile
from drip_agent.models.vibe import PersonalityAnalysis

logger = structlog.get_logger(__name__)

MAX_TWEETS = 15


PERSONALITY_SYSTEM_PROMPT = """You are a cultural analyst and fashion psychologist.
Your job is to analyze someone's Twitter/X presence and determine their aesthetic vibe.

You MUST return a valid JSON object with this EXACT structure (no markdown, no extra text):
{
  "personality_traits": ["trait1", "trait2", "trait3"],
  "interests": ["interest1", "interest2", "interest3"],
  "communication_style": "description of how they communicate",
  "aesthetic_keywords": ["keyword1", "keyword2", "keyword3", "keyword4", "keyword5"],
  "energy": "one phrase describing their overall energy",
  "vibe_summary": "2-3 sentence summary of their vibe and what fashion would suit them"
}

Be insightful, slightly edgy, and culturally aware. Think like a fashion editor meets internet culture expert.
Return ONLY the JSON object, nothing else."""


PERSONALITY_USER_PROMPT = """Analyze this Twitter profile:

**Handle:** @{handle}
**Bio:** {bio}
**Stats:** {followers:,} followers, following {following:,}

**Recent Tweets:**
{tweets}

Based on this, what is their aesthetic vibe? What kind of fashion would suit their personality?"""


def format_tweets(profile: Profile, limit: int = MAX_TWEETS) -> str:
    return "\n".join(f"{i}. {tweet}" for i, tweet in enumerate(profile.tweets[:limit], start=1))


class PersonalityAgent(BaseAgent):
    """
    Personality inference.

    A malformed or failed result is fatal for the job: `execute` raises
    PersonalityInferenceError instead of returning defaults.
    """

    name = "personality_agent"
    temperature = 0.8

    async def execute(self, profile: Profile) -> PersonalityAnalysis:
        logger.info("Analyzing personality", handle=profile.handle)

        user_prompt = PERSONALITY_USER_PROMPT.format(
            handle=profile.handle,
            bio=profile.bio or "No bio provided",
            followers=profile.followers,
            following=profile.following,
            tweets=format_tweets(profile),
        )

        try:
            data = await self._complete_json(PERSONALITY_SYSTEM_PROMPT, user_prompt)
            analysis = PersonalityAnalysis.model_validate(data)
        except (DripAgentError, ValidationError) as e:
            logger.warning("Personality analysis failed", handle=profile.handle, error=str(e))
            raise PersonalityInferenceError(f"Personality analysis failed: {e}") from e

        logger.info("Vibe identified", handle=profile.handle, energy=analysis.energy)
        return analysis
