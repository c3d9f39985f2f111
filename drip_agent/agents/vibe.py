"""
Vibe Aggregator - Runs personality, demographics and weather concurrently
and merges them into a single VibeProfile.
"""

import asyncio
from typing import Optional

import structlog

from drip_agent.agents.demographics import DemographicsAgent
from drip_agent.agents.personality import PersonalityAgent
from drip_agent.models.profile import Profile
from drip_agent.models.vibe import (
    ColorProfile,
    DemographicsAnalysis,
    PersonalityAnalysis,
    SeasonalRecommendation,
    VibeProfile,
    WeatherData,
)
from drip_agent.services.color_analysis import analyze_color_season
from drip_agent.services.weather import WeatherAdvisor, seasonal_recommendation

logger = structlog.get_logger(__name__)


class VibeAggregator:
    """
    Builds a VibeProfile from one profile.

    Personality and demographics inference start together, along with the
    weather lookup when the profile carries a location. A personality
    failure aborts the aggregation and the sibling tasks are cancelled.
    When only the demographics result yields a location, weather is looked
    up after the join.
    """

    def __init__(
        self,
        personality_agent: PersonalityAgent,
        demographics_agent: DemographicsAgent,
        weather_advisor: WeatherAdvisor,
    ):
        self.personality_agent = personality_agent
        self.demographics_agent = demographics_agent
        self.weather_advisor = weather_advisor

    async def execute(self, profile: Profile) -> VibeProfile:
        logger.info("Aggregating vibe", handle=profile.handle, location=profile.location)

        personality_task = asyncio.create_task(self.personality_agent.execute(profile))
        demographics_task = asyncio.create_task(self.demographics_agent.execute(profile))
        weather_task: Optional[asyncio.Task] = None
        if profile.location:
            weather_task = asyncio.create_task(self.weather_advisor.get_weather(profile.location))

        try:
            personality = await personality_task
        except BaseException:
            for task in (demographics_task, weather_task):
                if task is not None:
                    task.cancel()
            raise

        demographics = await demographics_task
        weather = await weather_task if weather_task is not None else None

        if weather is None and demographics.location:
            weather = await self.weather_advisor.get_weather(demographics.location)

        return self.merge(personality, demographics, weather)

    def merge(
        self,
        personality: PersonalityAnalysis,
        demographics: DemographicsAnalysis,
        weather: Optional[WeatherData],
    ) -> VibeProfile:
        """Combine inference results with the deterministic lookups."""
        appearance = demographics.appearance

        color_profile: Optional[ColorProfile] = None
        if appearance.has_guesses:
            color_profile = analyze_color_season(
                hair_color=appearance.hair_color,
                eye_color=appearance.eye_color,
                skin_tone=appearance.skin_tone,
                undertone_hint=appearance.undertone,
            )

        seasonal: Optional[SeasonalRecommendation] = None
        if weather is not None:
            seasonal = seasonal_recommendation(weather)

        vibe = VibeProfile(
            **personality.model_dump(),
            gender=demographics.gender,
            gender_confidence=demographics.gender_confidence,
            age_range=demographics.age_range,
            profession_archetype=demographics.profession_archetype,
            detected_location=demographics.location,
            weather=weather,
            seasonal_recommendation=seasonal,
            color_profile=color_profile,
            appearance=appearance,
        )

        logger.info(
            "Vibe aggregated",
            energy=vibe.energy,
            gender=vibe.gender.value,
            color_subtype=color_profile.subtype.value if color_profile else None,
            clothing_weight=seasonal.clothing_weight.value if seasonal else None,
        )
        return vibe
