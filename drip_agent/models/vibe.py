"""
Vibe profile and the deterministic lookups merged into it
(color season, weather, seasonal clothing guidance).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from drip_agent.models.enums import (
    ClothingWeight,
    ColorSubtype,
    Contrast,
    Gender,
    ProfessionArchetype,
    Season,
    Undertone,
)


class ColorProfile(BaseModel):
    """One of the twelve color-season records."""

    model_config = ConfigDict(frozen=True)

    season: Season
    subtype: ColorSubtype
    undertone: Undertone
    contrast: Contrast
    best_colors: list[str]
    best_colors_hex: list[str]
    accent_colors: list[str]
    accent_colors_hex: list[str]
    avoid_colors: list[str]
    avoid_colors_hex: list[str]
    metals: list[str]
    neutrals: list[str]
    description: str


class InferredAppearance(BaseModel):
    """Appearance guesses made from profile text."""

    model_config = ConfigDict(frozen=True)

    hair_color: Optional[str] = None
    eye_color: Optional[str] = None
    skin_tone: Optional[str] = None
    undertone: Undertone = Undertone.NEUTRAL
    era_preference: str = "modern"

    @property
    def has_guesses(self) -> bool:
        return any((self.hair_color, self.eye_color, self.skin_tone))


class WeatherData(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    temperature: int  # Celsius
    condition: str
    humidity: int
    season: Season


class SeasonalRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    season: Season
    temperature_range: str
    clothing_weight: ClothingWeight
    fabric_suggestions: list[str]
    style_notes: str


class PersonalityAnalysis(BaseModel):
    """Structured result of the personality inference call."""

    personality_traits: list[str] = Field(min_length=1)
    interests: list[str] = []
    communication_style: str
    aesthetic_keywords: list[str] = Field(min_length=1)
    energy: str = Field(min_length=1)
    vibe_summary: str = Field(min_length=1)


class DemographicsAnalysis(BaseModel):
    """Structured result of the demographics inference call, already coerced."""

    gender: Gender = Gender.UNKNOWN
    gender_confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    age_range: str = "25-34"
    profession_archetype: ProfessionArchetype = ProfessionArchetype.GENERAL
    location: Optional[str] = None
    appearance: InferredAppearance = InferredAppearance()


class VibeProfile(BaseModel):
    """
    Inferred personality, demographic and aesthetic profile for a handle.

    Built once per job by the vibe aggregator from two inference results
    plus the weather and color-season lookups.
    """

    model_config = ConfigDict(frozen=True)

    # Personality
    personality_traits: list[str]
    interests: list[str] = []
    communication_style: str = ""
    aesthetic_keywords: list[str] = []
    energy: str = ""
    vibe_summary: str = ""

    # Demographics
    gender: Gender = Gender.UNKNOWN
    gender_confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    age_range: str = "25-34"
    profession_archetype: ProfessionArchetype = ProfessionArchetype.GENERAL
    detected_location: Optional[str] = None

    # Deterministic lookups
    weather: Optional[WeatherData] = None
    seasonal_recommendation: Optional[SeasonalRecommendation] = None
    color_profile: Optional[ColorProfile] = None
    appearance: Optional[InferredAppearance] = None
