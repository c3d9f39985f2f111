"""
Style recommendation produced by the style resolver.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from drip_agent.models.enums import BudgetTier


class NamedColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    hex: str


class StyleRecommendation(BaseModel):
    """Archetypes, palette and styling guidance for one job."""

    model_config = ConfigDict(frozen=True)

    primary_archetype: str
    secondary_archetype: str
    color_palette: list[str]  # 4-5 hex codes
    style_notes: str
    avoid: list[str] = []
    gender_notes: str = ""
    profession_tips: str = ""
    seasonal_adjustments: str = ""
    color_season_palette: Optional[list[NamedColor]] = None
    budget_tier: BudgetTier = BudgetTier.MIXED
    signature_pieces: list[str] = []
