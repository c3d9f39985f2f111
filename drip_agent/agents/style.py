"""
Style Resolver - Maps a vibe profile to fashion archetypes, a palette and
styling guidance.
"""

import re
from typing import Any, Optional

import structlog

from drip_agent.agents.base import BaseAgent
from drip_agent.agents.professions import ProfessionGuide, profession_guide
from drip_agent.catalog.store import Archetype, CatalogStore
from drip_agent.core.exceptions import DripAgentError
from drip_agent.core.llm_clients import LLMClient
from drip_agent.models.enums import BudgetTier, Gender
from drip_agent.models.style import NamedColor, StyleRecommendation
from drip_agent.models.vibe import VibeProfile
from drip_agent.services.color_analysis import outfit_color_suggestions, season_palette

logger = structlog.get_logger(__name__)

FALLBACK_PRIMARY = "Minimalist"
FALLBACK_SECONDARY = "Streetwear"
FALLBACK_PALETTE = ["#000000", "#FFFFFF", "#808080", "#1A1A1A"]
FALLBACK_NOTES = "Clean, versatile pieces that match your energy."
FALLBACK_AVOID = ["Overly loud patterns", "Ill-fitting clothes", "Fast fashion"]

PALETTE_MIN = 4
PALETTE_MAX = 5
_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


STYLE_SYSTEM_PROMPT = """You are a fashion stylist expert. Given a person's vibe profile and available style archetypes, determine which archetypes best match them.

Available archetypes:
{archetypes}

You MUST return a valid JSON object with this EXACT structure (no markdown, no extra text):
{{
  "primary_archetype": "archetype name (must match one from the list)",
  "secondary_archetype": "archetype name (must match one from the list)",
  "color_palette": ["#hex1", "#hex2", "#hex3", "#hex4"],
  "style_notes": "2-3 specific styling tips personalized for this person",
  "avoid": ["thing to avoid 1", "thing to avoid 2", "thing to avoid 3"],
  "gender_notes": "fit and cut advice for their presentation",
  "profession_tips": "how to dress for their work context",
  "seasonal_adjustments": "how to adapt the look to their current weather",
  "budget_tier": "accessible | mid-range | luxury | mixed",
  "signature_pieces": ["piece 1", "piece 2", "piece 3"]
}}

Return ONLY the JSON object, nothing else."""


STYLE_USER_PROMPT = """Match this person to style archetypes:

**Vibe Summary:** {vibe_summary}
**Energy:** {energy}
**Aesthetic Keywords:** {aesthetic_keywords}
**Personality Traits:** {personality_traits}
**Interests:** {interests}
**Communication Style:** {communication_style}

**Presentation:** {gender} (confidence {gender_confidence:.0%}), age {age_range}

## Profession: {profession}
- Context: {profession_description}
- Brands that fit: {profession_brands}
- Signature items: {profession_items}
- Vibe: {profession_vibe}

## Color Season
{color_guidance}

## Weather
{weather_guidance}

Which archetypes fit best? Provide specific color palette and style notes."""


def canonical_archetype(name: Any, archetypes: list[Archetype]) -> Optional[str]:
    """Map a model-returned name onto the catalog's spelling, case-insensitively."""
    if not isinstance(name, str) or not name.strip():
        return None
    key = name.strip().lower().replace(" ", "-")
    for archetype in archetypes:
        if key in (archetype.id, archetype.name.lower().replace(" ", "-")):
            return archetype.name
    logger.warning("Archetype not in catalog", archetype=name)
    return name.strip()


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def build_palette(value: Any, vibe: VibeProfile) -> list[str]:
    """
    Keep the well-formed hex codes from a model palette, capped at five.

    Short palettes are padded to four from the color-season best colors when
    a color profile exists, then from the fallback palette.
    """
    palette: list[str] = []
    padding = list(vibe.color_profile.best_colors_hex) if vibe.color_profile else []
    padding += FALLBACK_PALETTE

    for code in _string_list(value):
        if _HEX_RE.match(code) and code.upper() not in (c.upper() for c in palette):
            palette.append(code)
        if len(palette) == PALETTE_MAX:
            return palette

    for code in padding:
        if len(palette) >= PALETTE_MIN:
            break
        if code.upper() not in (c.upper() for c in palette):
            palette.append(code)
    return palette


def _named_colors(value: Any) -> Optional[list[NamedColor]]:
    if not isinstance(value, list):
        return None
    colors = [
        NamedColor(name=item["name"], hex=item["hex"])
        for item in value
        if isinstance(item, dict) and isinstance(item.get("name"), str) and isinstance(item.get("hex"), str)
    ]
    return colors or None


class StyleResolver(BaseAgent):
    """
    Archetype resolution backed by one inference call.

    Never fails the job: inference or parse failures produce a fixed
    Minimalist / Streetwear recommendation.
    """

    name = "style_resolver"
    temperature = 0.7

    def __init__(self, llm: LLMClient, catalog: CatalogStore):
        super().__init__(llm)
        self.catalog = catalog

    async def execute(self, vibe: VibeProfile) -> StyleRecommendation:
        archetypes = await self.catalog.list_archetypes()
        guide = profession_guide(vibe.profession_archetype)

        logger.info(
            "Matching vibe to style archetypes",
            profession=vibe.profession_archetype.value,
            archetypes=len(archetypes),
        )

        system_prompt = STYLE_SYSTEM_PROMPT.format(
            archetypes="\n".join(f"- {a.name}: {a.description}" for a in archetypes),
        )
        user_prompt = self._build_user_prompt(vibe, guide)

        try:
            data = await self._complete_json(system_prompt, user_prompt)
            style = self._parse(data, vibe, guide, archetypes)
        except (DripAgentError, ValueError) as e:
            logger.warning("Style matching failed, using fallback", error=str(e))
            style = self.fallback(vibe)

        logger.info(
            "Style matched",
            primary=style.primary_archetype,
            secondary=style.secondary_archetype,
            budget_tier=style.budget_tier.value,
        )
        return style

    def _build_user_prompt(self, vibe: VibeProfile, guide: ProfessionGuide) -> str:
        if vibe.color_profile:
            profile = vibe.color_profile
            suggestions = outfit_color_suggestions(profile)
            color_guidance = (
                f"{profile.subtype.value} ({profile.undertone.value} undertone, {profile.contrast.value} contrast). "
                f"{profile.description}\n"
                f"Best colors: {', '.join(profile.best_colors)}\n"
                f"Avoid: {', '.join(profile.avoid_colors)}\n"
                f"Metals: {', '.join(profile.metals)}\n"
                f"Everyday palette: {', '.join(suggestions['everyday_palette'])}; "
                f"statement piece in {suggestions['statement_piece']}"
            )
        else:
            color_guidance = "Not determined"

        if vibe.weather and vibe.seasonal_recommendation:
            seasonal = vibe.seasonal_recommendation
            weather_guidance = (
                f"{vibe.weather.location}: {vibe.weather.temperature}°C, {vibe.weather.condition}, "
                f"{seasonal.season.value}. Clothing weight: {seasonal.clothing_weight.value}. "
                f"Fabrics: {', '.join(seasonal.fabric_suggestions)}. {seasonal.style_notes}"
            )
        else:
            weather_guidance = "Unknown location"

        return STYLE_USER_PROMPT.format(
            vibe_summary=vibe.vibe_summary,
            energy=vibe.energy,
            aesthetic_keywords=", ".join(vibe.aesthetic_keywords),
            personality_traits=", ".join(vibe.personality_traits),
            interests=", ".join(vibe.interests),
            communication_style=vibe.communication_style,
            gender=vibe.gender.value,
            gender_confidence=vibe.gender_confidence,
            age_range=vibe.age_range,
            profession=vibe.profession_archetype.value,
            profession_description=guide.description,
            profession_brands=", ".join(guide.brands),
            profession_items=", ".join(guide.signature_items),
            profession_vibe=guide.vibe,
            color_guidance=color_guidance,
            weather_guidance=weather_guidance,
        )

    def _parse(
        self,
        data: dict,
        vibe: VibeProfile,
        guide: ProfessionGuide,
        archetypes: list[Archetype],
    ) -> StyleRecommendation:
        primary = canonical_archetype(data.get("primary_archetype"), archetypes)
        secondary = canonical_archetype(data.get("secondary_archetype"), archetypes)
        if not primary or not secondary:
            raise ValueError("Missing archetype in style result")

        palette = build_palette(data.get("color_palette"), vibe)
        color_season_palette = _named_colors(data.get("color_season_palette"))
        if color_season_palette is None and vibe.color_profile:
            color_season_palette = season_palette(vibe.color_profile)

        return StyleRecommendation(
            primary_archetype=primary,
            secondary_archetype=secondary,
            color_palette=palette,
            style_notes=_text(data.get("style_notes")) or FALLBACK_NOTES,
            avoid=_string_list(data.get("avoid")),
            gender_notes=_text(data.get("gender_notes")),
            profession_tips=_text(data.get("profession_tips")) or guide.vibe,
            seasonal_adjustments=_text(data.get("seasonal_adjustments")),
            color_season_palette=color_season_palette,
            budget_tier=BudgetTier.parse(data.get("budget_tier")),
            signature_pieces=_string_list(data.get("signature_pieces")) or list(guide.signature_items),
        )

    def fallback(self, vibe: VibeProfile) -> StyleRecommendation:
        """Fixed recommendation used when inference is unavailable."""
        guide = profession_guide(vibe.profession_archetype)
        seasonal = vibe.seasonal_recommendation

        gender_notes = ""
        if vibe.gender in (Gender.MALE, Gender.FEMALE):
            gender_notes = f"Choose cuts tailored for a {vibe.gender.value} fit."

        return StyleRecommendation(
            primary_archetype=FALLBACK_PRIMARY,
            secondary_archetype=FALLBACK_SECONDARY,
            color_palette=list(FALLBACK_PALETTE),
            style_notes=FALLBACK_NOTES,
            avoid=list(FALLBACK_AVOID),
            gender_notes=gender_notes,
            profession_tips=guide.vibe,
            seasonal_adjustments=seasonal.style_notes if seasonal else "",
            color_season_palette=season_palette(vibe.color_profile) if vibe.color_profile else None,
            budget_tier=BudgetTier.MIXED,
            signature_pieces=list(guide.signature_items),
        )
