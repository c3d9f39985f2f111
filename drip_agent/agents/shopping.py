"""
Product Matcher - Gathers catalog candidates, scores them against the style
and vibe, ranks them and builds outfit suggestions.
"""

import asyncio
import re
from typing import Optional

import structlog

from drip_agent.agents.base import BaseAgent
from drip_agent.agents.professions import occasions_for
from drip_agent.catalog.store import CatalogStore
from drip_agent.core.config import Settings, get_settings
from drip_agent.core.exceptions import DripAgentError
from drip_agent.core.llm_clients import LLMClient
from drip_agent.models.enums import BudgetTier, ClothingWeight, ProductGender
from drip_agent.models.product import (
    OutfitSuggestion,
    ProductCatalogEntry,
    ScoredProduct,
    ShoppingResult,
)
from drip_agent.models.style import StyleRecommendation
from drip_agent.models.vibe import VibeProfile

logger = structlog.get_logger(__name__)

BASE_SCORE = 50
GENDER_MISMATCH_PENALTY = -80
GENDER_EXACT_BONUS = 25
UNISEX_BONUS = 10
PRIMARY_ARCHETYPE_BONUS = 20
SECONDARY_ARCHETYPE_BONUS = 10
COLOR_BONUS = 10
SEASON_MISMATCH_PENALTY = -15
SEASON_MATCH_BONUS = 10
BUDGET_BONUS = 10

UNISEX_TIER_CAP = 8
MIN_CANDIDATES = 6
MIN_OUTFIT_CANDIDATES = 3
MAX_OUTFITS = 3

_EXTREME_WEIGHTS = {ClothingWeight.HEAVY, ClothingWeight.LIGHT}


MATCH_REASON_SYSTEM_PROMPT = (
    "You are a fashion stylist giving quick, punchy product recommendations. "
    "Return ONLY the recommendation text, nothing else."
)

MATCH_REASON_USER_PROMPT = (
    'In exactly 10-15 words, explain why "{product}" by {brand} is perfect for a '
    "{gender} {profession} with \"{energy}\" energy and a {archetype} style. "
    "Be specific, stylish, and slightly witty."
)


def archetype_tag(name: str) -> str:
    return (name or "").strip().lower().replace(" ", "-")


def _budget_fits(tier: BudgetTier, price: float) -> bool:
    if tier == BudgetTier.LUXURY:
        return price >= 200
    if tier == BudgetTier.ACCESSIBLE:
        return price <= 100
    if tier == BudgetTier.MID_RANGE:
        return 80 <= price <= 250
    return False


def score_product(
    product: ProductCatalogEntry,
    style: StyleRecommendation,
    vibe: VibeProfile,
) -> ScoredProduct:
    """
    Score one candidate against the style and vibe.

    Starts at 50; gender, archetype, color, season and budget modifiers are
    applied independently and the total is clamped to [0, 100].
    """
    score = BASE_SCORE
    gender_match = True
    color_match = False
    season_appropriate = True

    # Gender
    if product.gender == ProductGender.UNISEX:
        score += UNISEX_BONUS
    elif product.gender is not None and vibe.gender.is_known:
        if product.gender.value == vibe.gender.value:
            score += GENDER_EXACT_BONUS
        else:
            score += GENDER_MISMATCH_PENALTY
            gender_match = False

    # Archetype
    if archetype_tag(style.primary_archetype) in product.style_archetypes:
        score += PRIMARY_ARCHETYPE_BONUS
    if archetype_tag(style.secondary_archetype) in product.style_archetypes:
        score += SECONDARY_ARCHETYPE_BONUS

    # Color season
    best_colors = [c.lower() for c in vibe.color_profile.best_colors] if vibe.color_profile else []
    for color in product.colors:
        if any(color in best or best in color for best in best_colors):
            score += COLOR_BONUS
            color_match = True

    # Weather
    seasonal = vibe.seasonal_recommendation
    if seasonal is not None and product.weight is not None:
        wanted = seasonal.clothing_weight
        if wanted != product.weight and {wanted, product.weight} == _EXTREME_WEIGHTS:
            score += SEASON_MISMATCH_PENALTY
            season_appropriate = False
        elif wanted == product.weight:
            score += SEASON_MATCH_BONUS

    # Budget
    if _budget_fits(style.budget_tier, product.price):
        score += BUDGET_BONUS

    return ScoredProduct(
        **product.model_dump(),
        match_score=max(0, min(100, score)),
        gender_match=gender_match,
        color_match=color_match,
        season_appropriate=season_appropriate,
    )


def _first_clause(text: str) -> str:
    clause = re.split(r"[.;,!?\n]", text or "", maxsplit=1)[0].strip()
    return clause or "keep it clean and intentional"


def build_outfits(
    ranked: list[ScoredProduct],
    style: StyleRecommendation,
    vibe: VibeProfile,
) -> list[OutfitSuggestion]:
    """One product per category for each profession occasion."""
    if len(ranked) < MIN_OUTFIT_CANDIDATES:
        return []

    by_category: dict[str, list[ScoredProduct]] = {}
    for product in ranked:
        by_category.setdefault(product.category, []).append(product)

    tip = _first_clause(style.style_notes)
    outfits = []
    for index, occasion in enumerate(occasions_for(vibe.profession_archetype)[:MAX_OUTFITS]):
        product_ids = [items[index % len(items)].id for items in by_category.values()]
        outfits.append(
            OutfitSuggestion(
                name=f"{occasion.title()} Look",
                occasion=occasion,
                product_ids=product_ids,
                styling_tip=f"For {occasion}: {tip}",
            )
        )
    return outfits


class ProductMatcher(BaseAgent):
    """
    Catalog retrieval, scoring and ranking.

    Candidates are gathered in tiers (gender + archetype, unisex + archetype,
    then broader fills when fewer than six were found), scored, ranked by
    score with ties kept in gathering order, and split into free and
    premium tiers.
    """

    name = "product_matcher"
    temperature = 0.9

    def __init__(
        self,
        llm: LLMClient,
        catalog: CatalogStore,
        settings: Optional[Settings] = None,
    ):
        super().__init__(llm)
        self.catalog = catalog
        self.settings = settings or get_settings()

    async def execute(self, style: StyleRecommendation, vibe: VibeProfile) -> ShoppingResult:
        logger.info(
            "Finding products",
            primary=style.primary_archetype,
            secondary=style.secondary_archetype,
            gender=vibe.gender.value,
        )

        candidates = await self.gather_candidates(style, vibe)
        scored = [score_product(product, style, vibe) for product in candidates]

        reasons = await asyncio.gather(
            *(self._match_reason(product, style, vibe) for product in scored)
        )
        scored = [
            product.model_copy(update={"match_reason": reason})
            for product, reason in zip(scored, reasons)
        ]

        ranked = sorted(scored, key=lambda p: p.match_score, reverse=True)
        free_size = self.settings.free_tier_size
        result = ShoppingResult(
            free_recommendations=ranked[:free_size],
            premium_recommendations=ranked[free_size:],
            outfits=build_outfits(ranked, style, vibe),
        )

        logger.info(
            "Products ranked",
            free=len(result.free_recommendations),
            premium=len(result.premium_recommendations),
            outfits=len(result.outfits),
        )
        return result

    async def gather_candidates(
        self,
        style: StyleRecommendation,
        vibe: VibeProfile,
    ) -> list[ProductCatalogEntry]:
        """Tiered candidate retrieval, deduplicated by product id."""
        cap = self.settings.max_candidates
        tags = [t for t in (archetype_tag(style.primary_archetype), archetype_tag(style.secondary_archetype)) if t]
        gender_known = vibe.gender.is_known
        # No product carries a non-binary tag; such users only match unisex entries.
        user_gender: Optional[ProductGender] = None
        if gender_known and vibe.gender.value in (ProductGender.MALE.value, ProductGender.FEMALE.value):
            user_gender = ProductGender(vibe.gender.value)

        candidates: list[ProductCatalogEntry] = []
        seen: set[str] = set()

        def extend(products: list[ProductCatalogEntry]) -> None:
            for product in products:
                if product.id not in seen:
                    seen.add(product.id)
                    candidates.append(product)

        if user_gender is not None:
            extend(await self.catalog.find_products(archetypes=tags, genders=[user_gender], limit=cap))

        extend(
            await self.catalog.find_products(
                archetypes=tags,
                genders=[ProductGender.UNISEX],
                exclude_ids=seen,
                limit=UNISEX_TIER_CAP,
            )
        )

        if len(candidates) < MIN_CANDIDATES and gender_known:
            genders = [ProductGender.UNISEX] if user_gender is None else [user_gender, ProductGender.UNISEX]
            extend(
                await self.catalog.find_products(
                    genders=genders,
                    exclude_ids=seen,
                    limit=max(0, cap - len(candidates)),
                )
            )

        if len(candidates) < MIN_CANDIDATES:
            extend(
                await self.catalog.find_products(
                    exclude_ids=seen,
                    limit=max(0, cap - len(candidates)),
                )
            )

        logger.debug("Candidates gathered", count=len(candidates), tags=tags)
        return candidates

    async def _match_reason(
        self,
        product: ProductCatalogEntry,
        style: StyleRecommendation,
        vibe: VibeProfile,
    ) -> str:
        prompt = MATCH_REASON_USER_PROMPT.format(
            product=product.name,
            brand=product.brand,
            gender="person" if not vibe.gender.is_known else vibe.gender.value,
            profession=vibe.profession_archetype.value.replace("-", " "),
            energy=vibe.energy,
            archetype=style.primary_archetype,
        )
        try:
            response = await self.llm.complete(
                MATCH_REASON_SYSTEM_PROMPT,
                prompt,
                temperature=self.temperature,
            )
            return response.strip().replace('"', "")
        except DripAgentError as e:
            logger.debug("Match reason failed, using template", product_id=product.id, error=str(e))
            keyword = vibe.aesthetic_keywords[0] if vibe.aesthetic_keywords else "unique"
            return f"Perfect match for your {keyword} aesthetic and {style.primary_archetype} style."
