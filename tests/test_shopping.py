"""
Product matcher tests: candidate tiers, scoring, ranking and outfits.
"""

import pytest

from drip_agent.agents.shopping import ProductMatcher, build_outfits, score_product
from drip_agent.catalog.store import CatalogStore
from drip_agent.core.config import Settings
from drip_agent.models.enums import (
    BudgetTier,
    ClothingWeight,
    ColorSubtype,
    Gender,
    ProductGender,
    ProfessionArchetype,
    Season,
)
from drip_agent.models.product import ProductCatalogEntry
from drip_agent.models.style import StyleRecommendation
from drip_agent.models.vibe import SeasonalRecommendation
from drip_agent.services.color_analysis import COLOR_PALETTES

from conftest import FakeLLMClient


def _product(product_id: str, **overrides) -> dict:
    doc = {
        "id": product_id,
        "name": f"Item {product_id}",
        "brand": "Brand",
        "category": "Tops",
        "price": 150,
        "style_archetypes": ["techwear"],
        "colors": [],
    }
    doc.update(overrides)
    return doc


TIER_PRODUCTS = [
    _product("m1", gender="male", category="Outerwear"),
    _product("f1", gender="female", category="Outerwear"),
    _product("u1", gender="unisex", category="Bottoms"),
    _product("m2", gender="male", style_archetypes=["streetwear"]),
    _product("u2", gender="unisex", style_archetypes=["streetwear"], category="Footwear"),
    _product("n1", category="Tops"),
]


def _style(**overrides) -> StyleRecommendation:
    fields = {
        "primary_archetype": "Techwear",
        "secondary_archetype": "Minimalist",
        "color_palette": ["#000000", "#FFFFFF", "#808080", "#1A1A1A"],
        "style_notes": "Keep it technical, add one texture.",
    }
    fields.update(overrides)
    return StyleRecommendation(**fields)


def _seasonal(weight: ClothingWeight) -> SeasonalRecommendation:
    return SeasonalRecommendation(
        season=Season.WINTER,
        temperature_range="1°C to 7°C",
        clothing_weight=weight,
        fabric_suggestions=["wool"],
        style_notes="Stay warm.",
    )


def _entry(**overrides) -> ProductCatalogEntry:
    return ProductCatalogEntry.from_document(_product("p", **overrides))


# ==================== Scoring ====================

def test_gender_mismatch_costs_exactly_80(make_vibe):
    vibe = make_vibe(gender=Gender.MALE, color_profile=COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN])
    style = _style(primary_archetype="Techwear", secondary_archetype="Minimalist")
    fields = {"style_archetypes": ["techwear", "minimalist"], "colors": ["olive"]}

    untagged = score_product(_entry(**fields), style, vibe)
    mismatched = score_product(_entry(gender="female", **fields), style, vibe)

    assert untagged.match_score == 90
    assert mismatched.match_score == untagged.match_score - 80
    assert mismatched.gender_match is False
    assert untagged.gender_match is True


def test_score_clamped_at_floor(make_vibe):
    vibe = make_vibe(gender=Gender.FEMALE, seasonal_recommendation=_seasonal(ClothingWeight.HEAVY))
    scored = score_product(
        _entry(gender="male", weight="light", style_archetypes=["athleisure"]),
        _style(budget_tier=BudgetTier.LUXURY),
        vibe,
    )

    assert scored.match_score == 0
    assert scored.gender_match is False
    assert scored.season_appropriate is False


def test_score_clamped_at_ceiling(make_vibe):
    vibe = make_vibe(
        gender=Gender.MALE,
        color_profile=COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN],
        seasonal_recommendation=_seasonal(ClothingWeight.MEDIUM),
    )
    scored = score_product(
        _entry(
            gender="male",
            weight="medium",
            price=400,
            style_archetypes=["techwear", "minimalist"],
            colors=["olive", "rust"],
        ),
        _style(budget_tier=BudgetTier.LUXURY),
        vibe,
    )

    assert scored.match_score == 100
    assert scored.color_match is True
    assert scored.season_appropriate is True


def test_unisex_and_unknown_gender(make_vibe):
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde")

    assert score_product(_entry(gender="unisex"), style, make_vibe(gender=Gender.MALE)).match_score == 60
    assert score_product(_entry(gender="male"), style, make_vibe(gender=Gender.UNKNOWN)).match_score == 50
    assert score_product(_entry(gender="male"), style, make_vibe(gender=Gender.MALE)).match_score == 75


def test_non_binary_mismatches_gendered_products(make_vibe):
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde")
    scored = score_product(_entry(gender="female"), style, make_vibe(gender=Gender.NON_BINARY))

    assert scored.gender_match is False
    assert scored.match_score == 0


def test_each_matching_color_tag_scores(make_vibe):
    vibe = make_vibe(color_profile=COLOR_PALETTES[ColorSubtype.WARM_AUTUMN])
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde")

    one = score_product(_entry(colors=["olive", "black"]), style, vibe)
    two = score_product(_entry(colors=["olive", "burnt orange"]), style, vibe)
    none = score_product(_entry(colors=["black"]), style, vibe)

    assert one.match_score == 60 and one.color_match
    assert two.match_score == 70
    assert none.match_score == 50 and not none.color_match


@pytest.mark.parametrize(
    "weight,expected,appropriate",
    [
        ("heavy", 60, True),
        ("light", 35, False),
        ("medium", 50, True),
    ],
)
def test_season_weight(make_vibe, weight, expected, appropriate):
    vibe = make_vibe(seasonal_recommendation=_seasonal(ClothingWeight.HEAVY))
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde")
    scored = score_product(_entry(weight=weight), style, vibe)

    assert scored.match_score == expected
    assert scored.season_appropriate is appropriate


@pytest.mark.parametrize(
    "tier,price,expected",
    [
        (BudgetTier.LUXURY, 200, 60),
        (BudgetTier.LUXURY, 199, 50),
        (BudgetTier.ACCESSIBLE, 100, 60),
        (BudgetTier.ACCESSIBLE, 101, 50),
        (BudgetTier.MID_RANGE, 80, 60),
        (BudgetTier.MID_RANGE, 250, 60),
        (BudgetTier.MID_RANGE, 251, 50),
        (BudgetTier.MIXED, 150, 50),
    ],
)
def test_budget_tiers(make_vibe, tier, price, expected):
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde", budget_tier=tier)
    assert score_product(_entry(price=price), style, make_vibe()).match_score == expected


# ==================== Candidates ====================

@pytest.mark.asyncio
async def test_candidate_tiers_for_known_gender(fake_llm: FakeLLMClient, test_settings: Settings, make_vibe):
    matcher = ProductMatcher(fake_llm, CatalogStore(products=TIER_PRODUCTS), test_settings)
    candidates = await matcher.gather_candidates(_style(), make_vibe(gender=Gender.MALE))

    assert [c.id for c in candidates] == ["m1", "u1", "m2", "u2", "f1", "n1"]


@pytest.mark.asyncio
async def test_candidate_tiers_for_unknown_gender(fake_llm: FakeLLMClient, test_settings: Settings, make_vibe):
    matcher = ProductMatcher(fake_llm, CatalogStore(products=TIER_PRODUCTS), test_settings)
    candidates = await matcher.gather_candidates(_style(), make_vibe(gender=Gender.UNKNOWN))

    assert [c.id for c in candidates] == ["u1", "m1", "f1", "m2", "u2", "n1"]


@pytest.mark.asyncio
async def test_candidates_are_unique_and_capped(fake_llm: FakeLLMClient, test_settings: Settings, catalog: CatalogStore, make_vibe):
    matcher = ProductMatcher(fake_llm, catalog, test_settings)
    candidates = await matcher.gather_candidates(_style(), make_vibe(gender=Gender.FEMALE))
    ids = [c.id for c in candidates]

    assert len(ids) == len(set(ids))
    assert 0 < len(ids) <= 18
    assert all(c.gender in (ProductGender.FEMALE, ProductGender.UNISEX) for c in candidates[:6])


# ==================== Ranking ====================

@pytest.mark.asyncio
async def test_ranking_and_tiers(fake_llm: FakeLLMClient, test_settings: Settings, make_vibe):
    matcher = ProductMatcher(fake_llm, CatalogStore(products=TIER_PRODUCTS), test_settings)
    vibe = make_vibe(gender=Gender.MALE, profession_archetype=ProfessionArchetype.DEVELOPER)
    result = await matcher.execute(_style(), vibe)

    ranked = result.free_recommendations + result.premium_recommendations
    scores = [p.match_score for p in ranked]

    assert len(result.free_recommendations) == 3
    assert len(result.premium_recommendations) == 3
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].id == "m1"
    assert all(p.match_reason == "Sharp utility with zero wasted motion." for p in ranked)
    assert fake_llm.count("reason") == 6


@pytest.mark.asyncio
async def test_ties_keep_gathering_order(fake_llm: FakeLLMClient, test_settings: Settings, make_vibe):
    products = [_product(f"p{i}", gender="unisex") for i in range(5)]
    matcher = ProductMatcher(fake_llm, CatalogStore(products=products), test_settings)
    result = await matcher.execute(_style(), make_vibe())

    ranked = result.free_recommendations + result.premium_recommendations
    assert [p.id for p in ranked] == ["p0", "p1", "p2", "p3", "p4"]


@pytest.mark.asyncio
async def test_small_catalog(failing_llm: FakeLLMClient, test_settings: Settings, make_vibe):
    products = [_product("a", gender="unisex"), _product("b", gender="unisex")]
    matcher = ProductMatcher(failing_llm, CatalogStore(products=products), test_settings)
    result = await matcher.execute(_style(), make_vibe(aesthetic_keywords=["minimal"]))

    assert len(result.free_recommendations) == 2
    assert result.premium_recommendations == []
    assert result.outfits == []
    assert result.free_recommendations[0].match_reason == (
        "Perfect match for your minimal aesthetic and Techwear style."
    )


# ==================== Outfits ====================

def test_outfits_round_robin_categories(make_vibe):
    vibe = make_vibe(profession_archetype=ProfessionArchetype.DEVELOPER)
    style = _style()
    ranked = [score_product(ProductCatalogEntry.from_document(doc), style, vibe) for doc in TIER_PRODUCTS]

    outfits = build_outfits(ranked, style, vibe)

    assert [o.occasion for o in outfits] == ["work day", "investor meeting", "conference"]
    assert outfits[0].name == "Work Day Look"
    # Outerwear, Bottoms, Tops, Footwear in first-seen order
    assert outfits[0].product_ids == ["m1", "u1", "m2", "u2"]
    assert outfits[1].product_ids == ["f1", "u1", "n1", "u2"]
    assert outfits[2].product_ids == ["m1", "u1", "m2", "u2"]
    assert outfits[0].styling_tip == "For work day: Keep it technical"


def test_blank_color_tags_never_match(make_vibe):
    vibe = make_vibe(color_profile=COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN])
    style = _style(primary_archetype="Classic Prep", secondary_archetype="Avant-Garde")
    scored = score_product(_entry(colors=["", "Black"]), style, vibe)

    assert scored.colors == ["black"]
    assert scored.match_score == 50
    assert scored.color_match is False
