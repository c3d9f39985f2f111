"""
Style resolver tests.
"""

import re

import pytest

from drip_agent.agents.professions import PROFESSION_GUIDES, occasions_for
from drip_agent.agents.style import FALLBACK_PALETTE, StyleResolver, canonical_archetype
from drip_agent.catalog.store import CatalogStore
from drip_agent.models.enums import BudgetTier, ColorSubtype, Gender, ProfessionArchetype
from drip_agent.services.color_analysis import COLOR_PALETTES

from conftest import STYLE_RESULT, FakeLLMClient

HEX = re.compile(r"^#[0-9A-Fa-f]{6}$")


@pytest.mark.asyncio
async def test_fallback_when_inference_fails(failing_llm: FakeLLMClient, catalog: CatalogStore, make_vibe):
    vibe = make_vibe(gender=Gender.UNKNOWN)
    style = await StyleResolver(failing_llm, catalog).execute(vibe)

    assert style.primary_archetype == "Minimalist"
    assert style.secondary_archetype == "Streetwear"
    assert style.budget_tier == BudgetTier.MIXED
    assert style.color_palette == FALLBACK_PALETTE
    assert style.color_season_palette is None
    assert style.signature_pieces == PROFESSION_GUIDES[ProfessionArchetype.GENERAL].signature_items


@pytest.mark.asyncio
async def test_fallback_on_unparsable_output(catalog: CatalogStore, make_vibe):
    llm = FakeLLMClient(style="Sure! Here's a style for you")
    style = await StyleResolver(llm, catalog).execute(make_vibe())
    assert style.primary_archetype == "Minimalist"


@pytest.mark.asyncio
async def test_fallback_uses_profession_and_color_profile(failing_llm: FakeLLMClient, catalog: CatalogStore, make_vibe):
    profile = COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN]
    vibe = make_vibe(profession_archetype=ProfessionArchetype.FINANCE, color_profile=profile)
    style = await StyleResolver(failing_llm, catalog).execute(vibe)

    assert style.signature_pieces == PROFESSION_GUIDES[ProfessionArchetype.FINANCE].signature_items
    assert [c.name for c in style.color_season_palette] == profile.best_colors


@pytest.mark.asyncio
async def test_inference_result_is_parsed(fake_llm: FakeLLMClient, catalog: CatalogStore, make_vibe):
    profile = COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN]
    vibe = make_vibe(
        gender=Gender.MALE,
        profession_archetype=ProfessionArchetype.DEVELOPER,
        color_profile=profile,
    )
    style = await StyleResolver(fake_llm, catalog).execute(vibe)

    # Canonical catalog spelling
    assert style.primary_archetype == "Techwear"
    assert style.secondary_archetype == "Minimalist"
    assert style.budget_tier == BudgetTier.MID_RANGE
    assert style.color_palette == STYLE_RESULT["color_palette"]
    assert style.signature_pieces == STYLE_RESULT["signature_pieces"]

    # Derived from the color profile when the model omits it
    assert [c.hex for c in style.color_season_palette] == profile.best_colors_hex

    _, prompt = fake_llm.calls[0]
    assert PROFESSION_GUIDES[ProfessionArchetype.DEVELOPER].description in prompt
    assert "deep-autumn" in prompt


@pytest.mark.asyncio
async def test_unknown_archetype_flows_through(catalog: CatalogStore, make_vibe):
    llm = FakeLLMClient(style={**STYLE_RESULT, "primary_archetype": "Cottagecore"})
    style = await StyleResolver(llm, catalog).execute(make_vibe())

    assert style.primary_archetype == "Cottagecore"
    assert style.secondary_archetype == "Minimalist"


@pytest.mark.asyncio
async def test_missing_fields_get_defaults(catalog: CatalogStore, make_vibe):
    llm = FakeLLMClient(
        style={"primary_archetype": "Quiet Luxury", "secondary_archetype": "classic prep", "budget_tier": "premium"}
    )
    vibe = make_vibe(profession_archetype=ProfessionArchetype.EXECUTIVE)
    style = await StyleResolver(llm, catalog).execute(vibe)

    assert style.primary_archetype == "Quiet Luxury"
    assert style.secondary_archetype == "Classic Prep"
    assert style.budget_tier == BudgetTier.MIXED
    assert style.color_palette == FALLBACK_PALETTE
    assert style.signature_pieces == PROFESSION_GUIDES[ProfessionArchetype.EXECUTIVE].signature_items
    assert style.color_season_palette is None


@pytest.mark.asyncio
async def test_canonical_archetype(catalog: CatalogStore):
    archetypes = await catalog.list_archetypes()

    assert canonical_archetype("avant garde", archetypes) == "Avant-Garde"
    assert canonical_archetype("ATHLEISURE", archetypes) == "Athleisure"
    assert canonical_archetype("Gorpcore", archetypes) == "Gorpcore"
    assert canonical_archetype("", archetypes) is None
    assert canonical_archetype(None, archetypes) is None


def test_profession_tables_cover_every_profession():
    assert set(PROFESSION_GUIDES) == set(ProfessionArchetype)
    assert occasions_for(ProfessionArchetype.DEVELOPER) == ["work day", "investor meeting", "conference"]
    assert occasions_for(ProfessionArchetype.CONTENT_CREATOR) == ["studio day", "gallery opening", "content shoot"]
    assert occasions_for(ProfessionArchetype.FINANCE) == ["boardroom", "client dinner", "weekend"]
    assert occasions_for(ProfessionArchetype.FITNESS) == ["everyday", "weekend", "special occasion"]


@pytest.mark.asyncio
async def test_short_palette_padded_from_color_season(catalog: CatalogStore, make_vibe):
    profile = COLOR_PALETTES[ColorSubtype.DEEP_AUTUMN]
    llm = FakeLLMClient(style={**STYLE_RESULT, "color_palette": ["#111111", "not-a-hex"]})
    style = await StyleResolver(llm, catalog).execute(make_vibe(color_profile=profile))

    assert len(style.color_palette) == 4
    assert all(HEX.match(code) for code in style.color_palette)
    assert style.color_palette[0] == "#111111"
    assert style.color_palette[1:] == list(dict.fromkeys(profile.best_colors_hex))[:3]


@pytest.mark.asyncio
async def test_short_palette_padded_from_fallback(catalog: CatalogStore, make_vibe):
    llm = FakeLLMClient(style={**STYLE_RESULT, "color_palette": ["#111111", "#abc", 42, "#000000"]})
    style = await StyleResolver(llm, catalog).execute(make_vibe())

    assert style.color_palette == ["#111111", "#000000", "#FFFFFF", "#808080"]


@pytest.mark.asyncio
async def test_long_palette_capped(catalog: CatalogStore, make_vibe):
    codes = [f"#{i}{i}{i}{i}{i}{i}" for i in range(1, 8)]
    llm = FakeLLMClient(style={**STYLE_RESULT, "color_palette": codes})
    style = await StyleResolver(llm, catalog).execute(make_vibe())

    assert style.color_palette == codes[:5]
