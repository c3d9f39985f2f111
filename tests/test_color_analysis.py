"""
Color season classification tests.
"""

import pytest

from drip_agent.models.enums import ColorSubtype, Contrast, Season, Undertone
from drip_agent.services.color_analysis import (
    COLOR_PALETTES,
    DEFAULT_HEX,
    analyze_color_season,
    color_name_to_hex,
    detect_signals,
    outfit_color_suggestions,
    season_palette,
)


def test_empty_input_defaults_to_soft_autumn():
    profile = analyze_color_season()
    assert profile.subtype == ColorSubtype.SOFT_AUTUMN
    assert profile.season == Season.AUTUMN

    blank = analyze_color_season("", "  ", None)
    assert blank.subtype == ColorSubtype.SOFT_AUTUMN


def test_classifier_is_pure():
    first = analyze_color_season("dark brown", "hazel", "olive")
    second = analyze_color_season("dark brown", "hazel", "olive")
    assert first == second
    assert first is COLOR_PALETTES[first.subtype]


@pytest.mark.parametrize(
    "hair,eyes,skin,expected",
    [
        ("golden blonde", "hazel", "fair warm", ColorSubtype.LIGHT_SPRING),
        ("platinum", "blue", "pale pink", ColorSubtype.LIGHT_SUMMER),
        ("auburn", "green", "medium", ColorSubtype.WARM_AUTUMN),
        ("black", "dark brown", "fair pink", ColorSubtype.DEEP_WINTER),
        ("black", "black", "deep ebony", ColorSubtype.SOFT_SUMMER),
        ("dark brown", "brown", "fair", ColorSubtype.DEEP_AUTUMN),
    ],
)
def test_decision_table(hair, eyes, skin, expected):
    assert analyze_color_season(hair, eyes, skin).subtype == expected


def test_signals_are_case_insensitive():
    signals = detect_signals("Strawberry BLONDE", "Hazel", "Porcelain")
    assert signals["red_hair"]
    assert signals["light_hair"]
    assert signals["warm_eyes"]
    assert signals["fair_skin"]
    assert not signals["dark_skin"]


def test_undertone_hint_breaks_ties():
    # One warm and one cool signal
    assert analyze_color_season("black", "dark brown", "fair pink").subtype == ColorSubtype.DEEP_WINTER
    hinted = analyze_color_season("black", "dark brown", "fair pink", undertone_hint=Undertone.WARM)
    assert hinted.subtype == ColorSubtype.DEEP_AUTUMN


def test_hint_alone_selects_warm_spring():
    profile = analyze_color_season(undertone_hint=Undertone.WARM)
    assert profile.subtype == ColorSubtype.WARM_SPRING
    assert profile.contrast == Contrast.MEDIUM


def test_palettes_cover_all_subtypes_with_hex():
    assert set(COLOR_PALETTES) == set(ColorSubtype)
    for subtype, profile in COLOR_PALETTES.items():
        assert profile.subtype == subtype
        assert len(profile.best_colors_hex) == len(profile.best_colors)
        assert len(profile.accent_colors_hex) == len(profile.accent_colors)
        assert len(profile.avoid_colors_hex) == len(profile.avoid_colors)
        assert all(h.startswith("#") and len(h) == 7 for h in profile.best_colors_hex)


def test_color_name_lookup():
    assert color_name_to_hex("navy") == "#1F2A44"
    assert color_name_to_hex("Soft Teal") == "#6CA6A3"
    assert color_name_to_hex("rose") == "#E8909C"
    assert color_name_to_hex("deep navy blue") == "#1F2A44"
    assert color_name_to_hex("zzz") == DEFAULT_HEX
    assert color_name_to_hex("") == DEFAULT_HEX


def test_outfit_color_suggestions():
    profile = COLOR_PALETTES[ColorSubtype.WARM_AUTUMN]
    suggestions = outfit_color_suggestions(profile)

    assert suggestions["statement_piece"] == profile.accent_colors[0]
    assert suggestions["monochromatic"] == [profile.neutrals[0], profile.neutrals[1], profile.best_colors[0]]
    assert suggestions["everyday_palette"] == profile.neutrals[:2] + profile.best_colors[:2]


def test_season_palette_names_and_hex():
    profile = COLOR_PALETTES[ColorSubtype.COOL_WINTER]
    palette = season_palette(profile)

    assert [c.name for c in palette] == profile.best_colors
    assert [c.hex for c in palette] == profile.best_colors_hex
