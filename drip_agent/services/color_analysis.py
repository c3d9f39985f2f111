"""
Color season analysis.

Classifies hair/eye/skin guesses into one of twelve seasonal color profiles
using professional color theory: undertone, contrast, and a fixed
season/subtype decision table. The twelve palettes are reference data.
"""

from typing import Optional

import structlog

from drip_agent.models.enums import ColorSubtype, Contrast, Season, Undertone
from drip_agent.models.style import NamedColor
from drip_agent.models.vibe import ColorProfile

logger = structlog.get_logger(__name__)

DEFAULT_HEX = "#808080"

# Name -> hex. Lookups try an exact name first, then the first entry (in this
# order) where either string contains the other.
COLOR_HEX: dict[str, str] = {
    # Reds / pinks
    "true red": "#C8102E",
    "warm red": "#D2352B",
    "tomato red": "#E5533D",
    "poppy red": "#E35335",
    "ruby red": "#9B111E",
    "hot pink": "#FF69B4",
    "shocking pink": "#FC0FC0",
    "icy pink": "#F6D6E0",
    "warm pink": "#F4A6A0",
    "cool pink": "#E8A0BF",
    "soft pink": "#F4C2C2",
    "dusty pink": "#D8A7A7",
    "dusty rose": "#C08081",
    "rose": "#E8909C",
    "raspberry": "#B3446C",
    "soft raspberry": "#C2577B",
    "watermelon": "#FC6C85",
    "fuchsia": "#FF00A0",
    "bright magenta": "#FF08E8",
    "burgundy": "#800020",
    "soft burgundy": "#8C4A5A",
    # Oranges / corals
    "bright coral": "#FF6F61",
    "warm coral": "#F88379",
    "dusty coral": "#D7837F",
    "deep coral": "#CD5B45",
    "coral": "#FF7F50",
    "peach": "#FFCBA4",
    "tangerine": "#F28500",
    "bright orange": "#FF7518",
    "burnt orange": "#CC5500",
    "pumpkin": "#FF7518",
    "orange": "#FFA500",
    "terracotta": "#E2725B",
    "burnt sienna": "#E97451",
    "soft rust": "#B86B4B",
    "rust": "#B7410E",
    # Yellows / golds
    "golden yellow": "#FFDF00",
    "warm yellow": "#F5C542",
    "muted gold": "#C9A66B",
    "saffron": "#F4C430",
    "mustard": "#E1AD01",
    # Greens
    "lime green": "#32CD32",
    "leaf green": "#5CA04C",
    "forest green": "#228B22",
    "emerald": "#50C878",
    "mint": "#98FF98",
    "sage": "#9CAF88",
    "soft olive": "#8F8B5E",
    "olive": "#808000",
    # Blues / teals
    "electric blue": "#7DF9FF",
    "cobalt blue": "#0047AB",
    "royal blue": "#4169E1",
    "sapphire blue": "#0F52BA",
    "powder blue": "#B0E0E6",
    "icy blue": "#D6ECEF",
    "dusty blue": "#7A93AC",
    "slate blue": "#6A7BA2",
    "soft navy": "#3B4A6B",
    "navy": "#1F2A44",
    "deep periwinkle": "#7C83BC",
    "periwinkle": "#CCCCFF",
    "light turquoise": "#AFEEEE",
    "warm turquoise": "#3FD0C9",
    "bright turquoise": "#08E8DE",
    "turquoise": "#40E0D0",
    "soft aqua": "#9ED9D4",
    "aqua": "#00FFFF",
    "bright teal": "#00A99D",
    "deep teal": "#014D4E",
    "soft teal": "#6CA6A3",
    "teal": "#008080",
    # Purples
    "icy violet": "#E5DAF5",
    "bright purple": "#BF40BF",
    "deep purple": "#4B0082",
    "muted plum": "#7D5A6E",
    "light plum": "#C8A2C8",
    "plum": "#8E4585",
    "lavender": "#B57EDC",
    "mauve": "#B784A7",
    "purple": "#800080",
    # Browns / neutrals
    "chocolate brown": "#5C3317",
    "charcoal brown": "#3B3128",
    "dark brown": "#4B3621",
    "golden brown": "#996515",
    "warm brown": "#8B5A2B",
    "soft brown": "#9C7A5B",
    "cocoa": "#6F4E37",
    "light camel": "#D8B98C",
    "camel": "#C19A6B",
    "khaki": "#C3B091",
    "golden beige": "#D6B97B",
    "warm beige": "#E3C9A8",
    "buff": "#DAA06D",
    "taupe": "#8B8589",
    "greige": "#B5ADA3",
    "mushroom": "#BDACA3",
    "oyster": "#DCD6C8",
    "stone": "#ADA587",
    "cream": "#FFFDD0",
    "ivory": "#FFFFF0",
    # Grays / black / white
    "warm gray": "#A19A91",
    "dove gray": "#B8B5B1",
    "light gray": "#D3D3D3",
    "silver-gray": "#A9ACB6",
    "soft charcoal": "#5A5A5A",
    "charcoal": "#36454F",
    "gray": "#808080",
    "soft white": "#F8F6F0",
    "bright white": "#FFFFFF",
    "pure white": "#FFFFFF",
    "white": "#FFFFFF",
    "soft black": "#2B2B2B",
    "warm black": "#1C1A17",
    "jet black": "#0A0A0A",
    "black": "#000000",
}


def color_name_to_hex(name: str) -> str:
    """Look up a hex code for a color name, defaulting to mid-gray."""
    key = (name or "").strip().lower()
    if not key:
        return DEFAULT_HEX
    if key in COLOR_HEX:
        return COLOR_HEX[key]
    for known, hex_code in COLOR_HEX.items():
        if known in key or key in known:
            return hex_code
    return DEFAULT_HEX


def _palette(
    season: Season,
    subtype: ColorSubtype,
    undertone: Undertone,
    contrast: Contrast,
    best: list[str],
    accent: list[str],
    avoid: list[str],
    metals: list[str],
    neutrals: list[str],
    description: str,
) -> ColorProfile:
    return ColorProfile(
        season=season,
        subtype=subtype,
        undertone=undertone,
        contrast=contrast,
        best_colors=best,
        best_colors_hex=[color_name_to_hex(c) for c in best],
        accent_colors=accent,
        accent_colors_hex=[color_name_to_hex(c) for c in accent],
        avoid_colors=avoid,
        avoid_colors_hex=[color_name_to_hex(c) for c in avoid],
        metals=metals,
        neutrals=neutrals,
        description=description,
    )


COLOR_PALETTES: dict[ColorSubtype, ColorProfile] = {
    # SPRING - warm undertones, clear and bright
    ColorSubtype.LIGHT_SPRING: _palette(
        Season.SPRING, ColorSubtype.LIGHT_SPRING, Undertone.WARM, Contrast.LOW,
        best=["peach", "coral", "warm pink", "light turquoise", "mint", "camel", "cream"],
        accent=["poppy red", "aqua", "bright coral"],
        avoid=["black", "dark brown", "burgundy", "charcoal"],
        metals=["gold", "rose-gold"],
        neutrals=["ivory", "warm beige", "light camel", "soft white"],
        description="Fresh, delicate, and youthful. Think spring garden colors.",
    ),
    ColorSubtype.WARM_SPRING: _palette(
        Season.SPRING, ColorSubtype.WARM_SPRING, Undertone.WARM, Contrast.MEDIUM,
        best=["tangerine", "warm coral", "golden yellow", "leaf green", "warm turquoise"],
        accent=["tomato red", "orange", "bright teal"],
        avoid=["cool pink", "burgundy", "black", "silver-gray"],
        metals=["gold", "copper"],
        neutrals=["camel", "warm brown", "buff", "golden beige"],
        description="Energetic and sunny. Golden undertones throughout.",
    ),
    ColorSubtype.CLEAR_SPRING: _palette(
        Season.SPRING, ColorSubtype.CLEAR_SPRING, Undertone.WARM, Contrast.HIGH,
        best=["bright coral", "warm red", "emerald", "turquoise", "cobalt blue", "hot pink"],
        accent=["electric blue", "lime green", "bright orange"],
        avoid=["muted colors", "dusty tones", "olive", "mauve"],
        metals=["gold", "rose-gold"],
        neutrals=["navy", "warm black", "bright white", "camel"],
        description="Bold and vivid. High contrast between hair and skin.",
    ),
    # SUMMER - cool undertones, soft and muted
    ColorSubtype.LIGHT_SUMMER: _palette(
        Season.SUMMER, ColorSubtype.LIGHT_SUMMER, Undertone.COOL, Contrast.LOW,
        best=["powder blue", "soft pink", "lavender", "soft aqua", "rose", "periwinkle"],
        accent=["soft raspberry", "light plum", "dusty blue"],
        avoid=["orange", "rust", "mustard", "warm brown"],
        metals=["silver", "rose-gold"],
        neutrals=["soft white", "dove gray", "taupe", "soft navy"],
        description="Ethereal and romantic. Soft, dusty pastels.",
    ),
    ColorSubtype.COOL_SUMMER: _palette(
        Season.SUMMER, ColorSubtype.COOL_SUMMER, Undertone.COOL, Contrast.MEDIUM,
        best=["raspberry", "dusty rose", "slate blue", "soft teal", "lavender", "burgundy"],
        accent=["watermelon", "plum", "deep periwinkle"],
        avoid=["orange", "rust", "warm yellow", "golden brown"],
        metals=["silver", "rose-gold"],
        neutrals=["charcoal", "gray", "navy", "soft black"],
        description="Elegant and sophisticated. Cool, muted palette.",
    ),
    ColorSubtype.SOFT_SUMMER: _palette(
        Season.SUMMER, ColorSubtype.SOFT_SUMMER, Undertone.NEUTRAL, Contrast.LOW,
        best=["dusty blue", "mauve", "sage", "soft teal", "cocoa", "stone"],
        accent=["muted plum", "dusty pink", "soft burgundy"],
        avoid=["bright colors", "neon", "pure white", "jet black"],
        metals=["silver", "rose-gold"],
        neutrals=["greige", "mushroom", "soft charcoal", "stone"],
        description="Understated elegance. Soft, muted, and harmonious.",
    ),
    # AUTUMN - warm undertones, muted and rich
    ColorSubtype.SOFT_AUTUMN: _palette(
        Season.AUTUMN, ColorSubtype.SOFT_AUTUMN, Undertone.WARM, Contrast.LOW,
        best=["soft teal", "sage", "dusty coral", "warm gray", "muted gold", "soft olive"],
        accent=["terracotta", "burnt sienna", "soft rust"],
        avoid=["bright colors", "cool pink", "icy colors", "black"],
        metals=["gold", "copper", "rose-gold"],
        neutrals=["oyster", "stone", "warm gray", "soft brown"],
        description="Earthy and subtle. Soft, muted warmth.",
    ),
    ColorSubtype.WARM_AUTUMN: _palette(
        Season.AUTUMN, ColorSubtype.WARM_AUTUMN, Undertone.WARM, Contrast.MEDIUM,
        best=["terracotta", "rust", "olive", "mustard", "burnt orange", "teal"],
        accent=["tomato red", "saffron", "deep teal"],
        avoid=["cool pink", "icy blue", "silver-gray", "black"],
        metals=["gold", "copper"],
        neutrals=["camel", "chocolate brown", "cream", "khaki"],
        description="Rich harvest colors. Golden, earthy warmth.",
    ),
    ColorSubtype.DEEP_AUTUMN: _palette(
        Season.AUTUMN, ColorSubtype.DEEP_AUTUMN, Undertone.WARM, Contrast.HIGH,
        best=["olive", "forest green", "burnt orange", "tomato red", "teal", "rust"],
        accent=["emerald", "pumpkin", "deep coral"],
        avoid=["pastels", "cool pink", "icy colors", "lavender"],
        metals=["gold", "copper"],
        neutrals=["dark brown", "charcoal brown", "cream", "khaki"],
        description="Rich and intense. Deep, saturated earth tones.",
    ),
    # WINTER - cool undertones, high contrast
    ColorSubtype.DEEP_WINTER: _palette(
        Season.WINTER, ColorSubtype.DEEP_WINTER, Undertone.COOL, Contrast.HIGH,
        best=["black", "pure white", "burgundy", "emerald", "sapphire blue", "deep purple"],
        accent=["ruby red", "royal blue", "bright magenta"],
        avoid=["muted colors", "earth tones", "orange", "golden brown"],
        metals=["silver", "rose-gold"],
        neutrals=["black", "pure white", "charcoal", "navy"],
        description="Dramatic and bold. Rich, deep, and high contrast.",
    ),
    ColorSubtype.COOL_WINTER: _palette(
        Season.WINTER, ColorSubtype.COOL_WINTER, Undertone.COOL, Contrast.HIGH,
        best=["true red", "fuchsia", "royal blue", "emerald", "icy pink", "purple"],
        accent=["hot pink", "electric blue", "bright purple"],
        avoid=["orange", "warm brown", "mustard", "peach"],
        metals=["silver"],
        neutrals=["black", "white", "gray", "navy"],
        description="Cool and sophisticated. Pure, saturated colors.",
    ),
    ColorSubtype.CLEAR_WINTER: _palette(
        Season.WINTER, ColorSubtype.CLEAR_WINTER, Undertone.COOL, Contrast.HIGH,
        best=["true red", "emerald", "cobalt blue", "hot pink", "icy violet", "black"],
        accent=["fuchsia", "bright turquoise", "shocking pink"],
        avoid=["muted colors", "dusty tones", "warm browns", "orange"],
        metals=["silver", "rose-gold"],
        neutrals=["jet black", "pure white", "light gray", "navy"],
        description="Vivid and striking. Clear, bright, high-contrast.",
    ),
}


# Keyword tables: (signal name, field, keywords)
SIGNAL_KEYWORDS: list[tuple[str, str, tuple[str, ...]]] = [
    ("red_hair", "hair", ("red", "auburn", "ginger", "strawberry")),
    ("warm_hair", "hair", ("golden", "copper", "chestnut", "honey", "caramel", "red", "auburn", "ginger", "strawberry")),
    ("cool_hair", "hair", ("ash", "platinum", "silver")),
    ("dark_hair", "hair", ("black", "dark", "brown", "brunette", "espresso")),
    ("light_hair", "hair", ("blonde", "blond", "light", "gray", "grey", "white", "platinum")),
    ("warm_eyes", "eyes", ("brown", "hazel", "amber", "gold")),
    ("cool_eyes", "eyes", ("blue", "gray", "grey", "green")),
    ("deep_eyes", "eyes", ("dark", "deep", "black")),
    ("warm_skin", "skin", ("golden", "olive", "warm", "yellow", "peach")),
    ("cool_skin", "skin", ("pink", "cool", "rosy", "blue")),
    ("fair_skin", "skin", ("fair", "light", "pale", "porcelain", "ivory")),
    ("dark_skin", "skin", ("dark", "deep", "ebony", "espresso")),
]

WARM_SIGNALS = ("warm_hair", "warm_eyes", "warm_skin", "red_hair")
COOL_SIGNALS = ("cool_hair", "cool_eyes", "cool_skin")


def detect_signals(
    hair_color: Optional[str] = None,
    eye_color: Optional[str] = None,
    skin_tone: Optional[str] = None,
) -> dict[str, bool]:
    """Case-insensitive keyword detection over the three appearance fields."""
    fields = {
        "hair": (hair_color or "").lower(),
        "eyes": (eye_color or "").lower(),
        "skin": (skin_tone or "").lower(),
    }
    return {
        signal: any(keyword in fields[field] for keyword in keywords)
        for signal, field, keywords in SIGNAL_KEYWORDS
    }


def resolve_undertone(signals: dict[str, bool], hint: Optional[Undertone] = None) -> Undertone:
    warm = sum(signals[s] for s in WARM_SIGNALS)
    cool = sum(signals[s] for s in COOL_SIGNALS)
    if warm > cool:
        return Undertone.WARM
    if cool > warm:
        return Undertone.COOL
    return hint or Undertone.NEUTRAL


def resolve_contrast(signals: dict[str, bool]) -> Contrast:
    if (signals["dark_hair"] or signals["deep_eyes"]) and signals["fair_skin"]:
        return Contrast.HIGH
    if signals["light_hair"] and signals["dark_skin"]:
        return Contrast.HIGH
    if signals["dark_hair"] and signals["dark_skin"]:
        return Contrast.LOW
    if signals["light_hair"] and signals["fair_skin"]:
        return Contrast.LOW
    return Contrast.MEDIUM


def resolve_subtype(undertone: Undertone, contrast: Contrast, signals: dict[str, bool]) -> ColorSubtype:
    dark, light, red = signals["dark_hair"], signals["light_hair"], signals["red_hair"]

    if undertone == Undertone.WARM:
        if contrast == Contrast.HIGH:
            return ColorSubtype.DEEP_AUTUMN if dark else ColorSubtype.CLEAR_SPRING
        if contrast == Contrast.LOW:
            return ColorSubtype.LIGHT_SPRING if light else ColorSubtype.SOFT_AUTUMN
        return ColorSubtype.WARM_AUTUMN if red else ColorSubtype.WARM_SPRING

    if undertone == Undertone.COOL:
        if contrast == Contrast.HIGH:
            return ColorSubtype.DEEP_WINTER if dark else ColorSubtype.CLEAR_WINTER
        if contrast == Contrast.LOW:
            return ColorSubtype.LIGHT_SUMMER if light else ColorSubtype.SOFT_SUMMER
        return ColorSubtype.COOL_SUMMER

    if contrast == Contrast.HIGH:
        return ColorSubtype.DEEP_WINTER if dark else ColorSubtype.COOL_WINTER
    if contrast == Contrast.LOW:
        return ColorSubtype.SOFT_SUMMER
    return ColorSubtype.SOFT_AUTUMN


def analyze_color_season(
    hair_color: Optional[str] = None,
    eye_color: Optional[str] = None,
    skin_tone: Optional[str] = None,
    undertone_hint: Optional[Undertone] = None,
) -> ColorProfile:
    """
    Classify appearance guesses into one of the twelve color profiles.

    Pure and total: empty input lands on the neutral / medium-contrast
    soft-autumn profile.
    """
    signals = detect_signals(hair_color, eye_color, skin_tone)
    undertone = resolve_undertone(signals, undertone_hint)
    contrast = resolve_contrast(signals)
    subtype = resolve_subtype(undertone, contrast, signals)

    logger.debug(
        "Color season classified",
        undertone=undertone.value,
        contrast=contrast.value,
        subtype=subtype.value,
    )
    return COLOR_PALETTES[subtype]


def outfit_color_suggestions(profile: ColorProfile) -> dict:
    """Ready-made color combinations drawn from a profile."""
    best, accent, neutrals = profile.best_colors, profile.accent_colors, profile.neutrals
    return {
        "monochromatic": [neutrals[0], neutrals[1], best[0]],
        "complementary": [best[0], best[2], accent[0]],
        "statement_piece": accent[0],
        "everyday_palette": [*neutrals[:2], *best[:2]],
    }


def season_palette(profile: ColorProfile) -> list[NamedColor]:
    """Named hex palette built from a profile's best colors."""
    return [NamedColor(name=name, hex=color_name_to_hex(name)) for name in profile.best_colors]
