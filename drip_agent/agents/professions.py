"""
Profession-specific style guidance and outfit occasions.
"""

from pydantic import BaseModel, ConfigDict

from drip_agent.models.enums import ProfessionArchetype


class ProfessionGuide(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    brands: list[str]
    signature_items: list[str]
    vibe: str


PROFESSION_GUIDES: dict[ProfessionArchetype, ProfessionGuide] = {
    ProfessionArchetype.TECH_FOUNDER: ProfessionGuide(
        description="Startup founder balancing investor credibility with builder authenticity",
        brands=["Patagonia", "Allbirds", "Everlane", "Arc'teryx", "Uniqlo U"],
        signature_items=["Merino crewneck", "Technical overshirt", "Clean white sneakers", "Quarter-zip fleece"],
        vibe="Effortless competence: dressed for a pitch, ready for a whiteboard session",
    ),
    ProfessionArchetype.DEVELOPER: ProfessionGuide(
        description="Engineer who values comfort, function and quiet quality",
        brands=["Uniqlo", "Arc'teryx", "Outlier", "Carhartt WIP", "New Balance"],
        signature_items=["Heavyweight hoodie", "Performance chinos", "Trail runners", "Technical shell"],
        vibe="Comfort-first utility with a few well-chosen upgrades",
    ),
    ProfessionArchetype.CREATIVE: ProfessionGuide(
        description="Designer, artist or photographer with a point of view",
        brands=["COS", "Our Legacy", "Acne Studios", "Dries Van Noten", "Margaret Howell"],
        signature_items=["Boxy workwear jacket", "Wide-leg trousers", "Statement knit", "Leather derbies"],
        vibe="Considered and expressive, with texture and unexpected proportion",
    ),
    ProfessionArchetype.FINANCE: ProfessionGuide(
        description="Finance professional where polish signals trust",
        brands=["Brooks Brothers", "Loro Piana", "Suitsupply", "Sid Mashburn", "Church's"],
        signature_items=["Navy blazer", "Crisp oxford shirt", "Tailored wool trousers", "Leather loafers"],
        vibe="Understated authority in impeccable fit",
    ),
    ProfessionArchetype.EXECUTIVE: ProfessionGuide(
        description="Senior leader whose wardrobe carries presence in every room",
        brands=["Brunello Cucinelli", "The Row", "Zegna", "Theory", "Max Mara"],
        signature_items=["Cashmere overcoat", "Unstructured suit", "Fine-gauge turtleneck", "Minimal leather watch"],
        vibe="Quiet luxury that reads as confidence, not display",
    ),
    ProfessionArchetype.ACADEMIC: ProfessionGuide(
        description="Researcher or educator blending intellect with approachability",
        brands=["J.Crew", "L.L.Bean", "Barbour", "Drake's", "Clarks"],
        signature_items=["Tweed blazer", "Shetland sweater", "Corduroy trousers", "Desert boots"],
        vibe="Tactile, timeless and a little rumpled in the right way",
    ),
    ProfessionArchetype.HEALTHCARE: ProfessionGuide(
        description="Healthcare worker who needs practicality on and off shift",
        brands=["Figs", "Vuori", "Hoka", "Uniqlo", "Lululemon"],
        signature_items=["Stretch joggers", "Supportive sneakers", "Soft knit cardigan", "Packable jacket"],
        vibe="Calm, clean and comfortable for long days",
    ),
    ProfessionArchetype.CONTENT_CREATOR: ProfessionGuide(
        description="Creator whose look is part of the brand",
        brands=["Aimé Leon Dore", "Kith", "Fear of God Essentials", "Stüssy", "Salomon"],
        signature_items=["Graphic heavyweight tee", "Varsity jacket", "Statement sneakers", "Cargo pants"],
        vibe="Camera-ready and trend-aware without trying too hard",
    ),
    ProfessionArchetype.FITNESS: ProfessionGuide(
        description="Fitness professional living in performance wear",
        brands=["Lululemon", "Nike", "On Running", "Vuori", "Alo Yoga"],
        signature_items=["Performance joggers", "Seamless tee", "Running shoes", "Lightweight zip jacket"],
        vibe="Athletic ease that transitions from studio to street",
    ),
    ProfessionArchetype.GENERAL: ProfessionGuide(
        description="Versatile lifestyle that needs pieces working across contexts",
        brands=["Uniqlo", "Everlane", "COS", "J.Crew", "Madewell"],
        signature_items=["Quality white tee", "Dark denim", "Clean sneakers", "Versatile jacket"],
        vibe="Easy, reliable style that adapts to the day",
    ),
}

OCCASIONS: dict[ProfessionArchetype, list[str]] = {
    ProfessionArchetype.TECH_FOUNDER: ["work day", "investor meeting", "conference"],
    ProfessionArchetype.DEVELOPER: ["work day", "investor meeting", "conference"],
    ProfessionArchetype.CREATIVE: ["studio day", "gallery opening", "content shoot"],
    ProfessionArchetype.CONTENT_CREATOR: ["studio day", "gallery opening", "content shoot"],
    ProfessionArchetype.FINANCE: ["boardroom", "client dinner", "weekend"],
    ProfessionArchetype.EXECUTIVE: ["boardroom", "client dinner", "weekend"],
}
DEFAULT_OCCASIONS = ["everyday", "weekend", "special occasion"]


def profession_guide(profession: ProfessionArchetype) -> ProfessionGuide:
    return PROFESSION_GUIDES.get(profession, PROFESSION_GUIDES[ProfessionArchetype.GENERAL])


def occasions_for(profession: ProfessionArchetype) -> list[str]:
    return list(OCCASIONS.get(profession, DEFAULT_OCCASIONS))
