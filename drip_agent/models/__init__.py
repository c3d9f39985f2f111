"""Pipeline data models"""

from drip_agent.models.enums import (
    BudgetTier,
    ClothingWeight,
    ColorSubtype,
    Contrast,
    Gender,
    JobStatus,
    ProductGender,
    ProfessionArchetype,
    Season,
    Undertone,
)
from drip_agent.models.job import AnalysisJob, Lookbook
from drip_agent.models.product import (
    OutfitSuggestion,
    ProductCatalogEntry,
    ScoredProduct,
    ShoppingResult,
)
from drip_agent.models.profile import Profile
from drip_agent.models.style import NamedColor, StyleRecommendation
from drip_agent.models.vibe import (
    ColorProfile,
    DemographicsAnalysis,
    InferredAppearance,
    PersonalityAnalysis,
    SeasonalRecommendation,
    VibeProfile,
    WeatherData,
)

__all__ = [
    "AnalysisJob",
    "BudgetTier",
    "ClothingWeight",
    "ColorProfile",
    "ColorSubtype",
    "Contrast",
    "DemographicsAnalysis",
    "Gender",
    "InferredAppearance",
    "JobStatus",
    "Lookbook",
    "NamedColor",
    "OutfitSuggestion",
    "PersonalityAnalysis",
    "ProductCatalogEntry",
    "ProductGender",
    "ProfessionArchetype",
    "Profile",
    "ScoredProduct",
    "Season",
    "SeasonalRecommendation",
    "ShoppingResult",
    "StyleRecommendation",
    "Undertone",
    "VibeProfile",
    "WeatherData",
]
