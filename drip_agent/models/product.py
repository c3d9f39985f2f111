"""
Catalog products and the per-job scored results built from them.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from drip_agent.models.enums import ClothingWeight, ProductGender


def _normalize_tag(value: Any) -> str:
    return str(value).strip().lower().replace(" ", "-")


class ProductCatalogEntry(BaseModel):
    """Read-only catalog product."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    category: str
    price: float
    description: str = ""
    image_url: str = ""
    buy_link: str = ""
    style_archetypes: list[str] = []
    gender: Optional[ProductGender] = None
    colors: list[str] = []
    weight: Optional[ClothingWeight] = None

    @classmethod
    def from_document(cls, doc: dict) -> "ProductCatalogEntry":
        """
        Normalize a loosely typed catalog document.

        This is the only place where storage-level defaults and coercions
        are applied; scoring code works on the typed fields only.
        """
        gender = doc.get("gender")
        weight = doc.get("weight")
        archetypes = (_normalize_tag(a) for a in doc.get("style_archetypes") or [])
        colors = (str(c).strip().lower() for c in doc.get("colors") or [])
        return cls(
            id=str(doc.get("id") or doc.get("_id")),
            name=str(doc.get("name", "")),
            brand=str(doc.get("brand", "")),
            category=str(doc.get("category") or "Other"),
            price=float(doc.get("price") or 0),
            description=str(doc.get("description") or ""),
            image_url=str(doc.get("image_url") or ""),
            buy_link=str(doc.get("buy_link") or ""),
            style_archetypes=[a for a in archetypes if a],
            gender=ProductGender.parse(gender) if gender else None,
            colors=[c for c in colors if c],
            weight=ClothingWeight.parse(weight) if weight else None,
        )


class ScoredProduct(ProductCatalogEntry):
    """Catalog entry with its match score for one job."""

    match_reason: str = ""
    match_score: int = 50
    gender_match: bool = True
    color_match: bool = False
    season_appropriate: bool = True


class OutfitSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    occasion: str
    product_ids: list[str]
    styling_tip: str


class ShoppingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    free_recommendations: list[ScoredProduct] = []
    premium_recommendations: list[ScoredProduct] = []
    outfits: list[OutfitSuggestion] = []
