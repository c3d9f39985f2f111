"""
Read-only product catalog.

Documents are normalized into ProductCatalogEntry once, when the store is
built; all queries return typed entries in catalog order.
"""

from typing import Iterable, Optional

import structlog
from pydantic import BaseModel, ConfigDict

from drip_agent.catalog.seed import ARCHETYPES, PRODUCTS
from drip_agent.models.enums import ProductGender
from drip_agent.models.product import ProductCatalogEntry

logger = structlog.get_logger(__name__)


class Archetype(BaseModel):
    """Fashion archetype reference entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    keywords: list[str] = []
    color_palette: list[str] = []
    example_brands: list[str] = []


class CatalogStore:
    """In-process catalog built from seed documents."""

    def __init__(
        self,
        archetypes: Optional[list[dict]] = None,
        products: Optional[list[dict]] = None,
    ):
        archetype_docs = ARCHETYPES if archetypes is None else archetypes
        product_docs = PRODUCTS if products is None else products

        self._archetypes = [Archetype.model_validate(doc) for doc in archetype_docs]
        self._products = [ProductCatalogEntry.from_document(doc) for doc in product_docs]

        logger.debug(
            "Catalog loaded",
            archetypes=len(self._archetypes),
            products=len(self._products),
        )

    async def list_archetypes(self) -> list[Archetype]:
        return list(self._archetypes)

    async def find_products(
        self,
        archetypes: Optional[Iterable[str]] = None,
        genders: Optional[Iterable[ProductGender]] = None,
        exclude_ids: Iterable[str] = (),
        limit: Optional[int] = None,
    ) -> list[ProductCatalogEntry]:
        """
        Query products by archetype-tag membership and gender tag.

        Args:
            archetypes: normalized archetype tags; a product matches if any tag intersects
            genders: accepted gender tags; untagged products never match a gender filter
            exclude_ids: product ids to skip
            limit: maximum number of results

        Returns:
            Matching products in catalog order
        """
        wanted_archetypes = set(archetypes) if archetypes is not None else None
        wanted_genders = set(genders) if genders is not None else None
        excluded = set(exclude_ids)

        results = []
        for product in self._products:
            if limit is not None and len(results) >= limit:
                break
            if product.id in excluded:
                continue
            if wanted_archetypes is not None and not wanted_archetypes.intersection(product.style_archetypes):
                continue
            if wanted_genders is not None and product.gender not in wanted_genders:
                continue
            results.append(product)

        return results

    async def stats(self) -> dict:
        return {
            "archetypes": len(self._archetypes),
            "products": len(self._products),
            "seeded": bool(self._archetypes and self._products),
        }
