"""Product catalog and archetype reference data"""

from drip_agent.catalog.store import Archetype, CatalogStore

__all__ = ["Archetype", "CatalogStore"]
