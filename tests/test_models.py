"""
Data model tests: enum parsing and catalog normalization.
"""

import pytest

from drip_agent.models import enums
from drip_agent.models.enums import BudgetTier, Gender, ParsableEnum, ProductGender
from drip_agent.models.product import ProductCatalogEntry

PARSABLE_ENUMS = [
    value
    for value in vars(enums).values()
    if isinstance(value, type) and issubclass(value, ParsableEnum) and value is not ParsableEnum
]


@pytest.mark.parametrize("enum_cls", PARSABLE_ENUMS, ids=lambda cls: cls.__name__)
def test_every_enum_defines_its_fallback(enum_cls):
    assert enum_cls.fallback() in enum_cls
    assert enum_cls.parse("definitely not a member") is enum_cls.fallback()
    assert enum_cls.parse(None) is enum_cls.fallback()


def test_parse_normalizes_spelling():
    assert Gender.parse(" Non Binary ") is Gender.NON_BINARY
    assert BudgetTier.parse("MID_RANGE") is BudgetTier.MID_RANGE
    assert BudgetTier.parse("premium", default=BudgetTier.LUXURY) is BudgetTier.LUXURY


def test_catalog_document_drops_blank_tags():
    entry = ProductCatalogEntry.from_document(
        {
            "id": "p1",
            "name": "Shell",
            "brand": "Brand",
            "price": "120",
            "gender": "Male",
            "colors": ["", "  ", "Black"],
            "style_archetypes": ["", "Quiet Luxury"],
        }
    )

    assert entry.colors == ["black"]
    assert entry.style_archetypes == ["quiet-luxury"]
    assert entry.gender is ProductGender.MALE
    assert entry.price == 120.0
    assert entry.category == "Other"
