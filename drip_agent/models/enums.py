"""
Closed value sets used across the pipeline.

Model output arrives as free text; every enum here is parsed through
`parse()`, which maps unknown or missing values to the enum's fallback
member instead of raising.
"""

from enum import Enum
from typing import Any, Optional


class ParsableEnum(str, Enum):
    """
    String enum with a tolerant constructor.

    Abstract: every subclass overrides `fallback()` to name the member that
    unrecognised values parse to.
    """

    @classmethod
    def fallback(cls) -> "ParsableEnum":
        raise NotImplementedError(f"{cls.__name__} must define fallback()")

    @classmethod
    def parse(cls, value: Any, default: Optional["ParsableEnum"] = None):
        """Parse a loosely formatted value, returning the fallback when unrecognised."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-").replace(" ", "-")
            for member in cls:
                if member.value == key:
                    return member
        return default if default is not None else cls.fallback()


class Gender(ParsableEnum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"
    UNKNOWN = "unknown"

    @classmethod
    def fallback(cls) -> "Gender":
        return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not Gender.UNKNOWN


class ProductGender(ParsableEnum):
    """Gender tag on a catalog product."""
    MALE = "male"
    FEMALE = "female"
    UNISEX = "unisex"

    @classmethod
    def fallback(cls) -> "ProductGender":
        return cls.UNISEX


class ProfessionArchetype(ParsableEnum):
    TECH_FOUNDER = "tech-founder"
    DEVELOPER = "developer"
    CREATIVE = "creative"
    FINANCE = "finance"
    EXECUTIVE = "executive"
    ACADEMIC = "academic"
    HEALTHCARE = "healthcare"
    CONTENT_CREATOR = "content-creator"
    FITNESS = "fitness"
    GENERAL = "general"

    @classmethod
    def fallback(cls) -> "ProfessionArchetype":
        return cls.GENERAL


class Undertone(ParsableEnum):
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"

    @classmethod
    def fallback(cls) -> "Undertone":
        return cls.NEUTRAL


class Contrast(ParsableEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def fallback(cls) -> "Contrast":
        return cls.MEDIUM


class Season(ParsableEnum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"

    @classmethod
    def fallback(cls) -> "Season":
        return cls.AUTUMN


class ColorSubtype(ParsableEnum):
    LIGHT_SPRING = "light-spring"
    WARM_SPRING = "warm-spring"
    CLEAR_SPRING = "clear-spring"
    LIGHT_SUMMER = "light-summer"
    COOL_SUMMER = "cool-summer"
    SOFT_SUMMER = "soft-summer"
    SOFT_AUTUMN = "soft-autumn"
    WARM_AUTUMN = "warm-autumn"
    DEEP_AUTUMN = "deep-autumn"
    DEEP_WINTER = "deep-winter"
    COOL_WINTER = "cool-winter"
    CLEAR_WINTER = "clear-winter"

    @classmethod
    def fallback(cls) -> "ColorSubtype":
        return cls.SOFT_AUTUMN


class ClothingWeight(ParsableEnum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    LAYERED = "layered"

    @classmethod
    def fallback(cls) -> "ClothingWeight":
        return cls.MEDIUM


class BudgetTier(ParsableEnum):
    ACCESSIBLE = "accessible"
    MID_RANGE = "mid-range"
    LUXURY = "luxury"
    MIXED = "mixed"

    @classmethod
    def fallback(cls) -> "BudgetTier":
        return cls.MIXED


class JobStatus(str, Enum):
    """Analysis job state machine."""
    PENDING = "pending"
    SCRAPING = "scraping"
    ANALYZING_VIBE = "analyzing_vibe"
    MATCHING_STYLE = "matching_style"
    FINDING_PRODUCTS = "finding_products"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETE, JobStatus.ERROR)
