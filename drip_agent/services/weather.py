"""
Weather advisor.

Resolves a location string to current weather and a clothing-weight
recommendation. Uses OpenWeather when an API key is configured and falls
back to a deterministic climate estimate otherwise; never raises.
"""

import re
from datetime import datetime, timezone
from typing import Callable, Optional

import httpx
import structlog

from drip_agent.core.config import Settings, get_settings
from drip_agent.core.exceptions import WeatherLookupError
from drip_agent.models.enums import ClothingWeight, Season
from drip_agent.models.vibe import SeasonalRecommendation, WeatherData

logger = structlog.get_logger(__name__)

DEFAULT_CLIMATE = (20, "Clear", 40.0)
DEFAULT_HUMIDITY = 60

# (keywords, base temperature C, condition, latitude), first match wins
CLIMATE_TABLE: list[tuple[tuple[str, ...], int, str, float]] = [
    (("miami", "florida", "texas", "arizona", "dubai", "singapore", "mumbai", "bangkok", "hawaii"), 30, "Sunny", 25.0),
    (("canada", "alaska", "russia", "norway", "sweden", "finland", "iceland", "minnesota", "chicago"), 5, "Cloudy", 55.0),
    (("san francisco", "sf", "bay area"), 18, "Foggy", 37.0),
    (("new york", "nyc", "boston"), 15, "Partly Cloudy", 41.0),
    (("los angeles", "la", "san diego"), 24, "Sunny", 34.0),
    (("seattle", "portland", "vancouver"), 14, "Rainy", 47.0),
    (("london", "uk", "england"), 12, "Cloudy", 51.0),
    (("paris", "france"), 14, "Partly Cloudy", 48.0),
    (("berlin", "germany"), 10, "Cloudy", 52.0),
    (("australia", "sydney", "melbourne"), 22, "Sunny", -34.0),
]

SEASONAL_OFFSET = {
    Season.SUMMER: 8,
    Season.WINTER: -10,
    Season.SPRING: 0,
    Season.AUTUMN: -3,
}

# (minimum temperature, weight, fabrics, style note), checked top-down
TEMPERATURE_BANDS: list[tuple[float, ClothingWeight, list[str], str]] = [
    (
        28,
        ClothingWeight.LIGHT,
        ["linen", "cotton", "silk", "chambray", "seersucker"],
        "Focus on breathable fabrics and loose fits. Light colors reflect heat.",
    ),
    (
        20,
        ClothingWeight.LIGHT,
        ["cotton", "lightweight wool", "jersey", "denim"],
        "Perfect weather for most styles. Can experiment with layers.",
    ),
    (
        12,
        ClothingWeight.LAYERED,
        ["wool", "cashmere", "cotton", "flannel", "corduroy"],
        "Layer season - cardigans, light jackets, and sweaters work great.",
    ),
    (
        5,
        ClothingWeight.MEDIUM,
        ["wool", "cashmere", "fleece", "leather", "tweed"],
        "Time for substantial outerwear. Focus on quality coats and warm accessories.",
    ),
    (
        float("-inf"),
        ClothingWeight.HEAVY,
        ["heavy wool", "cashmere", "down", "shearling", "tech fabrics"],
        "Warmth is priority. Puffer jackets, heavy coats, and layered insulation.",
    ),
]

RAIN_FABRICS = ["water-resistant nylon", "waxed cotton"]
RAIN_NOTE = " Consider waterproof options and rubber-soled shoes."

_NORTHERN_SEASONS = {
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.AUTUMN, 10: Season.AUTUMN, 11: Season.AUTUMN,
}
_OPPOSITE = {
    Season.SPRING: Season.AUTUMN,
    Season.SUMMER: Season.WINTER,
    Season.AUTUMN: Season.SPRING,
    Season.WINTER: Season.SUMMER,
}


def current_season(latitude: float, month: int) -> Season:
    """Meteorological season for a 1-12 month, flipped south of the equator."""
    northern = _NORTHERN_SEASONS.get(month, Season.WINTER)
    return northern if latitude >= 0 else _OPPOSITE[northern]


def _matches(keyword: str, text: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}\b", text) is not None


def estimate_weather(location: str, month: int) -> WeatherData:
    """Deterministic climate estimate from location keywords."""
    text = (location or "").lower()
    base_temp, condition, latitude = DEFAULT_CLIMATE

    for keywords, temp, cond, lat in CLIMATE_TABLE:
        if any(_matches(keyword, text) for keyword in keywords):
            base_temp, condition, latitude = temp, cond, lat
            break

    season = current_season(latitude, month)
    return WeatherData(
        location=location,
        temperature=base_temp + SEASONAL_OFFSET[season],
        condition=condition,
        humidity=DEFAULT_HUMIDITY,
        season=season,
    )


def seasonal_recommendation(weather: WeatherData) -> SeasonalRecommendation:
    """Clothing weight, fabrics and notes for the given weather."""
    for minimum, weight, fabrics, note in TEMPERATURE_BANDS:
        if weather.temperature >= minimum:
            break

    fabrics = list(fabrics)
    if "rain" in (weather.condition or "").lower():
        fabrics.extend(RAIN_FABRICS)
        note += RAIN_NOTE

    return SeasonalRecommendation(
        season=weather.season,
        temperature_range=f"{weather.temperature - 3}°C to {weather.temperature + 3}°C",
        clothing_weight=weight,
        fabric_suggestions=fabrics,
        style_notes=note,
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WeatherAdvisor:
    """
    Location -> weather lookup with a deterministic fallback.

    Args:
        settings: application settings (API key, base URL, timeout)
        clock: returns the current time; injectable for tests
        transport: optional httpx transport for the live lookup
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utcnow,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.clock = clock
        self.transport = transport

    async def get_weather(self, location: Optional[str]) -> Optional[WeatherData]:
        """Return weather for a location, or None when no location is given."""
        if not location or not location.strip():
            return None

        month = self.clock().month

        if not self.settings.openweather_api_key:
            return estimate_weather(location, month)

        try:
            return await self.lookup(location)
        except WeatherLookupError as e:
            logger.warning("Weather lookup failed, using estimate", location=location, error=str(e))
            return estimate_weather(location, month)

    async def lookup(self, location: str) -> WeatherData:
        """Geocode the location and fetch current conditions from OpenWeather."""
        base_url = self.settings.openweather_base_url.rstrip("/")
        api_key = self.settings.openweather_api_key

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.weather_timeout,
                transport=self.transport,
            ) as client:
                geo = await client.get(
                    f"{base_url}/geo/1.0/direct",
                    params={"q": location, "limit": 1, "appid": api_key},
                )
                geo.raise_for_status()
                places = geo.json()
                if not places:
                    raise WeatherLookupError(f"Unknown location: {location}")

                lat, lon = places[0]["lat"], places[0]["lon"]
                current = await client.get(
                    f"{base_url}/data/2.5/weather",
                    params={"lat": lat, "lon": lon, "units": "metric", "appid": api_key},
                )
                current.raise_for_status()
                data = current.json()

            return WeatherData(
                location=location,
                temperature=round(data["main"]["temp"]),
                condition=data["weather"][0]["main"],
                humidity=data["main"]["humidity"],
                season=current_season(lat, self.clock().month),
            )
        except WeatherLookupError:
            raise
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
            raise WeatherLookupError(str(e) or type(e).__name__) from e
