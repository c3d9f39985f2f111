"""
Weather advisor tests.
"""

from datetime import datetime, timezone

import httpx
import pytest

from drip_agent.core.config import Settings
from drip_agent.models.enums import ClothingWeight, Season
from drip_agent.models.vibe import WeatherData
from drip_agent.services.weather import (
    RAIN_NOTE,
    WeatherAdvisor,
    current_season,
    estimate_weather,
    seasonal_recommendation,
)

WINTER_DAY = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "latitude,month,expected",
    [
        (40, 1, Season.WINTER),
        (40, 4, Season.SPRING),
        (40, 7, Season.SUMMER),
        (40, 10, Season.AUTUMN),
        (40, 12, Season.WINTER),
        (-34, 1, Season.SUMMER),
        (-34, 4, Season.AUTUMN),
        (-34, 7, Season.WINTER),
        (-34, 10, Season.SPRING),
    ],
)
def test_current_season(latitude, month, expected):
    assert current_season(latitude, month) == expected


def test_seattle_estimate_is_rainy():
    weather = estimate_weather("Seattle, WA", month=1)

    assert weather.condition == "Rainy"
    assert weather.season == Season.WINTER
    assert weather.temperature == 14 - 10
    assert weather.humidity == 60

    recommendation = seasonal_recommendation(weather)
    assert recommendation.clothing_weight == ClothingWeight.HEAVY
    assert "water-resistant nylon" in recommendation.fabric_suggestions
    assert "waxed cotton" in recommendation.fabric_suggestions
    assert recommendation.style_notes.endswith(RAIN_NOTE)
    assert recommendation.temperature_range == "1°C to 7°C"


def test_short_keywords_match_whole_words_only():
    # "la" must not fire inside "Atlanta"
    atlanta = estimate_weather("Atlanta", month=1)
    assert atlanta.condition == "Clear"
    assert atlanta.temperature == 20 - 10

    los_angeles = estimate_weather("LA", month=7)
    assert los_angeles.condition == "Sunny"
    assert los_angeles.temperature == 24 + 8


def test_southern_hemisphere_estimate():
    sydney = estimate_weather("Sydney", month=1)
    assert sydney.season == Season.SUMMER
    assert sydney.temperature == 22 + 8


def test_unknown_location_defaults():
    weather = estimate_weather("Somewhere Nice", month=4)
    assert weather.temperature == 20
    assert weather.condition == "Clear"
    assert weather.season == Season.SPRING


@pytest.mark.parametrize(
    "temperature,weight,fabric",
    [
        (31, ClothingWeight.LIGHT, "linen"),
        (28, ClothingWeight.LIGHT, "seersucker"),
        (20, ClothingWeight.LIGHT, "denim"),
        (12, ClothingWeight.LAYERED, "flannel"),
        (5, ClothingWeight.MEDIUM, "tweed"),
        (4, ClothingWeight.HEAVY, "down"),
        (-12, ClothingWeight.HEAVY, "shearling"),
    ],
)
def test_temperature_bands(temperature, weight, fabric):
    weather = WeatherData(
        location="Test",
        temperature=temperature,
        condition="Clear",
        humidity=50,
        season=Season.AUTUMN,
    )
    recommendation = seasonal_recommendation(weather)

    assert recommendation.clothing_weight == weight
    assert fabric in recommendation.fabric_suggestions
    assert "water-resistant nylon" not in recommendation.fabric_suggestions


@pytest.mark.asyncio
async def test_advisor_without_location_returns_nothing(weather_advisor: WeatherAdvisor):
    assert await weather_advisor.get_weather(None) is None
    assert await weather_advisor.get_weather("   ") is None


@pytest.mark.asyncio
async def test_advisor_without_api_key_uses_estimate(weather_advisor: WeatherAdvisor):
    weather = await weather_advisor.get_weather("Seattle")
    recommendation = seasonal_recommendation(weather)

    assert weather.condition == "Rainy"
    assert recommendation.clothing_weight == ClothingWeight.HEAVY


@pytest.mark.asyncio
async def test_advisor_live_lookup():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["appid"] == "test-key"
        if request.url.path == "/geo/1.0/direct":
            return httpx.Response(200, json=[{"lat": 47.6, "lon": -122.3}])
        return httpx.Response(
            200,
            json={"main": {"temp": 7.6, "humidity": 81}, "weather": [{"main": "Rain"}]},
        )

    advisor = WeatherAdvisor(
        Settings(_env_file=None, openweather_api_key="test-key"),
        clock=lambda: WINTER_DAY,
        transport=httpx.MockTransport(handler),
    )
    weather = await advisor.get_weather("Seattle")

    assert weather.temperature == 8
    assert weather.condition == "Rain"
    assert weather.humidity == 81
    assert weather.season == Season.WINTER


@pytest.mark.asyncio
async def test_advisor_falls_back_when_lookup_fails():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "boom"})

    advisor = WeatherAdvisor(
        Settings(_env_file=None, openweather_api_key="test-key"),
        clock=lambda: WINTER_DAY,
        transport=httpx.MockTransport(handler),
    )
    weather = await advisor.get_weather("Seattle")

    assert weather.condition == "Rainy"
    assert weather.temperature == 4
