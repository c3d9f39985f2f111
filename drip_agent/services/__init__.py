"""
Services layer for the analysis pipeline.
Deterministic leaf collaborators: color season, weather, profile source.
"""

from drip_agent.services.color_analysis import analyze_color_season, color_name_to_hex, outfit_color_suggestions
from drip_agent.services.profile_source import ProfileSource, demo_profile, parse_local_input
from drip_agent.services.weather import WeatherAdvisor, seasonal_recommendation

__all__ = [
    "analyze_color_season",
    "color_name_to_hex",
    "outfit_color_suggestions",
    "ProfileSource",
    "demo_profile",
    "parse_local_input",
    "WeatherAdvisor",
    "seasonal_recommendation",
]
