"""
Analysis agents for Drip Agent.

Pipeline:
1. Vibe Aggregator - Personality + Demographics inference, weather and color season
2. Style Resolver - Archetypes, palette and styling guidance
3. Product Matcher - Candidate scoring, ranking and outfits
Driven end to end by the Job Orchestrator.
"""

from drip_agent.agents.demographics import DemographicsAgent
from drip_agent.agents.orchestrator import JobOrchestrator, build_orchestrator
from drip_agent.agents.personality import PersonalityAgent
from drip_agent.agents.shopping import ProductMatcher
from drip_agent.agents.style import StyleResolver
from drip_agent.agents.vibe import VibeAggregator

__all__ = [
    "DemographicsAgent",
    "JobOrchestrator",
    "build_orchestrator",
    "PersonalityAgent",
    "ProductMatcher",
    "StyleResolver",
    "VibeAggregator",
]
