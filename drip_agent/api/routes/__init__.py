"""API Route modules"""

from drip_agent.api.routes.analysis import router as analysis_router

__all__ = ["analysis_router"]
