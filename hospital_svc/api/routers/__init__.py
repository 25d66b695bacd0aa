"""
API routers module.

This module contains all API route definitions organized by domain.
"""
from api.routers.health import router as health_router
from api.routers.entities import router as entities_router
from api.routers.reports import router as reports_router

__all__ = ["health_router", "entities_router", "reports_router"]
