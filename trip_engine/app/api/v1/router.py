"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter
from trip_engine.app.api.v1.endpoints import trip_checks

router = APIRouter()

router.include_router(trip_checks.router)
