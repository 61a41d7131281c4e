"""
Centralized Test Configuration.
"""

import pytest
from datetime import datetime
from httpx import AsyncClient, ASGITransport

from trip_engine.app.main import app
from trip_engine.app.schemas.geo import Coordinate, GeoPoint
from trip_engine.app.schemas.trip import Trip, TripLeg


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def now():
    return datetime(2025, 3, 10, 12, 0)


@pytest.fixture
def depot():
    """Mumbai depot."""
    return Coordinate(longitude=72.8777, latitude=19.0760)


@pytest.fixture
def trip(now):
    """Scheduled trip Mumbai -> Pune with one stop."""
    return Trip(
        id="trip-1",
        trip_type="commercial",
        start_leg=TripLeg(point=GeoPoint(name="Mumbai", coordinate=Coordinate(longitude=72.8777, latitude=19.0760))),
        stops=[
            TripLeg(
                point=GeoPoint(name="Lonavala", coordinate=Coordinate(longitude=73.4062, latitude=18.7546)),
                arrival_time=datetime(2025, 3, 10, 14, 0)
            )
        ],
        end_leg=TripLeg(point=GeoPoint(name="Pune", coordinate=Coordinate(longitude=73.8567, latitude=18.5204))),
        scheduled_start=now,
        scheduled_end=datetime(2025, 3, 10, 16, 0),
        distance_km=150,
        duration_min=180,
        amount_per_km=10,
        vehicle_rent=500
    )
