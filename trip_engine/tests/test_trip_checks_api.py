"""
Integration tests for the trip check endpoints.
"""

import logging
import pytest

from trip_engine.app.core.observability import check_name


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_correlation_id_echoed(client):
    """Observability middleware returns the caller's correlation id."""
    response = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert "X-Process-Time" in response.headers


@pytest.mark.asyncio
async def test_distance(client):
    response = await client.post("/v1/trip-checks/distance", json={
        "a": {"longitude": 72.8777, "latitude": 19.0760},
        "b": {"longitude": 72.8777, "latitude": 19.0760}
    })
    assert response.status_code == 200
    assert response.json()["distance_km"] == 0


@pytest.mark.asyncio
async def test_start_blocked(client):
    """A start 200 minutes early is refused, still with a 200 response."""
    response = await client.post("/v1/trip-checks/start", json={
        "scheduled_start": "2025-03-10T15:20:00",
        "now": "2025-03-10T12:00:00"
    })
    assert response.status_code == 200
    
    data = response.json()
    assert data["kind"] == "hard"
    assert data["can_proceed"] is False
    assert "3h 20m" in data["message"]


@pytest.mark.asyncio
async def test_start_on_time(client):
    response = await client.post("/v1/trip-checks/start", json={
        "scheduled_start": "2025-03-10T12:10:00",
        "now": "2025-03-10T12:00:00"
    })
    data = response.json()
    assert data["kind"] == "ontime"
    assert data["message"] is None
    assert data["requires_confirmation"] is False


@pytest.mark.asyncio
async def test_arrival_without_device_location(client):
    """No observed coordinate: only the time check runs."""
    response = await client.post("/v1/trip-checks/arrival", json={
        "expected": {
            "coordinate": {"longitude": 73.8567, "latitude": 18.5204},
            "arrival_time": "2025-03-10T16:00:00"
        },
        "observed": {"time": "2025-03-10T15:00:00"},
        "target": "destination"
    })
    assert response.status_code == 200
    
    data = response.json()
    assert data["requires_confirmation"] is True
    assert data["mismatches"] == ["Time mismatch: Trip is scheduled to end at 16:00, but you're ending early."]


@pytest.mark.asyncio
async def test_schedule_window(client):
    response = await client.post("/v1/trip-checks/schedule-window", json={
        "route_duration_min": 120,
        "stop_count": 2,
        "scheduled_start": "2025-03-10T12:00:00",
        "scheduled_end": "2025-03-10T14:30:00"
    })
    data = response.json()
    assert data["required_min"] == 180
    assert data["required_display"] == "3 hrs"
    assert data["ok"] is False
    assert data["shortfall_min"] == 30


@pytest.mark.asyncio
async def test_pricing(client):
    response = await client.post("/v1/trip-checks/pricing", json={
        "distance_km": 100,
        "amount_per_km": 10,
        "vehicle_rent": 500,
        "is_two_way": True
    })
    assert response.status_code == 200
    assert response.json()["total"] == 2500


@pytest.mark.asyncio
async def test_pricing_rejects_negative_rate(client):
    response = await client.post("/v1/trip-checks/pricing", json={
        "distance_km": 100,
        "amount_per_km": -10
    })
    assert response.status_code == 422
    assert response.json()["error_code"] == "ERR_VALIDATION"


@pytest.mark.asyncio
async def test_availability(client):
    response = await client.post("/v1/trip-checks/availability", json={
        "candidate": {"start": "2025-01-05T00:00:00", "end": "2025-01-10T00:00:00"},
        "busy": [
            {
                "resource_type": "vehicle",
                "resource_id": "MH12AB1234",
                "start": "2025-01-08T00:00:00",
                "end": "2025-01-12T00:00:00"
            },
            {
                "resource_type": "driver",
                "resource_id": "driver-3",
                "start": "2025-02-01T00:00:00",
                "end": "2025-02-02T00:00:00"
            }
        ]
    })
    data = response.json()
    assert data["conflict"] is True
    assert data["vehicle_conflict"] is True
    assert data["driver_conflict"] is False
    assert len(data["matches"]) == 1


@pytest.mark.asyncio
async def test_invalid_candidate_range(client):
    """A range that ends before it starts is a validation error."""
    response = await client.post("/v1/trip-checks/availability", json={
        "candidate": {"start": "2025-01-10T00:00:00", "end": "2025-01-05T00:00:00"}
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_illegal_transition(client):
    response = await client.post("/v1/trip-checks/transition", json={
        "current": "completed",
        "target": "in-progress"
    })
    assert response.status_code == 409
    assert response.json()["error_code"] == "ERR_TRIP_001"


@pytest.mark.asyncio
async def test_schedule(client):
    response = await client.post("/v1/trip-checks/schedule", json={
        "start": "2025-03-11T09:00:00",
        "end": "2025-03-11T08:00:00",
        "now": "2025-03-10T12:00:00"
    })
    data = response.json()
    assert data["valid"] is False
    assert data["errors"] == {"end_date_time": "End date must be after start date"}


@pytest.mark.asyncio
async def test_trip_check_header_and_log(client, caplog):
    """Each served check is named in the response and the request log."""
    caplog.set_level(logging.INFO, logger="trip_engine.http")
    response = await client.post("/v1/trip-checks/distance", json={
        "a": {"longitude": 0, "latitude": 0},
        "b": {"longitude": 0, "latitude": 1}
    })
    
    assert response.headers["X-Trip-Check"] == "distance"
    assert any(getattr(record, "check", None) == "distance" for record in caplog.records)


def test_check_name():
    assert check_name("/v1/trip-checks/start") == "start"
    assert check_name("/v1/trip-checks/") is None
    assert check_name("/health") is None


@pytest.mark.asyncio
async def test_start_rejects_mixed_timezones(client):
    """An offset on one timestamp but not the other is a 422, not a crash."""
    response = await client.post("/v1/trip-checks/start", json={
        "scheduled_start": "2025-03-10T15:20:00+05:30",
        "now": "2025-03-10T12:00:00"
    })
    assert response.status_code == 422
    assert response.json()["error_code"] == "ERR_VALIDATION"


@pytest.mark.asyncio
async def test_start_accepts_consistent_offsets(client):
    """Different offsets are fine as long as every value has one."""
    response = await client.post("/v1/trip-checks/start", json={
        "scheduled_start": "2025-03-10T17:40:00+05:30",
        "now": "2025-03-10T12:00:00Z"
    })
    assert response.status_code == 200
    assert response.json()["kind"] == "ontime"


@pytest.mark.asyncio
async def test_availability_rejects_mixed_timezones(client):
    response = await client.post("/v1/trip-checks/availability", json={
        "candidate": {"start": "2025-01-05T00:00:00Z", "end": "2025-01-10T00:00:00Z"},
        "busy": [
            {
                "resource_type": "vehicle",
                "resource_id": "MH12AB1234",
                "start": "2025-01-08T00:00:00",
                "end": "2025-01-12T00:00:00"
            }
        ]
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_date_range_rejects_mixed_timezones(client):
    response = await client.post("/v1/trip-checks/availability", json={
        "candidate": {"start": "2025-01-05T00:00:00Z", "end": "2025-01-10T00:00:00"}
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_schedule_rejects_mixed_timezones(client):
    response = await client.post("/v1/trip-checks/schedule", json={
        "start": "2025-03-11T09:00:00+05:30",
        "end": "2025-03-11T18:00:00+05:30",
        "now": "2025-03-10T12:00:00"
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_schedule_window_rejects_mixed_timezones(client):
    response = await client.post("/v1/trip-checks/schedule-window", json={
        "route_duration_min": 120,
        "scheduled_start": "2025-03-10T12:00:00Z",
        "scheduled_end": "2025-03-10T14:30:00"
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_arrival_rejects_mixed_timezones(client):
    response = await client.post("/v1/trip-checks/arrival", json={
        "expected": {"arrival_time": "2025-03-10T14:00:00+05:30"},
        "observed": {"time": "2025-03-10T14:45:00"}
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_arrival_times_share_expected_offset(client):
    """A UTC observation is reported on the stop's clock."""
    response = await client.post("/v1/trip-checks/arrival", json={
        "expected": {"arrival_time": "2025-03-10T14:00:00+05:30"},
        "observed": {"time": "2025-03-10T09:15:00Z"}
    })
    assert response.status_code == 200
    assert response.json()["mismatches"] == ["Time mismatch: Expected arrival at 14:00, current time is 14:45."]
