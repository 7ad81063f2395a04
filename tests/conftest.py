"""
Shared pytest fixtures for campus paths tests.

This module provides reusable fixtures that are automatically discovered
by pytest. Fixtures here are available to all test files.

Educational notes for new developers:
- Fixtures are functions that provide test data or set up test state
- Fixtures can depend on other fixtures (dependency injection)
- Images are built in memory with Pillow so no asset files are needed
- The routing service is faked with httpx.MockTransport, so no network
"""

import json

import httpx
import pytest
from unittest.mock import AsyncMock
from PIL import Image

from src.campus_paths.compass import CompassCode
from src.campus_paths.models import BuildingRecord, Coordinate, PathSegment, RenderSnapshot
from src.campus_paths.renderer import OverlayRenderer, RasterAsset

MAP_SIZE = (400, 300)
MAP_COLOR = (255, 255, 255, 255)
MARKER_COLOR = (200, 0, 0, 255)


@pytest.fixture
def mock_notify() -> AsyncMock:
    """
    Create a mock async callback for user notices.

    Example:
        async def test_failure(mock_notify):
            await app.load_buildings(mock_notify)
            mock_notify.assert_awaited_once()
    """
    return AsyncMock()


@pytest.fixture
def sample_buildings() -> list[BuildingRecord]:
    """Three buildings, sorted by short name, all well inside the test map."""
    return [
        BuildingRecord("CSE", "Paul G. Allen Center for Computer Science & Engineering", Coordinate(200, 180)),
        BuildingRecord("MGH", "Mary Gates Hall (North Entrance)", Coordinate(300, 200)),
        BuildingRecord("SUZ", "Suzzallo Library", Coordinate(150, 250)),
    ]


@pytest.fixture
def sample_path() -> tuple[PathSegment, ...]:
    """Two segments totalling 150.4 feet: 100 north then 50.4 east."""
    return (
        PathSegment(Coordinate(200, 180), Coordinate(200, 80), 100.0, CompassCode.N),
        PathSegment(Coordinate(200, 80), Coordinate(250, 80), 50.4, CompassCode.E),
    )


@pytest.fixture
def sample_snapshot(sample_buildings, sample_path) -> RenderSnapshot:
    """Snapshot from CSE to MGH along sample_path."""
    return RenderSnapshot.between(sample_buildings[0], sample_buildings[1], sample_path)


@pytest.fixture
def background_asset() -> RasterAsset:
    """A plain white 400x300 map, already loaded."""
    return RasterAsset.from_image(Image.new("RGBA", MAP_SIZE, MAP_COLOR), "test_map")


@pytest.fixture
def marker_asset() -> RasterAsset:
    """A solid red marker icon, already loaded."""
    return RasterAsset.from_image(Image.new("RGBA", (20, 28), MARKER_COLOR), "test_pin")


@pytest.fixture
def renderer(background_asset, marker_asset) -> OverlayRenderer:
    return OverlayRenderer(background_asset, marker_asset)


@pytest.fixture
def service_payloads() -> dict:
    """
    JSON bodies served by the fake routing service, keyed by route.

    Tests may edit this dict before building the transport.
    """
    return {
        "/campus-map-buildings": {
            "MGH": "Mary Gates Hall (North Entrance)",
            "CSE": "Paul G. Allen Center for Computer Science & Engineering",
        },
        "/building-coord": {
            "CSE": {"x": 200.0, "y": 180.0},
            "MGH": {"x": 300.0, "y": 200.0},
        },
        "/campus-map": [
            {"key": {"start": {"x": 200, "y": 180}, "end": {"x": 200, "y": 80}, "cost": 100.0}, "value": "N"},
            {"key": {"start": {"x": 200, "y": 80}, "end": {"x": 250, "y": 80}, "cost": 50.4}, "value": "E"},
        ],
    }


@pytest.fixture
def service_transport(service_payloads) -> httpx.MockTransport:
    """
    Fake routing service answering from service_payloads.

    Unknown routes return 404. Every request is recorded in
    transport.requests for assertions.
    """
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        payload = service_payloads.get(request.url.path)
        if payload is None:
            return httpx.Response(404, text="Not found")
        return httpx.Response(200, content=json.dumps(payload), headers={"Content-Type": "application/json"})

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport
