"""Fetch buildings and shortest paths from the campus routing service."""

import logging
import math
from typing import Any, Optional

import httpx

from src.campus_paths.compass import CompassCode
from src.campus_paths.config import DEFAULT_SERVER_URL, DEFAULT_TIMEOUT_SECONDS
from src.campus_paths.errors import UnknownDirectionError, UpstreamUnavailableError
from src.campus_paths.models import BuildingRecord, Coordinate, Path, PathSegment

logger = logging.getLogger(__name__)

BUILDINGS_ROUTE = "/campus-map-buildings"
COORDINATES_ROUTE = "/building-coord"
SHORTEST_PATH_ROUTE = "/campus-map"


def parse_coordinate(raw: Any) -> Coordinate:
    """Convert a {"x": ..., "y": ...} object into a Coordinate."""
    try:
        x, y = float(raw["x"]), float(raw["y"])
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamUnavailableError(f"Malformed coordinate: {raw!r}") from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise UpstreamUnavailableError(f"Non-finite coordinate: {raw!r}")
    return Coordinate(x=x, y=y)


def parse_buildings(names: Any, coordinates: Any) -> list[BuildingRecord]:
    """
    Pair the name directory with the coordinate directory.

    Args:
        names: Mapping of short name -> long name
        coordinates: Mapping of short name -> {x, y}

    Returns:
        BuildingRecords sorted by short name

    Raises:
        UpstreamUnavailableError: If either mapping is malformed or a
            building has no coordinate
    """
    if not isinstance(names, dict) or not isinstance(coordinates, dict):
        raise UpstreamUnavailableError("Building directory must be a JSON object")

    buildings: list[BuildingRecord] = []
    for short_name in sorted(names):
        if short_name not in coordinates:
            raise UpstreamUnavailableError(f"No coordinate for building {short_name}")
        buildings.append(
            BuildingRecord(
                short_name=short_name,
                long_name=str(names[short_name]),
                coordinate=parse_coordinate(coordinates[short_name]),
            )
        )
    return buildings


def parse_path(raw: Any) -> Path:
    """
    Reshape the shortest-path response into path segments.

    The service sends a list of {key: {start, end, cost}, value: code}
    entries in travel order. A single bad entry rejects the whole path.

    Raises:
        UpstreamUnavailableError: If the payload is malformed or carries an
            unknown compass code
    """
    if not isinstance(raw, list):
        raise UpstreamUnavailableError("Shortest path must be a JSON list")

    segments: list[PathSegment] = []
    for index, entry in enumerate(raw):
        try:
            key = entry["key"]
            cost = float(key["cost"])
            direction = CompassCode.parse(entry["value"])
        except UnknownDirectionError as e:
            raise UpstreamUnavailableError(f"Segment {index}: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamUnavailableError(f"Malformed path segment {index}: {entry!r}") from e

        if not math.isfinite(cost):
            raise UpstreamUnavailableError(f"Segment {index} has non-finite cost {cost}")
        if cost < 0:
            raise UpstreamUnavailableError(f"Segment {index} has negative cost {cost}")

        segments.append(
            PathSegment(
                start=parse_coordinate(key.get("start")),
                end=parse_coordinate(key.get("end")),
                cost=cost,
                direction=direction,
            )
        )
    return tuple(segments)


class CampusPathsClient:
    """Async client for the routing/directory service."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            base_url: Service root (e.g. "http://localhost:4567")
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport, used by tests to fake the
                service
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "CampusPathsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_buildings(self) -> list[BuildingRecord]:
        """Fetch every building with its long name and coordinate."""
        names = await self._get_json(BUILDINGS_ROUTE)
        coordinates = await self._get_json(COORDINATES_ROUTE)
        buildings = parse_buildings(names, coordinates)
        logger.info(f"Fetched {len(buildings)} buildings")
        return buildings

    async def fetch_path(self, start: str, end: str) -> Path:
        """Fetch the shortest path between two buildings by short name."""
        raw = await self._get_json(SHORTEST_PATH_ROUTE, params={"start": start, "end": end})
        path = parse_path(raw)
        logger.info(f"Fetched path {start} -> {end}: {len(path)} segments")
        return path

    async def _get_json(self, route: str, params: Optional[dict] = None) -> Any:
        try:
            response = await self._client.get(route, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Request to {route} failed: {e}")
            raise UpstreamUnavailableError(f"Error contacting the server: {e}") from e

        if not response.is_success:
            logger.warning(f"GET {route} returned {response.status_code}")
            raise UpstreamUnavailableError(
                f"GET {route} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(f"Invalid JSON from {route}") from e
