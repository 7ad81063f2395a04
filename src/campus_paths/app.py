"""Session controller tying building selection, path requests, and rendering together."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from src.campus_paths.client import CampusPathsClient
from src.campus_paths.config import DEFAULT_MAP_CONFIG, MapConfig
from src.campus_paths.directions import DirectionsText, format_directions
from src.campus_paths.errors import UnknownBuildingError, UpstreamUnavailableError
from src.campus_paths.models import EMPTY_SNAPSHOT, BuildingRecord, RenderSnapshot
from src.campus_paths.renderer import OverlayRenderer, Surface
from src.campus_paths.transform import ViewTransform

logger = logging.getLogger(__name__)

Notify = Callable[[str], Awaitable[None]]

# User-facing notices
SERVER_ERROR_NOTICE = "There was an error contacting the server."
PATH_NOT_FOUND_NOTICE = "The start and destination must exist."


def status_notice(status_code: int) -> str:
    return f"Something went wrong. STATUS CODE: {status_code}"


@dataclass(frozen=True)
class RenderResult:
    """Both artifacts of one render cycle, built from the same snapshot."""

    snapshot: RenderSnapshot
    directions: DirectionsText
    frame: Surface


class CampusPathsApp:
    """
    Holds one user's session: the building directory, the two selected
    buildings, and the current snapshot.

    Network failures are caught here and reported through the notify
    callback; the directory and snapshot are only replaced after a fully
    successful request.
    """

    def __init__(
        self,
        client: CampusPathsClient,
        renderer: OverlayRenderer,
        config: MapConfig = DEFAULT_MAP_CONFIG,
    ) -> None:
        """
        Args:
            client: Routing service client
            renderer: Overlay renderer with its map and marker assets

        Attributes:
            buildings: Directory keyed by short name, sorted by short name
            start: Selected start building (None until selected)
            end: Selected destination building (None until selected)
            snapshot: Input for the next render
            transform: Viewport over the rendered frame
        """
        self.client = client
        self.renderer = renderer
        self.config = config

        self.buildings: dict[str, BuildingRecord] = {}
        self.start: Optional[BuildingRecord] = None
        self.end: Optional[BuildingRecord] = None
        self.snapshot: RenderSnapshot = EMPTY_SNAPSHOT
        self.transform = ViewTransform(config)

    def building_options(self) -> list[tuple[str, str]]:
        """(long name, short name) pairs for a building selector."""
        return [(b.long_name, b.short_name) for b in self.buildings.values()]

    async def load_buildings(self, notify: Notify) -> bool:
        """
        Fetch the building directory, replacing the current one on success.

        Returns:
            True if the directory was loaded
        """
        try:
            buildings = await self.client.fetch_buildings()
        except UpstreamUnavailableError as e:
            await notify(self._notice_for(e))
            return False

        self.buildings = {b.short_name: b for b in buildings}
        return True

    def select_start(self, short_name: str) -> BuildingRecord:
        """
        Choose the start building. Any path already shown is discarded.

        Raises:
            UnknownBuildingError: If short_name is not in the directory
        """
        self.start = self._lookup(short_name)
        self._discard_path()
        return self.start

    def select_end(self, short_name: str) -> BuildingRecord:
        """
        Choose the destination building. Any path already shown is discarded.

        Raises:
            UnknownBuildingError: If short_name is not in the directory
        """
        self.end = self._lookup(short_name)
        self._discard_path()
        return self.end

    async def request_path(self, notify: Notify) -> bool:
        """
        Fetch the shortest path between the selected buildings.

        Does nothing until both buildings are selected. On failure the
        current snapshot is kept and the user is notified.

        Returns:
            True if a new snapshot was installed
        """
        if self.start is None or self.end is None:
            logger.debug("Path requested before both buildings were selected")
            return False

        start, end = self.start, self.end
        try:
            path = await self.client.fetch_path(start.short_name, end.short_name)
        except UpstreamUnavailableError as e:
            if e.status_code is not None:
                await notify(PATH_NOT_FOUND_NOTICE)
            else:
                await notify(SERVER_ERROR_NOTICE)
            return False

        # The selection may have changed while the request was in flight
        if self.start is not start or self.end is not end:
            logger.debug(f"Discarding path {start.short_name} -> {end.short_name}: selection changed")
            return False

        self.snapshot = RenderSnapshot.between(start, end, path)
        logger.info(
            f"Path {start.short_name} -> {end.short_name}: "
            f"{len(path)} segments, {self.snapshot.total_distance:.1f} feet"
        )
        return True

    def clear(self) -> None:
        """Forget both selected buildings and the path."""
        self.start = None
        self.end = None
        self.snapshot = EMPTY_SNAPSHOT

    def reset_application(self) -> ViewTransform:
        """
        Start the session over, including the viewport.

        The directory is kept. Hosts must display through the returned
        transform; the old one is abandoned along with its subscribers.
        """
        self.clear()
        self.transform = ViewTransform(self.config)
        logger.info("Application reset")
        return self.transform

    def render(self) -> RenderResult:
        """Format the directions and draw the frame for the current snapshot."""
        snapshot = self.snapshot
        directions = format_directions(snapshot, self.config)
        frame = self.renderer.redraw(Surface(), snapshot)
        return RenderResult(snapshot=snapshot, directions=directions, frame=frame)

    def _lookup(self, short_name: str) -> BuildingRecord:
        try:
            return self.buildings[short_name]
        except KeyError:
            raise UnknownBuildingError(short_name) from None

    def _discard_path(self) -> None:
        self.snapshot = RenderSnapshot.between(self.start, self.end)

    @staticmethod
    def _notice_for(error: UpstreamUnavailableError) -> str:
        if error.status_code is not None:
            return status_notice(error.status_code)
        return SERVER_ERROR_NOTICE
