"""Draw the campus map, the path, and the start/end markers onto a raster surface."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from src.campus_paths.config import DEFAULT_MAP_CONFIG, MapConfig
from src.campus_paths.directions import round_half_up
from src.campus_paths.models import Coordinate, PathSegment, RenderSnapshot

logger = logging.getLogger(__name__)

# Size of a surface that has never had a background drawn on it
DEFAULT_SURFACE_SIZE = (300, 150)
TRANSPARENT = (0, 0, 0, 0)


class AssetState(Enum):
    """Load lifecycle of an image asset."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
    FAILED = "failed"


class RasterAsset:
    """
    An image file loaded once, on demand.

    Loading is one-shot: a failed load is logged and the asset stays
    unusable for the rest of the session. Nothing may read the pixels or
    size of an asset until it reports is_loaded.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.state = AssetState.UNLOADED
        self._image: Optional[Image.Image] = None

    @classmethod
    def from_image(cls, image: Image.Image, name: str = "<memory>") -> "RasterAsset":
        """Wrap an already decoded image as a loaded asset."""
        asset = cls(name)
        asset._image = image.convert("RGBA")
        asset.state = AssetState.LOADED
        return asset

    @property
    def is_loaded(self) -> bool:
        return self.state is AssetState.LOADED

    @property
    def image(self) -> Image.Image:
        if not self.is_loaded or self._image is None:
            raise RuntimeError(f"Image asset not loaded: {self.path}")
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def load(self) -> bool:
        """
        Decode the image file if that has not been attempted yet.

        Returns:
            True if the asset is loaded
        """
        if self.state is not AssetState.UNLOADED:
            return self.is_loaded

        try:
            with Image.open(self.path) as img:
                self._image = img.convert("RGBA")
        except OSError as e:
            logger.warning(f"Failed to load image {self.path}: {e}")
            self.state = AssetState.FAILED
            return False

        self.state = AssetState.LOADED
        logger.info(f"Loaded image {self.path} ({self._image.width}x{self._image.height})")
        return True


class Surface:
    """
    A raster drawing surface, resized to whatever is drawn as its background.

    Resizing discards the current contents.
    """

    def __init__(self, width: int = DEFAULT_SURFACE_SIZE[0], height: int = DEFAULT_SURFACE_SIZE[1]) -> None:
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def clear(self) -> None:
        self.image = Image.new("RGBA", self.size, TRANSPARENT)

    def resize(self, width: int, height: int) -> None:
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)

    def to_array(self) -> np.ndarray:
        """Pixels as an (height, width, 4) uint8 array."""
        return np.asarray(self.image)

    def save(self, output_path: str) -> None:
        self.image.save(output_path)


@dataclass(frozen=True)
class MarkerBox:
    """Where a marker icon is drawn: top-left corner plus size."""

    left: float
    top: float
    width: float
    height: float


def marker_box(coord: Coordinate, config: MapConfig = DEFAULT_MAP_CONFIG) -> MarkerBox:
    """
    Place a marker so that its tip points at a building coordinate.

    Example:
        >>> marker_box(Coordinate(500, 600))
        MarkerBox(left=425, top=480, width=100, height=136.15)
    """
    return MarkerBox(
        left=coord.x - config.marker_offset_x,
        top=coord.y - config.marker_offset_y,
        width=config.marker_width,
        height=config.marker_height,
    )


class OverlayRenderer:
    """
    Renders a RenderSnapshot over the campus map.

    Every redraw starts from a cleared surface, so drawing the same
    snapshot twice gives identical pixels and a new snapshot never shows
    strokes left over from the previous one.
    """

    def __init__(
        self,
        background: RasterAsset,
        marker: Optional[RasterAsset] = None,
        config: MapConfig = DEFAULT_MAP_CONFIG,
    ) -> None:
        self.background = background
        self.marker = marker
        self.config = config
        self._marker_icon: Optional[Image.Image] = None

    def redraw(self, surface: Surface, snapshot: RenderSnapshot) -> Surface:
        """
        Draw one complete frame.

        Order: clear, background at native size, path strokes in segment
        order, then start and end markers on top. With no loaded
        background the surface is left cleared.

        Returns:
            The same surface, for chaining
        """
        surface.clear()

        if not self.background.is_loaded:
            logger.debug("Background not loaded, skipping draw")
            return surface

        surface.resize(*self.background.size)
        surface.image.paste(self.background.image, (0, 0))

        draw = ImageDraw.Draw(surface.image)
        for segment in snapshot.path:
            self._draw_segment(draw, segment)

        self._draw_markers(surface, snapshot)

        logger.debug(f"Redrew frame with {len(snapshot.path)} segments")
        return surface

    def _draw_segment(self, draw: ImageDraw.ImageDraw, segment: PathSegment) -> None:
        """Stroke one segment with round caps."""
        start = (segment.start.x, segment.start.y)
        end = (segment.end.x, segment.end.y)
        color = self.config.stroke_color
        radius = self.config.stroke_width / 2

        draw.line([start, end], fill=color, width=self.config.stroke_width)
        for x, y in (start, end):
            draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=color)

    def _draw_markers(self, surface: Surface, snapshot: RenderSnapshot) -> None:
        if self.marker is None or not self.marker.is_loaded:
            return

        icon = self._get_marker_icon()
        for coord in (snapshot.start_coord, snapshot.end_coord):
            if coord is None:
                continue
            box = marker_box(coord, self.config)
            # paste() clips icons that hang off the map edge
            surface.image.paste(icon, (round_half_up(box.left), round_half_up(box.top)), icon)

    def _get_marker_icon(self) -> Image.Image:
        """Marker icon scaled to the configured marker size (cached)."""
        if self._marker_icon is None:
            size = (round_half_up(self.config.marker_width), round_half_up(self.config.marker_height))
            self._marker_icon = self.marker.image.resize(size)
        return self._marker_icon
