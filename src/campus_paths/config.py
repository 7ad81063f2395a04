"""
Tunable constants and environment settings for the campus paths client.

The map constants are tied to one specific campus map image: the marker
offsets were measured against that asset. Use a different MapConfig when
rendering another map instead of editing the drawing code.

Environment variables (a .env file in the working directory is honoured):
    CAMPUS_PATHS_SERVER_URL    Base URL of the routing service
    CAMPUS_PATHS_MAP_IMAGE     Path to the background map image
    CAMPUS_PATHS_MARKER_IMAGE  Path to the start/end marker icon
    CAMPUS_PATHS_TIMEOUT       Request timeout in seconds
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Average walking speed (feet per minute)
WALKING_SPEED_FT_PER_MIN = 272.8

# Marker icon anchoring: building coordinates mark the pin's tip, not its corner
MARKER_OFFSET_X = 75
MARKER_OFFSET_Y = 120
MARKER_WIDTH = 100
MARKER_HEIGHT = 136.15

# Path strokes
STROKE_COLOR = "#663399"  # rebeccapurple
STROKE_WIDTH = 15

# Viewport zoom limits
ZOOM_STEP = 0.5
MIN_SCALE = 1.0
MAX_SCALE = 8.0

# Routing service defaults
DEFAULT_SERVER_URL = "http://localhost:4567"
DEFAULT_MAP_IMAGE = "campus_map.jpg"
DEFAULT_MARKER_IMAGE = "pin.png"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class MapConfig:
    """Drawing and formatting constants for one map asset."""

    walking_speed: float = WALKING_SPEED_FT_PER_MIN
    marker_offset_x: float = MARKER_OFFSET_X
    marker_offset_y: float = MARKER_OFFSET_Y
    marker_width: float = MARKER_WIDTH
    marker_height: float = MARKER_HEIGHT
    stroke_color: str = STROKE_COLOR
    stroke_width: int = STROKE_WIDTH
    zoom_step: float = ZOOM_STEP
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE


DEFAULT_MAP_CONFIG = MapConfig()


@dataclass(frozen=True)
class Settings:
    """Runtime settings for talking to the routing service and finding assets."""

    server_url: str = DEFAULT_SERVER_URL
    map_image: str = DEFAULT_MAP_IMAGE
    marker_image: str = DEFAULT_MARKER_IMAGE
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def load_settings() -> Settings:
    """
    Read settings from the environment, loading a .env file first if present.

    Returns:
        Settings with defaults for anything not set

    Raises:
        ValueError: If CAMPUS_PATHS_TIMEOUT is not a number
    """
    load_dotenv()

    timeout_raw = os.getenv("CAMPUS_PATHS_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
    except ValueError as e:
        raise ValueError(f"CAMPUS_PATHS_TIMEOUT must be a number, got {timeout_raw!r}") from e

    settings = Settings(
        server_url=os.getenv("CAMPUS_PATHS_SERVER_URL", DEFAULT_SERVER_URL).rstrip("/"),
        map_image=os.getenv("CAMPUS_PATHS_MAP_IMAGE", DEFAULT_MAP_IMAGE),
        marker_image=os.getenv("CAMPUS_PATHS_MARKER_IMAGE", DEFAULT_MARKER_IMAGE),
        timeout=timeout,
    )
    logger.debug(f"Loaded settings: {settings}")
    return settings
