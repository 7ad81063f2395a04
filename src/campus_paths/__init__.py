"""Campus Paths - shortest walking routes drawn on the campus map."""

from src.campus_paths.app import CampusPathsApp, RenderResult
from src.campus_paths.client import CampusPathsClient
from src.campus_paths.compass import CompassCode, word_for
from src.campus_paths.config import MapConfig, Settings, load_settings
from src.campus_paths.directions import DirectionsText, format_directions, render_printable
from src.campus_paths.errors import (
    CampusPathsError,
    UnknownBuildingError,
    UnknownDirectionError,
    UpstreamUnavailableError,
)
from src.campus_paths.models import BuildingRecord, Coordinate, PathSegment, RenderSnapshot
from src.campus_paths.renderer import OverlayRenderer, RasterAsset, Surface, marker_box
from src.campus_paths.transform import ViewTransform
from src.campus_paths.viewer import create_figure

__all__ = [
    "CampusPathsApp",
    "RenderResult",
    "CampusPathsClient",
    "CompassCode",
    "word_for",
    "MapConfig",
    "Settings",
    "load_settings",
    "DirectionsText",
    "format_directions",
    "render_printable",
    "CampusPathsError",
    "UnknownBuildingError",
    "UnknownDirectionError",
    "UpstreamUnavailableError",
    "BuildingRecord",
    "Coordinate",
    "PathSegment",
    "RenderSnapshot",
    "OverlayRenderer",
    "RasterAsset",
    "Surface",
    "marker_box",
    "ViewTransform",
    "create_figure",
]
