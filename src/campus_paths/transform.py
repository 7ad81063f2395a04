"""Zoom and pan state for displaying a rendered frame."""

import logging
from dataclasses import dataclass
from typing import Callable

from src.campus_paths.config import DEFAULT_MAP_CONFIG, MapConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibleWindow:
    """Region of the frame shown in the viewport, in frame pixel coordinates."""

    x0: float
    x1: float
    y0: float
    y1: float


class ViewTransform:
    """
    Viewport over a rendered frame: a scale plus a pan offset.

    The transform is applied when the frame is displayed. Changing it never
    redraws the frame or touches the snapshot it was drawn from; it only
    notifies subscribers so the display can be refreshed.

    Pan is measured in screen pixels, the same way the frame is dragged:
    a pan of (dx, dy) moves the frame right/down by that many pixels.
    """

    def __init__(self, config: MapConfig = DEFAULT_MAP_CONFIG) -> None:
        self.config = config
        self.scale = 1.0
        self.pan_x = 0.0
        self.pan_y = 0.0
        self._listeners: list[Callable[["ViewTransform"], None]] = []

    def subscribe(self, listener: Callable[["ViewTransform"], None]) -> None:
        """Call listener(transform) after every change."""
        self._listeners.append(listener)

    def zoom_in(self) -> None:
        self._set_scale(self.scale + self.config.zoom_step)

    def zoom_out(self) -> None:
        self._set_scale(self.scale - self.config.zoom_step)

    def pan(self, dx: float, dy: float) -> None:
        self.pan_x += dx
        self.pan_y += dy
        self._notify()

    def reset_transform(self) -> None:
        """Return to scale 1 with no pan."""
        self.scale = 1.0
        self.pan_x = 0.0
        self.pan_y = 0.0
        self._notify()

    def visible_window(self, width: float, height: float) -> VisibleWindow:
        """
        Compute which part of a width x height frame is in view.

        Zoom is about the top-left corner, as with a CSS scale transform
        whose origin is the corner; panning then shifts the view.
        """
        x0 = -self.pan_x / self.scale
        y0 = -self.pan_y / self.scale
        return VisibleWindow(
            x0=x0,
            x1=x0 + width / self.scale,
            y0=y0,
            y1=y0 + height / self.scale,
        )

    def _set_scale(self, scale: float) -> None:
        clamped = min(max(scale, self.config.min_scale), self.config.max_scale)
        if clamped != scale:
            logger.debug(f"Zoom {scale} clamped to {clamped}")
        self.scale = clamped
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
