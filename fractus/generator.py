"""Viewport transitions and the interactive exploration session."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from .complexmath import Complex
from .config import DEFAULT_MAX_ITERATIONS, DEFAULT_VIEWPORT, validate_config
from .mapping import Viewport, pixel_to_plane
from .renderer import FractalConfig, new_buffer, render

ZOOM_FACTOR = 0.5


def recenter(viewport: Viewport, point: Complex) -> Viewport:
    """Move ``viewport`` so that ``point`` becomes its center."""

    origin = Complex(point.re - 0.5 * viewport.width, point.im - 0.5 * viewport.height)
    return replace(viewport, origin=origin)


def apply_zoom(viewport: Viewport, zoom_factor: float) -> Viewport:
    """Scale the viewport dimensions, keeping its origin."""

    return replace(
        viewport,
        width=viewport.width * zoom_factor,
        height=viewport.height * zoom_factor,
    )


def zoom_to_point(viewport: Viewport, point: Complex, zoom_factor: float = ZOOM_FACTOR) -> Viewport:
    return recenter(apply_zoom(viewport, zoom_factor), point)


def reset_config(config: FractalConfig) -> FractalConfig:
    """Restore the default viewport and iteration budget."""

    return replace(config, viewport=DEFAULT_VIEWPORT, max_iterations=DEFAULT_MAX_ITERATIONS)


@dataclass
class Explorer:
    """Own the live configuration and buffer for a pointer-driven session.

    Transitions replace ``config`` wholesale and re-render. A render requested
    while another pass is running is ignored.
    """

    config: FractalConfig
    zoom_factor: float = ZOOM_FACTOR

    def __post_init__(self) -> None:
        validate_config(self.config)
        self.buffer = new_buffer(self.config.resolution)
        self.frames_rendered = 0
        self._lock = threading.Lock()

    @property
    def rendering(self) -> bool:
        return self._lock.locked()

    def render(self) -> bool:
        if not self._lock.acquire(blocking=False):
            return False
        try:
            snapshot = self.config
            render(snapshot, self.buffer)
            self.frames_rendered += 1
        finally:
            self._lock.release()
        return True

    def click(self, pixel: tuple[float, float]) -> Complex:
        """Zoom into the plane point under ``pixel`` and re-render.

        Returns the plane point that became the new viewport center.
        """

        point = pixel_to_plane(pixel, self.config.viewport, self.config.resolution)
        self.config = replace(self.config, viewport=zoom_to_point(self.config.viewport, point, self.zoom_factor))
        self.render()
        return point

    def reset(self) -> None:
        self.config = reset_config(self.config)
        self.render()

    def snapshot(self) -> Optional[np.ndarray]:
        """Copy of the last completed frame, or ``None`` if nothing was rendered."""

        if self.frames_rendered == 0:
            return None
        return self.buffer.copy()
