"""Rendering primitives for escape-time frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .coloring import DEFAULT_PCL, RGBA
from .complexmath import Complex
from .engine import IterateFunc, IterateMap, IterationResult, escape_time
from .errors import ConfigError
from .mapping import CHANNELS, Resolution, Viewport, pixel_index_to_plane

ColorFunc = Callable[[IterationResult, Complex], RGBA]


@dataclass(frozen=True)
class FractalConfig:
    """Everything needed to render one frame."""

    viewport: Viewport
    resolution: Resolution
    max_iterations: int
    iterate: IterateFunc = IterateMap.QUADRATIC
    color_of: ColorFunc = DEFAULT_PCL


def new_buffer(resolution: Resolution) -> np.ndarray:
    """Allocate an opaque black RGBA buffer of shape ``(height, width, 4)``."""

    buffer = np.zeros((resolution.height_px, resolution.width_px, CHANNELS), dtype=np.uint8)
    buffer[..., 3] = 255
    return buffer


def check_buffer(buffer: np.ndarray, resolution: Resolution) -> None:
    expected = (resolution.height_px, resolution.width_px, CHANNELS)
    if buffer.shape != expected:
        raise ConfigError(f"buffer shape {buffer.shape} does not match resolution {expected}.")
    if buffer.dtype != np.uint8:
        raise ConfigError(f"buffer dtype must be uint8, got {buffer.dtype}.")
    if not buffer.flags.c_contiguous:
        raise ConfigError("buffer must be C-contiguous.")


def render(config: FractalConfig, buffer: np.ndarray) -> None:
    """Render ``config`` into ``buffer`` in place.

    Each pixel's plane point seeds the escape-time engine; the raw result is
    handed to ``config.color_of`` which decides whether to smooth it.
    """

    check_buffer(buffer, config.resolution)

    viewport = config.viewport
    resolution = config.resolution
    iterate = config.iterate
    max_iterations = config.max_iterations
    color_of = config.color_of

    data = buffer.reshape(-1)
    for index in range(0, data.shape[0], CHANNELS):
        point = pixel_index_to_plane(index, viewport, resolution)
        result = escape_time(point, iterate, max_iterations)
        data[index:index + CHANNELS] = color_of(result, point)


def render_frame(config: FractalConfig) -> np.ndarray:
    """Allocate a buffer for ``config`` and render into it."""

    buffer = new_buffer(config.resolution)
    render(config, buffer)
    return buffer
