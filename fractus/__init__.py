"""Public API for escape-time fractal rendering."""

from .coloring import DEFAULT_PCL, FLAT_ESCAPE, ChannelParams, ColormapLoop, FlatEscape, PhasedColorLoop
from .complexmath import Complex
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RESOLUTION,
    DEFAULT_VIEWPORT,
    ConfigError,
    color_strategy,
    iterate_map,
    validate_config,
)
from .engine import CAPTURED, Captured, Escaped, IterateMap, escape_time, smooth_index
from .generator import Explorer, apply_zoom, recenter, reset_config, zoom_to_point
from .mapping import Resolution, Viewport, pixel_index_to_plane, pixel_to_plane, plane_to_pixel
from .renderer import FractalConfig, new_buffer, render, render_frame

__all__ = [
    "CAPTURED",
    "Captured",
    "ChannelParams",
    "ColormapLoop",
    "Complex",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_PCL",
    "DEFAULT_RESOLUTION",
    "DEFAULT_VIEWPORT",
    "Escaped",
    "Explorer",
    "FLAT_ESCAPE",
    "FlatEscape",
    "FractalConfig",
    "IterateMap",
    "PhasedColorLoop",
    "Resolution",
    "Viewport",
    "apply_zoom",
    "color_strategy",
    "escape_time",
    "iterate_map",
    "new_buffer",
    "pixel_index_to_plane",
    "pixel_to_plane",
    "plane_to_pixel",
    "recenter",
    "render",
    "render_frame",
    "reset_config",
    "smooth_index",
    "validate_config",
    "zoom_to_point",
]
