"""Default configuration and validation of caller-supplied values.

The rendering core trusts its inputs. Anything built from user input (command
line, JSON request bodies) passes through ``validate_config`` first.
"""

from __future__ import annotations

import math
from numbers import Integral, Real

from .coloring import DEFAULT_PCL, FLAT_ESCAPE, ColormapLoop
from .complexmath import Complex
from .engine import IterateMap
from .errors import ConfigError
from .mapping import Resolution, Viewport
from .renderer import ColorFunc, FractalConfig

__all__ = [
    "COLOR_STRATEGIES",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_RESOLUTION",
    "DEFAULT_VIEWPORT",
    "color_strategy",
    "iterate_map",
    "validate_config",
]

DEFAULT_VIEWPORT = Viewport(origin=Complex(-3.0, -1.0), width=4.0, height=2.0)
DEFAULT_RESOLUTION = Resolution(width_px=1400, height_px=700)
DEFAULT_MAX_ITERATIONS = 1000

DEFAULT_CONFIG = FractalConfig(
    viewport=DEFAULT_VIEWPORT,
    resolution=DEFAULT_RESOLUTION,
    max_iterations=DEFAULT_MAX_ITERATIONS,
    iterate=IterateMap.QUADRATIC,
    color_of=DEFAULT_PCL,
)

COLOR_STRATEGIES = ("flat", "pcl", "colormap")


def iterate_map(name: str) -> IterateMap:
    try:
        return IterateMap(name.lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in IterateMap)
        raise ConfigError(f"Unknown iterate map '{name}'. Valid choices: {choices}.") from exc


def color_strategy(name: str, *, colormap: str = "twilight_shifted", cycle: float = 64.0) -> ColorFunc:
    """Resolve a color strategy by name."""

    key = name.lower()
    if key == "flat":
        return FLAT_ESCAPE
    if key == "pcl":
        return DEFAULT_PCL
    if key == "colormap":
        if not (_is_real(cycle) and math.isfinite(cycle) and cycle > 0):
            raise ConfigError("colormap cycle must be a positive number.")
        try:
            return ColormapLoop(name=colormap, cycle=float(cycle))
        except KeyError as exc:
            raise ConfigError(f"Unknown matplotlib colormap '{colormap}'.") from exc
    raise ConfigError(f"Unknown color strategy '{name}'. Valid choices: {', '.join(COLOR_STRATEGIES)}.")


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_config(config: FractalConfig) -> FractalConfig:
    """Reject configurations the renderer cannot handle; return ``config`` unchanged."""

    viewport = config.viewport
    origin = viewport.origin
    for label, value in (("origin real part", origin.re), ("origin imaginary part", origin.im)):
        if not (_is_real(value) and math.isfinite(value)):
            raise ConfigError(f"Viewport {label} must be a finite number, got {value!r}.")
    for label, value in (("width", viewport.width), ("height", viewport.height)):
        if not (_is_real(value) and math.isfinite(value) and value > 0):
            raise ConfigError(f"Viewport {label} must be a positive finite number, got {value!r}.")

    resolution = config.resolution
    for label, value in (("width", resolution.width_px), ("height", resolution.height_px)):
        if not (_is_int(value) and value > 0):
            raise ConfigError(f"Resolution {label} must be a positive integer, got {value!r}.")

    if not (_is_int(config.max_iterations) and config.max_iterations > 0):
        raise ConfigError(f"max_iterations must be a positive integer, got {config.max_iterations!r}.")

    if not callable(config.iterate):
        raise ConfigError("iterate must be callable.")
    if not callable(config.color_of):
        raise ConfigError("color_of must be callable.")

    return config
