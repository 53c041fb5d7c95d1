"""Color strategies mapping iteration results to RGBA tuples.

Every strategy is a frozen callable ``(result, point) -> (r, g, b, a)`` with no
state shared between pixels. Captured points are always opaque black.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from matplotlib import colormaps as _mpl_colormaps
from matplotlib.colors import Colormap

from .complexmath import Complex
from .engine import Escaped, IterationResult

RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


def clamp_channel(value: float) -> int:
    return int(min(max(value, 0.0), 255.0))


@dataclass(frozen=True)
class FlatEscape:
    """Two fixed colors: one for captured points, one for escaped points."""

    captured: RGBA = BLACK
    escaped: RGBA = WHITE

    def __call__(self, result: IterationResult, point: Complex) -> RGBA:
        if isinstance(result, Escaped):
            return self.escaped
        return self.captured


@dataclass(frozen=True)
class ChannelParams:
    frequency: float
    phase: float
    minimum: float = 0.0

    def value(self, index: float) -> int:
        return clamp_channel(math.sin(self.frequency * index + self.phase) * (255 - self.minimum) + self.minimum)


@dataclass(frozen=True)
class PhasedColorLoop:
    """Sinusoidal per-channel coloring of the smoothed escape index."""

    red: ChannelParams
    green: ChannelParams
    blue: ChannelParams

    def __call__(self, result: IterationResult, point: Complex) -> RGBA:
        if not isinstance(result, Escaped):
            return BLACK
        s = result.smooth_index()
        return (self.red.value(s), self.green.value(s), self.blue.value(s), 255)


@dataclass(frozen=True)
class ColormapLoop:
    """Cycle through a matplotlib colormap as the smoothed index grows."""

    name: str = "twilight_shifted"
    cycle: float = 64.0
    cmap: Colormap = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Resolved once: the registry hands out a fresh copy on every lookup.
        object.__setattr__(self, "cmap", _mpl_colormaps[self.name])

    def __call__(self, result: IterationResult, point: Complex) -> RGBA:
        if not isinstance(result, Escaped):
            return BLACK
        position = math.fmod(result.smooth_index() / self.cycle, 1.0)
        r, g, b, _ = self.cmap(position)
        return (clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255), 255)


DEFAULT_PCL = PhasedColorLoop(
    red=ChannelParams(0.016, 4.0, 25.0),
    green=ChannelParams(0.13, 2.0, 25.0),
    blue=ChannelParams(0.01, 1.0, 25.0),
)

FLAT_ESCAPE = FlatEscape()
