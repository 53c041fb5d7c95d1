"""Conversions between raster pixels and points of the complex plane.

Three coordinate systems are involved:

* the linear index into an RGBA buffer (4 channels per pixel, row-major);
* the pixel coordinate ``(x, y)`` with a top-left origin, ``y`` growing downward;
* the tile coordinate, identical to the pixel coordinate but with a
  bottom-left origin so that ``y`` grows upward like the imaginary axis.

The tile coordinate maps onto the plane through the viewport's affine map.
Nothing here rounds or clamps: coordinates outside the buffer extrapolate
past the viewport.
"""

from __future__ import annotations

from dataclasses import dataclass

from .complexmath import Complex

CHANNELS = 4


@dataclass(frozen=True)
class Viewport:
    """Rectangle of the complex plane anchored at its bottom-left corner."""

    origin: Complex
    width: float
    height: float

    @property
    def center(self) -> Complex:
        return Complex(self.origin.re + self.width / 2.0, self.origin.im + self.height / 2.0)


@dataclass(frozen=True)
class Resolution:
    """Pixel dimensions of a buffer."""

    width_px: int
    height_px: int

    @property
    def buffer_length(self) -> int:
        return self.width_px * self.height_px * CHANNELS


def pixel_index_to_coord(index: int, width_px: int) -> tuple[int, int]:
    n = index // CHANNELS
    x = n % width_px
    return x, (n - x) // width_px


def coord_to_tile(coord: tuple[float, float], height_px: int) -> tuple[float, float]:
    x, y = coord
    return x, height_px - y


def tile_to_coord(tile: tuple[float, float], height_px: int) -> tuple[float, float]:
    # The vertical flip is its own inverse.
    tx, ty = tile
    return tx, height_px - ty


def tile_to_plane(tile: tuple[float, float], viewport: Viewport, resolution: Resolution) -> Complex:
    tx, ty = tile
    return Complex(
        viewport.origin.re + (viewport.width / resolution.width_px) * tx,
        viewport.origin.im + (viewport.height / resolution.height_px) * ty,
    )


def plane_to_tile(point: Complex, viewport: Viewport, resolution: Resolution) -> tuple[float, float]:
    return (
        (point.re - viewport.origin.re) * resolution.width_px / viewport.width,
        (point.im - viewport.origin.im) * resolution.height_px / viewport.height,
    )


def pixel_to_plane(coord: tuple[float, float], viewport: Viewport, resolution: Resolution) -> Complex:
    return tile_to_plane(coord_to_tile(coord, resolution.height_px), viewport, resolution)


def plane_to_pixel(point: Complex, viewport: Viewport, resolution: Resolution) -> tuple[float, float]:
    return tile_to_coord(plane_to_tile(point, viewport, resolution), resolution.height_px)


def pixel_index_to_plane(index: int, viewport: Viewport, resolution: Resolution) -> Complex:
    """Map a linear RGBA buffer index to the plane point it samples."""

    return pixel_to_plane(pixel_index_to_coord(index, resolution.width_px), viewport, resolution)
