"""Escape-time iteration of complex maps."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from .complexmath import ZERO, Complex, add, conjugate, multiply, norm, norm_squared

ESCAPE_RADIUS = 2.0
ESCAPE_RADIUS_SQUARED = ESCAPE_RADIUS * ESCAPE_RADIUS
LOG2 = math.log(2.0)

IterateFunc = Callable[[Complex, Complex], Complex]


@dataclass(frozen=True)
class Captured:
    """The orbit stayed inside the escape radius for the whole budget."""


@dataclass(frozen=True)
class Escaped:
    """The orbit left the escape radius after ``count`` iterations."""

    count: int
    final: Complex

    def smooth_index(self) -> float:
        return smooth_index(self.count, self.final)


IterationResult = Union[Captured, Escaped]

CAPTURED = Captured()


def smooth_index(count: int, final: Complex) -> float:
    """Normalized iteration count, removing the banding of integer counts."""

    value = count + 1 - math.log(math.log(norm(final))) / LOG2
    return max(value, 0.0)


def _quadratic(z: Complex, c: Complex) -> Complex:
    return add(multiply(z, z), c)


def _cubic(z: Complex, c: Complex) -> Complex:
    return add(multiply(multiply(z, z), z), c)


def _tricorn(z: Complex, c: Complex) -> Complex:
    zc = conjugate(z)
    return add(multiply(zc, zc), c)


class IterateMap(Enum):
    """Built-in iteration maps selectable by name."""

    QUADRATIC = "quadratic"
    CUBIC = "cubic"
    TRICORN = "tricorn"

    def __call__(self, z: Complex, c: Complex) -> Complex:
        return _MAPS[self](z, c)


_MAPS: dict[IterateMap, IterateFunc] = {
    IterateMap.QUADRATIC: _quadratic,
    IterateMap.CUBIC: _cubic,
    IterateMap.TRICORN: _tricorn,
}


def escape_time(seed: Complex, iterate: IterateFunc, max_iterations: int) -> IterationResult:
    """Iterate ``z = iterate(z, seed)`` from zero until escape or budget exhaustion.

    The escape test runs after every application of the map, so the starting
    value is never tested and ``Escaped.count`` is 1-based.
    """

    z = ZERO
    for count in range(1, max_iterations + 1):
        z = iterate(z, seed)
        if norm_squared(z) > ESCAPE_RADIUS_SQUARED:
            return Escaped(count, z)
    return CAPTURED
