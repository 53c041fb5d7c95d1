"""Immutable complex values and the arithmetic used by the escape-time loop."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Complex:
    """A point of the complex plane stored as a pair of reals."""

    re: float
    im: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> Complex:
        re, im = pair
        return cls(float(re), float(im))

    def __add__(self, other: Complex) -> Complex:
        return add(self, other)

    def __mul__(self, other: Complex) -> Complex:
        return multiply(self, other)

    def __abs__(self) -> float:
        return norm(self)


ZERO = Complex(0.0, 0.0)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.re * b.re - a.im * b.im,
        a.re * b.im + a.im * b.re,
    )


def conjugate(a: Complex) -> Complex:
    return Complex(a.re, -a.im)


def norm_squared(a: Complex) -> float:
    """Squared magnitude, used for escape tests to avoid a square root."""

    return a.re * a.re + a.im * a.im


def norm(a: Complex) -> float:
    return math.sqrt(norm_squared(a))
