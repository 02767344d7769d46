"""Shared random number generator and convenience draws."""

from __future__ import annotations

import math
import random as _random

from viper.mathutil import TWO_PI
from viper.vector import Vector2

INT_MAX = 2**31 - 1

_generator = _random.Random()


def generator() -> _random.Random:
    """Return the process-wide generator."""
    return _generator


def seed(value: int) -> None:
    _generator.seed(value)


def random_int(a: int | None = None, b: int | None = None) -> int:
    """Uniform integer.

    No arguments: ``[0, INT_MAX]``. One: ``[0, a - 1]``. Two: ``[a, b]``.
    """
    if a is None:
        low, high = 0, INT_MAX
    elif b is None:
        low, high = 0, a - 1
    else:
        low, high = a, b
    if low > high:
        raise ValueError(f"empty integer range [{low}, {high}]")
    return _generator.randint(low, high)


def real(a: float | None = None, b: float | None = None) -> float:
    """Uniform real.

    No arguments: ``[0, 1)``. One: ``[0, a)``. Two: ``[a, b)``.
    """
    if a is None:
        low, high = 0.0, 1.0
    elif b is None:
        low, high = 0.0, a
    else:
        low, high = a, b
    return low + (high - low) * _generator.random()


def random_float(a: float | None = None, b: float | None = None) -> float:
    """Uniform float with the same argument rules as :func:`real`."""
    return real(a, b)


def random_bool() -> bool:
    return _generator.random() < 0.5


def on_unit_circle() -> Vector2:
    """A random point on the unit circle."""
    radians = real(TWO_PI)
    return Vector2(math.cos(radians), math.sin(radians))