"""Angle conversion, wrapping and sign helpers used throughout the engine."""

from __future__ import annotations

import math

PI = 3.14
TWO_PI = 2.0 * PI
HALF_PI = PI / 2.0


def rad_to_deg(rad: float) -> float:
    """Convert an angle in radians to degrees."""
    return rad * (180 / PI)


def deg_to_rad(deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return deg * (PI / 180)


def wrap(value, low, high):
    """Wrap ``value`` into the half-open range ``[low, high)``.

    Integers stay integers; any float argument gives a float result.
    """
    span = high - low
    if span == 0:
        raise ValueError("cannot wrap into an empty range")
    offset = value - low
    if all(isinstance(v, int) for v in (value, low, high)):
        result = abs(offset) % abs(span)
        if offset < 0:
            result = -result
    else:
        result = math.fmod(offset, span)
    if result < 0:
        result += span
    return low + result


def sign(value):
    """Return -1, 0 or 1 (in the type of ``value``) according to its sign."""
    kind = type(value)
    if value < 0:
        return kind(-1)
    if value > 0:
        return kind(1)
    return kind(0)