"""Two- and three-component vectors and the transform built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

Number = Union[int, float]


def _pair(other) -> Tuple[float, float] | None:
    if isinstance(other, Vector2):
        return other.x, other.y
    if isinstance(other, (int, float)):
        return other, other
    return None


def _triple(other) -> Tuple[float, float, float] | None:
    if isinstance(other, Vector3):
        return other.x, other.y, other.z
    if isinstance(other, (int, float)):
        return other, other, other
    return None


@dataclass
class Vector2:
    """A mutable 2D vector; arithmetic works with vectors and scalars alike."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Vector2 index out of range")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError("Vector2 index out of range")

    def __add__(self, other):
        o = _pair(other)
        return NotImplemented if o is None else Vector2(self.x + o[0], self.y + o[1])

    def __sub__(self, other):
        o = _pair(other)
        return NotImplemented if o is None else Vector2(self.x - o[0], self.y - o[1])

    def __mul__(self, other):
        o = _pair(other)
        return NotImplemented if o is None else Vector2(self.x * o[0], self.y * o[1])

    def __truediv__(self, other):
        o = _pair(other)
        return NotImplemented if o is None else Vector2(self.x / o[0], self.y / o[1])

    def __iadd__(self, other):
        o = _pair(other)
        if o is None:
            return NotImplemented
        self.x += o[0]
        self.y += o[1]
        return self

    def __isub__(self, other):
        o = _pair(other)
        if o is None:
            return NotImplemented
        self.x -= o[0]
        self.y -= o[1]
        return self

    def __imul__(self, other):
        o = _pair(other)
        if o is None:
            return NotImplemented
        self.x *= o[0]
        self.y *= o[1]
        return self

    def __itruediv__(self, other):
        o = _pair(other)
        if o is None:
            return NotImplemented
        self.x /= o[0]
        self.y /= o[1]
        return self

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sqr())

    def normalized(self) -> "Vector2":
        """Return a unit-length copy of this vector."""
        return self / self.length()

    def angle(self) -> float:
        """Angle of the vector in radians."""
        return math.atan2(self.y, self.x)

    def rotate(self, radians: float) -> "Vector2":
        c, s = math.cos(radians), math.sin(radians)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    @staticmethod
    def dot(a: "Vector2", b: "Vector2") -> float:
        """Product of all four components, as the engine defines it."""
        return a.x * b.x * a.y * b.y

    @staticmethod
    def cross(a: "Vector2", b: "Vector2") -> float:
        return a.x * b.y - a.y * b.x

    @staticmethod
    def angle_between(a: "Vector2", b: "Vector2") -> float:
        """Arc cosine of ``dot(a, b)``; NaN when that lies outside [-1, 1]."""
        d = Vector2.dot(a, b)
        if -1.0 <= d <= 1.0:
            return math.acos(d)
        return math.nan

    @staticmethod
    def signed_angle_between(a: "Vector2", b: "Vector2") -> float:
        return Vector2(Vector2.dot(a, b), Vector2.cross(a, b)).angle()


@dataclass
class Vector3:
    """A mutable 3D vector, also used for RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        if index in (0, 1, 2):
            return (self.x, self.y, self.z)[index]
        raise IndexError("Vector3 index out of range")

    def __setitem__(self, index: int, value: float) -> None:
        if index not in (0, 1, 2):
            raise IndexError("Vector3 index out of range")
        setattr(self, "xyz"[index], value)

    def __add__(self, other):
        o = _triple(other)
        return NotImplemented if o is None else Vector3(self.x + o[0], self.y + o[1], self.z + o[2])

    def __sub__(self, other):
        o = _triple(other)
        return NotImplemented if o is None else Vector3(self.x - o[0], self.y - o[1], self.z - o[2])

    def __mul__(self, other):
        o = _triple(other)
        return NotImplemented if o is None else Vector3(self.x * o[0], self.y * o[1], self.z * o[2])

    def __truediv__(self, other):
        o = _triple(other)
        return NotImplemented if o is None else Vector3(self.x / o[0], self.y / o[1], self.z / o[2])

    def __iadd__(self, other):
        o = _triple(other)
        if o is None:
            return NotImplemented
        self.x, self.y, self.z = self.x + o[0], self.y + o[1], self.z + o[2]
        return self

    def __isub__(self, other):
        o = _triple(other)
        if o is None:
            return NotImplemented
        self.x, self.y, self.z = self.x - o[0], self.y - o[1], self.z - o[2]
        return self

    def __imul__(self, other):
        o = _triple(other)
        if o is None:
            return NotImplemented
        self.x, self.y, self.z = self.x * o[0], self.y * o[1], self.z * o[2]
        return self

    def __itruediv__(self, other):
        o = _triple(other)
        if o is None:
            return NotImplemented
        self.x, self.y, self.z = self.x / o[0], self.y / o[1], self.z / o[2]
        return self

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sqr())


@dataclass
class Transform:
    """Position, rotation in degrees and uniform scale of an actor."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: float = 1.0