"""Line-strip models drawn with a transform."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Optional

from viper.mathutil import deg_to_rad
from viper.vector import Transform, Vector2, Vector3


class Model:
    """A polyline in model space with a colour and a bounding radius."""

    def __init__(self, points: Iterable = (), color: Optional[Iterable[float]] = None) -> None:
        self.points = [Vector2(*point) for point in points]
        self.color = Vector3(*color) if color is not None else Vector3(1.0, 1.0, 1.0)
        self._radius = max((point.length() for point in self.points), default=0.0)

    @property
    def radius(self) -> float:
        """Distance of the farthest point from the origin."""
        return self._radius

    def draw_at(self, renderer, position: Vector2, rotation: float, scale: float) -> None:
        """Draw the polyline rotated by ``rotation`` degrees, scaled and moved."""
        if not self.points:
            return
        c = self.color
        renderer.set_color(float(c.x), float(c.y), float(c.z))
        radians = deg_to_rad(rotation)
        placed = [point.rotate(radians) * scale + position for point in self.points]
        for start, end in pairwise(placed):
            renderer.draw_line(start.x, start.y, end.x, end.y)

    def draw(self, renderer, transform: Transform) -> None:
        self.draw_at(renderer, transform.position, transform.rotation, transform.scale)