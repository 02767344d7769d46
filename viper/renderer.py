"""Window, drawing primitives and image textures."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from viper.logger import Logger
from viper.resources import Resource
from viper.vector import Vector2

Color = Tuple[int, int, int, int]


class RendererError(Exception):
    """The display or an image could not be set up."""


def _channel(value, as_float: bool) -> int:
    scaled = value * 255 if as_float else value
    return max(0, min(255, int(scaled)))


class Renderer:
    """Draws onto a window surface (or any surface handed in)."""

    def __init__(self, surface: Optional[pygame.Surface] = None) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size() if surface is not None else (0, 0)
        self.color: Color = (255, 255, 255, 255)
        self._window = False

    def initialize(self) -> None:
        try:
            pygame.init()
            pygame.font.init()
        except pygame.error as exc:
            Logger.error("pygame init error: {}", exc)
            raise RendererError(str(exc)) from exc

    def shutdown(self) -> None:
        pygame.font.quit()
        pygame.quit()
        self.surface = None
        self._window = False

    def create_window(self, name: str, width: int, height: int) -> None:
        self.width = width
        self.height = height
        try:
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            Logger.error("create window error: {}", exc)
            raise RendererError(str(exc)) from exc
        pygame.display.set_caption(name)
        self._window = True

    def _target(self) -> pygame.Surface:
        if self.surface is None:
            raise RendererError("no drawing surface")
        return self.surface

    def clear(self) -> None:
        self._target().fill(self.color)

    def present(self) -> None:
        if self._window:
            pygame.display.flip()

    def set_color(self, r, g, b, a=None) -> None:
        """Set the draw colour; floats are in [0, 1], integers in [0, 255]."""
        as_float = any(isinstance(v, float) for v in (r, g, b, a))
        if a is None:
            a = 1.0 if as_float else 255
        self.color = tuple(_channel(v, as_float) for v in (r, g, b, a))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pygame.draw.line(self._target(), self.color, (x1, y1), (x2, y2))

    def draw_point(self, x: float, y: float) -> None:
        target = self._target()
        px, py = int(x), int(y)
        if 0 <= px < target.get_width() and 0 <= py < target.get_height():
            target.set_at((px, py), self.color)

    def draw_texture(self, texture: "Texture", x: float, y: float, scale=None, angle: float = 0.0) -> None:
        """Without ``scale`` draw with the top-left at (x, y); otherwise centred,
        scaled and rotated clockwise by ``angle`` degrees."""
        if texture.surface is None:
            Logger.warning("Texture not loaded. {}", "")
            return
        target = self._target()
        if scale is None:
            target.blit(texture.surface, (x, y))
            return
        image = pygame.transform.rotozoom(texture.surface, -angle, scale)
        target.blit(image, image.get_rect(center=(x, y)))


class Texture(Resource):
    """An image loaded from a file."""

    def __init__(self) -> None:
        self.surface: Optional[pygame.Surface] = None

    def load(self, filename: str, renderer=None) -> None:
        try:
            self.surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            Logger.warning("Could not load image: {}", filename)
            raise RendererError(f"Could not load image: {filename}") from exc

    def size(self) -> Vector2:
        if self.surface is None:
            Logger.warning("Texture not loaded. {}", "")
            return Vector2(0, 0)
        w, h = self.surface.get_size()
        return Vector2(float(w), float(h))