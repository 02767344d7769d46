"""Fonts and rendered text labels."""

from __future__ import annotations

from typing import Optional

import pygame

from viper.logger import Logger
from viper.renderer import RendererError
from viper.resources import Resource
from viper.vector import Vector2


class Font(Resource):
    """A TrueType font at one size; ``None`` as name gives the default font."""

    def __init__(self) -> None:
        self.font: Optional[pygame.font.Font] = None

    def load(self, name: Optional[str], size: float) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self.font = pygame.font.Font(name, int(size))
        except (pygame.error, OSError) as exc:
            Logger.warning("Could not load font: {}", name)
            raise RendererError(f"Could not load font: {name}") from exc


class Text:
    """A string rendered once with a font, then drawn as often as needed."""

    def __init__(self, font: Optional[Font] = None) -> None:
        self.font = font
        self.surface: Optional[pygame.Surface] = None

    def create(self, renderer, text: str, color) -> None:
        if self.font is None or self.font.font is None:
            Logger.error("Could not create surface.")
            raise RendererError("text has no loaded font")
        rgb = tuple(max(0, min(255, int(c * 255))) for c in color)
        self.surface = self.font.font.render(text, False, rgb)

    def size(self) -> Vector2:
        if self.surface is None:
            return Vector2(0, 0)
        w, h = self.surface.get_size()
        return Vector2(float(w), float(h))

    def draw(self, renderer, x: float, y: float) -> None:
        if self.surface is None:
            raise RuntimeError("text has not been created")
        renderer.surface.blit(self.surface, (x, y))