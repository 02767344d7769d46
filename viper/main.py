"""Entry point that runs the space game in a window."""

from __future__ import annotations

from typing import List, Optional, Sequence

import pygame

from viper import rand
from viper.engine import get_engine
from viper.file import set_current_directory
from viper.logger import Logger, LogLevel
from viper.renderer import Texture
from viper.resources import resources
from viper.spacegame import SpaceGame
from viper.vector import Vector2

ASSET_DIRECTORY = "Assets"
STAR_COUNT = 100
STAR_SPEED = Vector2(-140.0, 0.0)

_SOUNDS = (
    ("bass.wav", "bass"),
    ("snare.wav", "snare"),
    ("open-hat.wav", "openhat"),
    ("clap.wav", "clap"),
    ("cowbell.wav", "cowbell"),
    ("close-hat.wav", "closehat"),
    ("arcade-fx-288597.mp3", "death"),
    ("Yoshi's Island OST - Athletic.mp3", "1music"),
    ("game-music-alien-71795.mp3", "music"),
)


def _make_stars(count: int, width: float, height: float) -> List[Vector2]:
    """Scatter ``count`` stars uniformly over the screen."""
    return [Vector2(rand.real() * width, rand.real() * height) for _ in range(count)]


def _move_stars(stars: List[Vector2], dt: float, width: float) -> None:
    """Scroll stars left, wrapping them around the horizontal edges."""
    for star in stars:
        star += STAR_SPEED * dt
        if star.x > width:
            star.x = 0
        if star.x < 0:
            star.x = width


def _draw_stars(renderer, stars: Sequence[Vector2]) -> None:
    for star in stars:
        renderer.set_color(rand.random_int(256), rand.random_int(256), rand.random_int(256))
        renderer.draw_point(star.x, star.y)


def main(argv=None) -> int:
    Logger.set_enabled_levels(LogLevel.ERROR)

    try:
        set_current_directory(ASSET_DIRECTORY)
    except OSError as exc:
        Logger.error("Could not enter asset directory: {}", exc)

    engine = get_engine()
    engine.initialize()

    game = SpaceGame()
    game.initialize()

    for filename, name in _SOUNDS:
        engine.audio.add_sound(filename, name)

    renderer = engine.renderer
    squidward = resources().get(Texture, "sexy-squidward.png", renderer)
    resources().get(Texture, "blue_01.png", renderer)

    stars = _make_stars(STAR_COUNT, renderer.width, renderer.height)
    rotation = 0.0
    running = True
    while running:
        if any(event.type == pygame.QUIT for event in pygame.event.get()):
            running = False

        engine.update()
        dt = engine.time.delta_time
        game.update(dt)

        if engine.input.key_pressed(pygame.K_ESCAPE):
            running = False

        renderer.set_color(0.0, 0.0, 0.0)
        renderer.clear()

        rotation += 0.1 * dt
        renderer.draw_texture(squidward, 30, 30, 4, rotation)

        game.draw(renderer)

        _move_stars(stars, dt, renderer.width)
        _draw_stars(renderer, stars)

        renderer.present()

    game.shutdown()
    engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())