"""Base class for a game run by the engine."""

from __future__ import annotations

import abc
from typing import Any


class Game(abc.ABC):
    """Holds score, lives and the scene of a running game."""

    def __init__(self) -> None:
        self.score = 0
        self.lives = 0
        self.scene: Any = None

    @abc.abstractmethod
    def initialize(self) -> bool:
        """Prepare the game before the first frame."""

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""

    @abc.abstractmethod
    def draw(self, renderer) -> None:
        """Draw the current frame."""

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Release what the game holds."""

    def add_points(self, points: int) -> None:
        self.score += points