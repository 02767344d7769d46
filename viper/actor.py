"""Base class for everything that lives in a scene."""

from __future__ import annotations

import abc
from typing import Any, Optional

from viper.vector import Transform, Vector2


class Actor(abc.ABC):
    """A moving object with a transform, drawn from a model or a texture."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        model: Any = None,
        texture: Any = None,
    ) -> None:
        source = transform if transform is not None else Transform()
        self.transform = Transform(
            Vector2(source.position.x, source.position.y),
            source.rotation,
            source.scale,
        )
        self.model = model
        self.texture = texture
        self.name = ""
        self.tag = ""
        self.velocity = Vector2(0.0, 0.0)
        self.damping = 0.0
        self.destroyed = False
        self.lifespan = 0.0
        self.scene: Any = None

    def update(self, dt: float) -> None:
        """Age the actor, move it by its velocity and apply damping."""
        if self.destroyed:
            return
        if self.lifespan != 0:
            self.lifespan -= dt
            self.destroyed = self.lifespan <= 0
        self.transform.position += self.velocity * dt
        self.velocity *= 1.0 / (1.0 + self.damping * dt)

    def draw(self, renderer) -> None:
        """Draw the actor's line model."""
        if self.destroyed or self.model is None:
            return
        self.model.draw(renderer, self.transform)

    def draw_texture(self, renderer) -> None:
        """Draw the actor's texture centred on its position."""
        if self.destroyed or self.texture is None:
            return
        t = self.transform
        renderer.draw_texture(self.texture, t.position.x, t.position.y, t.scale, t.rotation)

    @abc.abstractmethod
    def on_collision(self, other: "Actor") -> None:
        """React to touching ``other``."""

    def radius(self) -> float:
        """Collision radius derived from the model."""
        if self.model is None:
            return 0.0
        return self.model.radius * self.transform.scale * 0.8

    def texture_radius(self) -> float:
        """Collision radius derived from the texture size."""
        if self.texture is None:
            return 0.0
        return self.texture.size().length() * 0.5 * self.transform.scale * 0.3