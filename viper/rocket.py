"""Projectiles fired by the player and enemies."""

from __future__ import annotations

from viper import rand
from viper.actor import Actor
from viper.engine import get_engine
from viper.mathutil import deg_to_rad, wrap
from viper.particles import Particle
from viper.vector import Vector2, Vector3


class Rocket(Actor):
    """Flies straight ahead at ``speed``, leaving a particle trail."""

    def __init__(self, transform=None, model=None, texture=None) -> None:
        super().__init__(transform, model, texture)
        self.speed = 200.0

    def update(self, dt: float) -> None:
        engine = get_engine()
        self.velocity = Vector2(1, 0).rotate(deg_to_rad(self.transform.rotation)) * self.speed

        pos = self.transform.position
        pos.x = wrap(pos.x, 0.0, float(engine.renderer.width))
        pos.y = wrap(pos.y, 0.0, float(engine.renderer.height))

        angle = self.transform.rotation + rand.real(-60.0, 60.0)
        trail = Vector2(1, 0).rotate(deg_to_rad(angle)) * rand.real(80.0, 150.0)
        color = Vector3(0, 1, 1) if self.tag == "enemy" else Vector3(1, 1, 0)
        engine.particle_system.add_particle(Particle(
            position=Vector2(pos.x, pos.y),
            velocity=trail,
            color=color,
            lifespan=rand.real(0.15, 0.3),
        ))

        super().update(dt)

    def on_collision(self, other: Actor) -> None:
        if other.tag != self.tag:
            self.destroyed = True