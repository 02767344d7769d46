"""Pooled particles that fly in straight lines and fade with time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from viper.logger import Logger
from viper.vector import Vector2, Vector3

DEFAULT_POOL_SIZE = 1000


@dataclass
class Particle:
    active: bool = False
    lifespan: float = 1.0
    prev_position: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    color: Vector3 = field(default_factory=Vector3)

    def copy(self) -> "Particle":
        return Particle(
            self.active,
            self.lifespan,
            Vector2(*self.prev_position),
            Vector2(*self.position),
            Vector2(*self.velocity),
            Vector3(*self.color),
        )


class ParticleSystem:
    """A pool of particles; inactive slots are reused for new ones."""

    def __init__(self) -> None:
        self.particles: List[Particle] = []

    def initialize(self, pool_size: int = DEFAULT_POOL_SIZE) -> None:
        if pool_size < 0:
            raise ValueError("pool size must not be negative")
        self.particles = [Particle() for _ in range(pool_size)]

    def shutdown(self) -> None:
        self.particles.clear()

    def update(self, dt: float) -> None:
        for particle in self.particles:
            if particle.active:
                particle.lifespan -= dt
                particle.active = particle.lifespan > 0
                particle.prev_position = Vector2(*particle.position)
                particle.position += particle.velocity * dt

    def draw(self, renderer) -> None:
        """Draw each active particle as a streak from its last position."""
        for particle in self.particles:
            if particle.active:
                c = particle.color
                renderer.set_color(float(c.x), float(c.y), float(c.z))
                renderer.draw_line(
                    particle.position.x,
                    particle.position.y,
                    particle.prev_position.x,
                    particle.prev_position.y,
                )

    def add_particle(self, particle: Particle) -> None:
        """Activate a copy in a free slot; a further copy always joins the pool."""
        slot = next((i for i, p in enumerate(self.particles) if not p.active), None)
        if slot is None:
            Logger.warning("No free particle slots available!")
        else:
            fresh = particle.copy()
            fresh.active = True
            fresh.prev_position = Vector2(*fresh.position)
            self.particles[slot] = fresh
        self.particles.append(particle.copy())

    @property
    def active_count(self) -> int:
        return sum(1 for p in self.particles if p.active)