"""The player's ship."""

from __future__ import annotations

import pygame

from viper import rand
from viper.actor import Actor
from viper.engine import get_engine
from viper.mathutil import deg_to_rad, wrap
from viper.particles import Particle
from viper.renderer import Texture
from viper.resources import resources
from viper.rocket import Rocket
from viper.vector import Transform, Vector2, Vector3


class Player(Actor):
    """Turns with A/D, thrusts with W/S and fires with F."""

    def __init__(self, transform=None, model=None, texture=None) -> None:
        super().__init__(transform, model, texture)
        self.speed = 200.0
        self.rotation_rate = 180.0
        self.fire_time = 0.2
        self.fire_timer = 0.0

    def update(self, dt: float) -> None:
        engine = get_engine()
        keys = engine.input
        pos = self.transform.position

        exhaust = Particle(
            position=Vector2(pos.x, pos.y),
            velocity=Vector2(rand.real(-200.0, 200.0), rand.real(-200.0, 200.0)),
            color=Vector3(1, 1, 1),
            lifespan=0.5,
        )

        turn = 0.0
        if keys.key_down(pygame.K_a):
            turn = -1.0
        if keys.key_down(pygame.K_d):
            turn = 1.0
        self.transform.rotation += turn * self.rotation_rate * dt

        thrust = 0.0
        if keys.key_down(pygame.K_s):
            thrust = -1.0
        if keys.key_down(pygame.K_w):
            thrust = 1.0
            engine.particle_system.add_particle(exhaust)

        force = Vector2(1, 0).rotate(deg_to_rad(self.transform.rotation)) * thrust * self.speed
        self.velocity += force * dt

        pos.x = wrap(pos.x, 0.0, float(engine.renderer.width))
        pos.y = wrap(pos.y, 0.0, float(engine.renderer.height))

        self.fire_timer -= dt
        if keys.key_down(pygame.K_f) and self.fire_timer <= 0:
            self.fire_timer = self.fire_time
            engine.audio.play_sound("clap")
            texture = resources().get(Texture, "blue_rocket.png", engine.renderer)
            rocket = Rocket(Transform(Vector2(pos.x, pos.y), self.transform.rotation, 2), texture=texture)
            rocket.speed = 1500.0
            rocket.lifespan = 1.5
            rocket.name = "rocket"
            rocket.tag = "player"
            self.scene.add_actor(rocket)

        super().update(dt)

    def on_collision(self, other: Actor) -> None:
        if other.tag != self.tag:
            self.destroyed = True
            self.scene.game.on_player_dead()