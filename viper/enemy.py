"""Enemy ships that chase the player."""

from __future__ import annotations

from viper import rand
from viper.actor import Actor
from viper.engine import get_engine
from viper.mathutil import deg_to_rad, rad_to_deg, sign, wrap
from viper.particles import Particle
from viper.player import Player
from viper.renderer import Texture
from viper.resources import resources
from viper.rocket import Rocket
from viper.vector import Transform, Vector2, Vector3


class Enemy(Actor):
    """Accelerates forward, turns toward a player it sees and fires at it."""

    def __init__(self, transform=None, model=None, texture=None) -> None:
        super().__init__(transform, model, texture)
        self.speed = 200.0
        self.fire_timer = 0.0
        self.fire_time = 0.0

    def update(self, dt: float) -> None:
        engine = get_engine()
        player_seen = False

        player = self.scene.get_actor_by_name("player", Player) if self.scene else None
        if player is not None:
            direction = (player.transform.position - self.transform.position).normalized()
            forward = Vector2(1, 0).rotate(deg_to_rad(self.transform.rotation))
            angle = rad_to_deg(Vector2.angle_between(forward, direction))
            player_seen = angle <= 30
            if player_seen:
                turn = sign(Vector2.signed_angle_between(direction, forward))
                self.transform.rotation += rad_to_deg(turn * 5 * dt)

        force = Vector2(1, 0).rotate(deg_to_rad(self.transform.rotation)) * self.speed
        self.velocity += force * dt

        pos = self.transform.position
        pos.x = wrap(pos.x, 0.0, float(engine.renderer.width))
        pos.y = wrap(pos.y, 0.0, float(engine.renderer.height))

        self.fire_timer -= dt
        if self.fire_timer <= 0 and player_seen:
            self.fire_timer = self.fire_time
            texture = resources().get(Texture, "red_rocket.png", engine.renderer)
            rocket = Rocket(Transform(Vector2(pos.x, pos.y), self.transform.rotation, 2.0), texture=texture)
            rocket.speed = 500.0
            rocket.lifespan = 1.5
            rocket.name = "rocket"
            rocket.tag = "enemy"
            self.scene.add_actor(rocket)

        super().update(dt)

    def on_collision(self, other: Actor) -> None:
        if self.tag == other.tag:
            return
        self.destroyed = True
        self.scene.game.add_points(100)
        particles = get_engine().particle_system
        for _ in range(100):
            pos = self.transform.position
            particles.add_particle(Particle(
                position=Vector2(pos.x, pos.y),
                velocity=rand.on_unit_circle() * rand.real(10.0, 200.0),
                color=Vector3(1, 1, 1),
                lifespan=2,
            ))