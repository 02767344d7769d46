"""The space shooter: title screen, rounds, lives, enemies and game over."""

from __future__ import annotations

import enum
from typing import Optional

import pygame

from viper import rand
from viper.engine import get_engine
from viper.enemy import Enemy
from viper.game import Game
from viper.gamedata import ENEMY_POINTS, GAME_FONT, GAME_FONT2, SHIP_POINTS
from viper.model import Model
from viper.player import Player
from viper.renderer import Texture
from viper.resources import resources
from viper.scene import Scene
from viper.text import Font, Text
from viper.vector import Transform, Vector2, Vector3

ENEMY_SPAWN_INTERVAL = 4.0
PLAYER_DEAD_DELAY = 2.0
GAME_OVER_DELAY = 3.0
STARTING_LIVES = 3


class GameState(enum.Enum):
    INITIALIZE = enum.auto()
    TITLE = enum.auto()
    START_GAME = enum.auto()
    START_ROUND = enum.auto()
    GAME = enum.auto()
    PLAYER_DEAD = enum.auto()
    GAME_OVER = enum.auto()


class SpaceGame(Game):
    """Runs the game's state machine and draws its text overlays."""

    def __init__(self) -> None:
        super().__init__()
        self.state = GameState.INITIALIZE
        self.enemy_spawn_timer = 0.0
        self.state_timer = 0.0
        self.played_death_sound = False
        self.title_text: Optional[Text] = None
        self.score_text: Optional[Text] = None
        self.lives_text: Optional[Text] = None

    def initialize(self) -> bool:
        self.scene = Scene(self)
        manager = resources()
        self.title_text = Text(manager.get_with_id(Font, "title_font", GAME_FONT, 128.0))
        self.score_text = Text(manager.get_with_id(Font, "ui_font", GAME_FONT, 48.0))
        self.lives_text = Text(manager.get(Font, GAME_FONT2, 48.0))
        return True

    def shutdown(self) -> None:
        """Nothing is held beyond what the engine releases."""

    def update(self, dt: float) -> None:
        engine = get_engine()
        state = self.state

        if state is GameState.INITIALIZE:
            self.state = GameState.TITLE
        elif state is GameState.TITLE:
            if engine.input.key_pressed(pygame.K_SPACE):
                self.state = GameState.START_GAME
        elif state is GameState.START_GAME:
            self.score = 0
            self.lives = STARTING_LIVES
            self.state = GameState.START_ROUND
        elif state is GameState.START_ROUND:
            self._start_round()
            self.state = GameState.GAME
        elif state is GameState.GAME:
            self.enemy_spawn_timer -= dt
            if self.enemy_spawn_timer <= 0:
                self.enemy_spawn_timer = ENEMY_SPAWN_INTERVAL
                self._spawn_enemy()
        elif state is GameState.PLAYER_DEAD:
            self.state_timer -= dt
            if self.state_timer <= 0:
                self.lives -= 1
                if self.lives == 0:
                    self.state = GameState.GAME_OVER
                    self.state_timer = GAME_OVER_DELAY
                    self.played_death_sound = False
                else:
                    self.state = GameState.START_ROUND
        elif state is GameState.GAME_OVER:
            if not self.played_death_sound:
                engine.audio.play_sound("death")
                self.played_death_sound = True
            self.state_timer -= dt
            if self.state_timer <= 0:
                self.state = GameState.TITLE

        self.scene.update(engine.time.delta_time)

    def draw(self, renderer) -> None:
        red = Vector3(1, 0, 0)
        white = Vector3(1, 1, 1)

        if self.state is GameState.TITLE:
            self.title_text.create(renderer, "ALIEN MOB", red)
            self.title_text.draw(renderer, 200, 400)

        if self.state is GameState.GAME_OVER:
            self.title_text.create(renderer, "GAME OVER", red)
            self.title_text.draw(renderer, 200, 400)

        if self.state not in (GameState.GAME_OVER, GameState.TITLE):
            self.score_text.create(renderer, f"SCORE  {self.score}", white)
            self.score_text.draw(renderer, 20.0, 20.0)
            self.lives_text.create(renderer, f"LIVES  {self.lives}", white)
            self.lives_text.draw(renderer, float(renderer.width) - 300, 20.0)

        self.scene.draw(renderer)
        get_engine().particle_system.draw(renderer)

    def on_player_dead(self) -> None:
        self.state = GameState.PLAYER_DEAD
        self.state_timer = PLAYER_DEAD_DELAY

    def _start_round(self) -> None:
        engine = get_engine()
        renderer = engine.renderer
        self.scene.remove_all_actors()

        ship = Model(SHIP_POINTS, (0.37, 1.0, 0.16))
        transform = Transform(Vector2(renderer.width * 0.5, renderer.height * 0.5), 0.0, 2.0)
        texture = resources().get(Texture, "blue_01.png", renderer)
        player = Player(transform, model=ship, texture=texture)
        player.speed = 500.0
        player.rotation_rate = 180.0
        player.damping = 0.5
        player.name = "player"
        player.tag = "player"
        self.scene.add_actor(player)

    def _spawn_enemy(self) -> None:
        player = self.scene.get_actor_by_name("player", Player)
        if player is None:
            return
        engine = get_engine()

        shape = Model(ENEMY_POINTS, (1.0, 0.18, 0.18))
        position = player.transform.position + rand.on_unit_circle() * rand.real(200.0, 500.0)
        transform = Transform(position, rand.real(0.0, 360.0), 2.0)
        texture = resources().get(Texture, "large_red_01.png", engine.renderer)
        enemy = Enemy(transform, model=shape, texture=texture)
        enemy.speed = rand.real() * 100 + 100
        enemy.damping = 0.5
        enemy.fire_time = 1.0
        enemy.fire_timer = 1.0
        enemy.name = "enemy"
        enemy.tag = "enemy"
        self.scene.add_actor(enemy)