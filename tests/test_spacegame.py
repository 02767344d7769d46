import os
import shutil

import pygame
import pytest

from viper import rand
from viper.audio import AudioSystem
from viper.enemy import Enemy
from viper.engine import get_engine
from viper.gamedata import GAME_FONT, GAME_FONT2
from viper.input import InputSystem
from viper.particles import ParticleSystem
from viper.player import Player
from viper.renderer import Renderer
from viper.rocket import Rocket
from viper.spacegame import GameState, SpaceGame

WIDTH, HEIGHT = 800, 600


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


class FakeBackend:
    def __init__(self):
        self.sounds = {}

    def init(self, channels):
        self.channels = channels

    def quit(self):
        pass

    def load(self, filename):
        sound = FakeSound()
        self.sounds[filename] = sound
        return sound


@pytest.fixture
def world(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    for name in ("blue_01.png", "large_red_01.png", "blue_rocket.png", "red_rocket.png"):
        pygame.image.save(pygame.Surface((16, 16)), str(tmp_path / name))
    font_src = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    for name in (GAME_FONT, GAME_FONT2):
        shutil.copy(font_src, tmp_path / name)
    monkeypatch.chdir(tmp_path)

    backend = FakeBackend()
    audio = AudioSystem(backend=backend)
    audio.initialize()
    particles = ParticleSystem()
    particles.initialize(100)

    engine = get_engine()
    monkeypatch.setattr(engine, "renderer", Renderer(pygame.Surface((WIDTH, HEIGHT))))
    monkeypatch.setattr(engine, "audio", audio)
    monkeypatch.setattr(engine, "input", InputSystem())
    monkeypatch.setattr(engine, "particle_system", particles)
    monkeypatch.setattr(engine, "width", WIDTH)
    monkeypatch.setattr(engine, "height", HEIGHT)
    rand.seed(1)

    game = SpaceGame()
    game.initialize()
    return engine, game, backend


def press(engine, key):
    keys = [False] * 512
    keys[key] = True
    engine.input.update(keys, (0, 0), (False, False, False))


def advance_to_game(engine, game):
    game.update(0.0)
    press(engine, pygame.K_SPACE)
    game.update(0.0)
    game.update(0.0)
    game.update(0.0)


def test_starts_in_initialize_and_moves_to_title(world):
    engine, game, _ = world
    assert game.state is GameState.INITIALIZE
    game.update(0.0)
    assert game.state is GameState.TITLE


def test_title_waits_for_space(world):
    engine, game, _ = world
    game.update(0.0)
    game.update(0.0)
    assert game.state is GameState.TITLE
    press(engine, pygame.K_SPACE)
    game.update(0.0)
    assert game.state is GameState.START_GAME


def test_start_game_resets_score_and_lives(world):
    engine, game, _ = world
    game.score = 1234
    game.update(0.0)
    press(engine, pygame.K_SPACE)
    game.update(0.0)
    game.update(0.0)
    assert game.score == 0
    assert game.lives == 3
    assert game.state is GameState.START_ROUND


def test_start_round_places_player_in_centre(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    assert game.state is GameState.GAME
    player = game.scene.get_actor_by_name("player", Player)
    assert player is not None
    assert player.tag == "player"
    assert player.speed == 500.0
    assert player.damping == 0.5
    assert player.transform.scale == 2.0
    assert player.transform.position.x == pytest.approx(WIDTH * 0.5)
    assert player.transform.position.y == pytest.approx(HEIGHT * 0.5)


def test_game_state_spawns_enemy_and_resets_timer(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    game.update(0.0)
    enemies = game.scene.get_actors_by_tag("enemy", Enemy)
    assert len(enemies) == 1
    enemy = enemies[0]
    assert enemy.name == "enemy"
    assert 100 <= enemy.speed <= 200
    assert enemy.fire_time == 1.0
    assert enemy.damping == 0.5
    assert game.enemy_spawn_timer == 4.0


def test_enemy_not_spawned_before_timer_runs_out(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    game.update(0.0)
    game.update(1.0)
    assert len(game.scene.get_actors_by_tag("enemy")) == 1
    assert game.enemy_spawn_timer == pytest.approx(3.0)


def test_no_enemy_without_player(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    game.scene.remove_all_actors()
    game.update(0.0)
    assert len(game.scene) == 0
    assert game.enemy_spawn_timer == 4.0


def test_player_collision_reports_death(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    player = game.scene.get_actor_by_name("player", Player)
    rocket = Rocket()
    rocket.tag = "enemy"
    player.on_collision(rocket)
    assert player.destroyed
    assert game.state is GameState.PLAYER_DEAD
    assert game.state_timer == 2.0


def test_player_dead_waits_then_starts_new_round(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    game.on_player_dead()
    game.update(1.0)
    assert game.state is GameState.PLAYER_DEAD
    assert game.lives == 3
    game.update(1.0)
    assert game.lives == 2
    assert game.state is GameState.START_ROUND


def test_last_life_leads_to_game_over_and_back_to_title(world):
    engine, game, backend = world
    engine.audio.add_sound("death.wav", "death")
    advance_to_game(engine, game)
    game.lives = 1
    game.on_player_dead()
    game.update(2.0)
    assert game.lives == 0
    assert game.state is GameState.GAME_OVER
    assert game.state_timer == 3.0
    assert not game.played_death_sound

    game.update(1.0)
    game.update(1.0)
    assert backend.sounds["death.wav"].plays == 1
    assert game.state is GameState.GAME_OVER
    game.update(1.0)
    assert game.state is GameState.TITLE


def test_add_points_from_enemy_kill(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    game.update(0.0)
    enemy = game.scene.get_actors_by_tag("enemy", Enemy)[0]
    rocket = Rocket()
    rocket.tag = "player"
    enemy.on_collision(rocket)
    assert game.score == 100
    assert enemy.destroyed


def test_title_draw_puts_red_text_on_screen(world):
    engine, game, _ = world
    game.update(0.0)
    surface = engine.renderer.surface
    surface.fill((0, 0, 0))
    game.draw(engine.renderer)
    r, g, b, _ = pygame.transform.average_color(surface, pygame.Rect(200, 400, 600, 200))
    assert r > 0
    assert g == 0 and b == 0


def test_game_draw_shows_score_and_lives(world):
    engine, game, _ = world
    advance_to_game(engine, game)
    surface = engine.renderer.surface
    surface.fill((0, 0, 0))
    game.draw(engine.renderer)
    score = pygame.transform.average_color(surface, pygame.Rect(20, 20, 200, 40))
    lives = pygame.transform.average_color(surface, pygame.Rect(WIDTH - 300, 20, 200, 40))
    assert score[0] > 0 and score[1] > 0 and score[2] > 0
    assert lives[0] > 0 and lives[1] > 0 and lives[2] > 0