import pytest

from viper.game import Game


class DemoGame(Game):
    def __init__(self):
        super().__init__()
        self.frames = []

    def initialize(self):
        return True

    def update(self, dt):
        self.frames.append(dt)

    def draw(self, renderer):
        renderer.append(self.score)

    def shutdown(self):
        self.frames.clear()


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


def test_defaults():
    game = DemoGame()
    assert game.lives == 0
    assert game.scene is None
    Game.add_points(game, 5)
    assert game.score == 5


def test_add_points_accumulates():
    game = DemoGame()
    Game.add_points(game, 100)
    Game.add_points(game, 100)
    assert game.score == 200


def test_lives_are_independent_of_points():
    game = DemoGame()
    game.lives = 3
    Game.add_points(game, 10)
    assert (game.lives, game.score) == (3, 10)


def test_draw_sees_added_points():
    game = DemoGame()
    Game.add_points(game, 40)
    target = []
    game.draw(target)
    assert target == [40]