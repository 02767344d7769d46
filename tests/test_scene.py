from viper.actor import Actor
from viper.scene import Scene
from viper.vector import Transform, Vector2


class FakeTexture:
    def size(self):
        return Vector2(10.0, 10.0)


class Probe(Actor):
    def __init__(self, x=0.0, y=0.0, **kwargs):
        super().__init__(Transform(Vector2(x, y)), texture=FakeTexture(), **kwargs)
        self.hits = []

    def on_collision(self, other):
        self.hits.append(other)


class Ship(Probe):
    pass


class Spawner(Probe):
    def __init__(self):
        super().__init__(5000.0, 5000.0)
        self.spawned = False

    def update(self, dt):
        if not self.spawned:
            self.spawned = True
            self.scene.add_actor(Probe(-5000.0, -5000.0))
        super().update(dt)


class FakeRenderer:
    def __init__(self):
        self.textures = []

    def draw_texture(self, texture, x, y, scale=1.0, angle=0.0):
        self.textures.append((x, y))


def test_add_actor_sets_scene():
    scene = Scene()
    actor = Probe()
    scene.add_actor(actor)
    assert actor.scene is scene
    assert scene.actors == (actor,)


def test_scene_keeps_game():
    marker = object()
    assert Scene(marker).game is marker


def test_close_actors_collide_both_ways():
    scene = Scene()
    a, b = Probe(0.0, 0.0), Probe(1.0, 0.0)
    scene.add_actor(a)
    scene.add_actor(b)
    scene.update(0.0)
    assert a.hits == [b, b]
    assert b.hits == [a, a]


def test_far_actors_do_not_collide():
    scene = Scene()
    a, b = Probe(0.0, 0.0), Probe(1000.0, 0.0)
    scene.add_actor(a)
    scene.add_actor(b)
    scene.update(0.0)
    assert a.hits == []
    assert b.hits == []


def test_destroyed_actors_are_removed():
    scene = Scene()
    doomed, kept = Probe(0.0, 0.0), Probe(500.0, 0.0)
    doomed.lifespan = 0.1
    scene.add_actor(doomed)
    scene.add_actor(kept)
    scene.update(1.0)
    assert scene.actors == (kept,)
    assert kept.hits == []


def test_actors_added_during_update_are_kept():
    scene = Scene()
    scene.add_actor(Spawner())
    scene.update(0.0)
    assert len(scene) == 2


def test_remove_all_actors():
    scene = Scene()
    scene.add_actor(Probe())
    scene.add_actor(Probe(100.0, 0.0))
    scene.remove_all_actors()
    assert len(scene) == 0


def test_get_actor_by_name_filters_by_kind():
    scene = Scene()
    plain = Probe()
    plain.name = "player"
    ship = Ship(300.0, 0.0)
    ship.name = "player"
    scene.add_actor(plain)
    scene.add_actor(ship)
    assert scene.get_actor_by_name("player") is plain
    assert scene.get_actor_by_name("player", Ship) is ship
    assert scene.get_actor_by_name("missing") is None


def test_get_actors_by_tag():
    scene = Scene()
    first, second, other = Probe(), Ship(200.0, 0.0), Probe(400.0, 0.0)
    first.tag = second.tag = "enemy"
    other.tag = "player"
    for actor in (first, second, other):
        scene.add_actor(actor)
    assert scene.get_actors_by_tag("enemy") == [first, second]
    assert scene.get_actors_by_tag("enemy", Ship) == [second]
    assert scene.get_actors_by_tag("nobody") == []


def test_draw_draws_every_actor_texture():
    scene = Scene()
    scene.add_actor(Probe(1.0, 2.0))
    scene.add_actor(Probe(300.0, 400.0))
    renderer = FakeRenderer()
    scene.draw(renderer)
    assert renderer.textures == [(1.0, 2.0), (300.0, 400.0)]