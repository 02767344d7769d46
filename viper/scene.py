"""A collection of actors updated, collided and drawn together."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Type, TypeVar

from viper.actor import Actor

A = TypeVar("A", bound=Actor)


class Scene:
    """Owns the actors of one game and runs their per-frame work."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self._actors: List[Actor] = []

    @property
    def actors(self) -> Tuple[Actor, ...]:
        return tuple(self._actors)

    def __len__(self) -> int:
        return len(self._actors)

    def update(self, dt: float) -> None:
        """Update actors, drop destroyed ones, then resolve collisions."""
        for actor in self._actors:
            actor.update(dt)

        self._actors[:] = [actor for actor in self._actors if not actor.destroyed]

        for first in self._actors:
            for second in self._actors:
                if first is second or first.destroyed or second.destroyed:
                    continue
                distance = (first.transform.position - second.transform.position).length()
                if distance <= first.texture_radius() + second.texture_radius():
                    first.on_collision(second)
                    second.on_collision(first)

    def draw(self, renderer) -> None:
        for actor in self._actors:
            actor.draw_texture(renderer)

    def add_actor(self, actor: Actor) -> None:
        actor.scene = self
        self._actors.append(actor)

    def remove_all_actors(self) -> None:
        self._actors.clear()

    def get_actor_by_name(self, name: str, kind: Type[A] = Actor) -> Optional[A]:
        """First actor with ``name`` that is an instance of ``kind``."""
        return next(
            (a for a in self._actors if a.name == name and isinstance(a, kind)),
            None,
        )

    def get_actors_by_tag(self, tag: str, kind: Type[A] = Actor) -> List[A]:
        """All actors with ``tag`` that are instances of ``kind``."""
        return [a for a in self._actors if a.tag == tag and isinstance(a, kind)]