"""The engine that owns all subsystems."""

from __future__ import annotations

from typing import ClassVar, Optional

from viper.audio import AudioSystem
from viper.input import InputSystem
from viper.particles import ParticleSystem
from viper.renderer import Renderer
from viper.timer import Time

PARTICLE_POOL = 5000


class Engine:
    """Holds renderer, input, audio, particles and the frame clock."""

    _instance: ClassVar[Optional["Engine"]] = None

    def __init__(self, renderer=None, audio=None, input=None, particle_system=None,
                 width: int = 1280, height: int = 1024) -> None:
        self.renderer = renderer
        self.audio = audio
        self.input = input
        self.particle_system = particle_system
        self.width = width
        self.height = height
        self.time = Time()

    @classmethod
    def instance(cls) -> "Engine":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def initialize(self) -> bool:
        """Create any subsystem not supplied, then start them all."""
        if self.renderer is None:
            self.renderer = Renderer()
        self.renderer.initialize()
        self.renderer.create_window("Screen", self.width, self.height)
        if self.input is None:
            self.input = InputSystem()
        self.input.initialize()
        if self.audio is None:
            self.audio = AudioSystem()
        self.audio.initialize()
        if self.particle_system is None:
            self.particle_system = ParticleSystem()
        self.particle_system.initialize(PARTICLE_POOL)
        return True

    def shutdown(self) -> None:
        self.particle_system.shutdown()
        self.renderer.shutdown()
        self.input.shutdown()
        self.audio.shutdown()

    def update(self) -> None:
        self.particle_system.update(self.time.delta_time)
        self.time.tick()
        self.input.update()
        self.audio.update()

    def draw(self) -> None:
        """Nothing is drawn by the engine itself."""


def get_engine() -> Engine:
    return Engine.instance()


def get_renderer():
    return get_engine().renderer