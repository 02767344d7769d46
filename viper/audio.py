"""Named sound effects played through a mixer backend."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

from viper.logger import Logger
from viper.strings import to_lower

MAX_CHANNELS = 32


class AudioError(Exception):
    """The audio device could not be used."""


class AudioBackend(Protocol):
    def init(self, channels: int) -> None: ...

    def quit(self) -> None: ...

    def load(self, filename: str) -> Any: ...


class _MixerBackend:
    """Backend built on pygame's mixer."""

    def init(self, channels: int) -> None:
        import pygame

        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(channels)
        except pygame.error as exc:
            raise AudioError(str(exc)) from exc

    def quit(self) -> None:
        import pygame

        pygame.mixer.quit()

    def load(self, filename: str) -> Any:
        import pygame

        return pygame.mixer.Sound(filename)


class AudioSystem:
    """Loads sounds under case-insensitive names and plays them."""

    def __init__(self, backend: Optional[AudioBackend] = None) -> None:
        self._backend = backend if backend is not None else _MixerBackend()
        self._sounds: Dict[str, Any] = {}
        self._initialized = False

    def _require(self) -> None:
        if not self._initialized:
            raise AudioError("audio system is not initialized")

    def initialize(self) -> None:
        try:
            self._backend.init(MAX_CHANNELS)
        except AudioError:
            raise
        except Exception as exc:
            raise AudioError(str(exc)) from exc
        self._initialized = True

    def shutdown(self) -> None:
        if not self._initialized:
            return
        self._sounds.clear()
        self._backend.quit()
        self._initialized = False

    def update(self) -> None:
        """Per-frame hook; the mixer plays sounds on its own."""
        self._require()

    def add_sound(self, filename: str, name: str = "") -> bool:
        """Load ``filename`` under ``name`` (or the file name); False on failure."""
        self._require()
        key = to_lower(name or filename)
        if key in self._sounds:
            Logger.warning("Audio System : name already exists {}", key)
            return False
        try:
            sound = self._backend.load(filename)
        except Exception as exc:
            Logger.error("Audio System : could not load {}: {}", filename, exc)
            return False
        self._sounds[key] = sound
        return True

    def play_sound(self, name: str) -> bool:
        """Play the sound called ``name``; False if there is none."""
        self._require()
        sound = self._sounds.get(to_lower(name))
        if sound is None:
            Logger.warning("Audio System : name doesn't exist {}", name)
            return False
        try:
            sound.play()
        except Exception as exc:
            Logger.error("Audio System : could not play {}: {}", name, exc)
            return False
        return True

    def __contains__(self, name: str) -> bool:
        return to_lower(name) in self._sounds