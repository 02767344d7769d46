"""Loadable resources and a cache that shares them by name."""

from __future__ import annotations

import abc
from typing import ClassVar, Dict, Optional, Type, TypeVar

from viper.strings import to_lower


class ResourceError(Exception):
    """A resource could not be loaded or has an unexpected type."""


class Resource(abc.ABC):
    """Something loaded once from a file and then shared."""

    @abc.abstractmethod
    def load(self, name: str, *args) -> None:
        """Load from ``name``; raise on failure."""


R = TypeVar("R", bound=Resource)


class ResourceManager:
    """Caches resources under case-insensitive identifiers."""

    _instance: ClassVar[Optional["ResourceManager"]] = None

    def __init__(self) -> None:
        self._resources: Dict[str, Resource] = {}

    @classmethod
    def instance(cls) -> "ResourceManager":
        """The process-wide manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, kind: Type[R], name: str, *args) -> R:
        """Fetch or load ``name``, using the name itself as identifier."""
        return self.get_with_id(kind, name, name, *args)

    def get_with_id(self, kind: Type[R], resource_id: str, name: str, *args) -> R:
        """Fetch the resource cached as ``resource_id`` or load it from ``name``."""
        key = to_lower(resource_id)
        cached = self._resources.get(key)
        if cached is not None:
            if not isinstance(cached, kind):
                raise ResourceError(f"Resource type mismatch: {key}")
            return cached

        resource = kind()
        try:
            resource.load(name, *args)
        except Exception as exc:
            raise ResourceError(f"Failed to load resource: {name}") from exc

        self._resources[key] = resource
        return resource

    def __contains__(self, resource_id: str) -> bool:
        return to_lower(resource_id) in self._resources

    def __len__(self) -> int:
        return len(self._resources)


def resources() -> ResourceManager:
    """Return the shared resource manager."""
    return ResourceManager.instance()