"""A small pygame-based 2D game engine and a space shooter built on it."""

__version__ = "0.1.0"