"""Keyboard and mouse state with edge detection between frames."""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Sequence, Tuple

from viper.vector import Vector2


class MouseButton(enum.IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


_NO_BUTTONS: Tuple[bool, bool, bool] = (False, False, False)


def _lookup(state: Sequence[bool], index: int) -> bool:
    return bool(state[index]) if 0 <= index < len(state) else False


class InputSystem:
    """Keeps this frame's and the previous frame's input state."""

    def __init__(self) -> None:
        self.initialize()

    def initialize(self) -> None:
        """Reset to an empty state with nothing pressed."""
        self._keys: Tuple[bool, ...] = ()
        self._prev_keys: Tuple[bool, ...] = ()
        self.mouse_position = Vector2(0.0, 0.0)
        self.prev_mouse_position = Vector2(0.0, 0.0)
        self._buttons: Tuple[bool, ...] = _NO_BUTTONS
        self._prev_buttons: Tuple[bool, ...] = _NO_BUTTONS

    def shutdown(self) -> None:
        self.initialize()

    def update(
        self,
        keys: Optional[Iterable[bool]] = None,
        mouse_position: Optional[Sequence[float]] = None,
        mouse_buttons: Optional[Sequence[bool]] = None,
    ) -> None:
        """Advance one frame; state not given is read from pygame."""
        if keys is None or mouse_position is None or mouse_buttons is None:
            import pygame

            if keys is None:
                keys = pygame.key.get_pressed()
            if mouse_position is None:
                mouse_position = pygame.mouse.get_pos()
            if mouse_buttons is None:
                mouse_buttons = pygame.mouse.get_pressed()

        self._prev_keys = self._keys
        self._keys = tuple(bool(k) for k in keys)

        self.prev_mouse_position = self.mouse_position
        x, y = mouse_position
        self.mouse_position = Vector2(float(x), float(y))

        self._prev_buttons = self._buttons
        pressed = tuple(bool(b) for b in list(mouse_buttons)[: len(MouseButton)])
        self._buttons = pressed + _NO_BUTTONS[len(pressed):]

    def key_down(self, key: int) -> bool:
        return _lookup(self._keys, key)

    def prev_key_down(self, key: int) -> bool:
        return _lookup(self._prev_keys, key)

    def key_pressed(self, key: int) -> bool:
        """True only on the frame the key went down."""
        return not self.prev_key_down(key) and self.key_down(key)

    def key_released(self, key: int) -> bool:
        """True only on the frame the key came up."""
        return self.prev_key_down(key) and not self.key_down(key)

    def mouse_button_down(self, button: MouseButton) -> bool:
        return self._buttons[button]

    def prev_mouse_button_down(self, button: MouseButton) -> bool:
        return self._prev_buttons[button]

    def mouse_button_pressed(self, button: MouseButton) -> bool:
        return not self._prev_buttons[button] and self._buttons[button]

    def mouse_button_released(self, button: MouseButton) -> bool:
        return self._prev_buttons[button] and not self._buttons[button]