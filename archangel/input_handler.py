"""Keyboard state tracking with press and release edge detection."""

from __future__ import annotations

from typing import Sequence

MAX_KEYS = 64


class InputHandler:
    """Maps logical key ids to scancodes and tracks their state per tick."""

    def __init__(self, keys_used: int = 0) -> None:
        if not 0 <= keys_used <= MAX_KEYS:
            raise ValueError(f"keys_used must be between 0 and {MAX_KEYS}")
        self.keys_used = keys_used
        self.key_mapping = [0] * MAX_KEYS
        self.key_state = [False] * MAX_KEYS
        self.key_down_tick = [0] * MAX_KEYS
        self.key_up_tick = [0] * MAX_KEYS
        self.current_tick = 0

    def bind_key(self, key_id: int, scancode: int) -> None:
        """Bind the logical key ``key_id`` to a keyboard scancode."""
        if not 0 <= key_id < MAX_KEYS:
            raise IndexError(f"key id {key_id} out of range")
        self.key_mapping[key_id] = scancode

    def update(self, keys: Sequence[bool], tick: int) -> None:
        """Refresh key states from ``keys``, indexed by scancode, at ``tick``."""
        self.current_tick = tick
        for i in range(self.keys_used):
            pressed = bool(keys[self.key_mapping[i]])
            was_pressed = self.key_state[i]
            if pressed and not was_pressed:
                self.key_down_tick[i] = tick
            elif was_pressed and not pressed:
                self.key_up_tick[i] = tick
            self.key_state[i] = pressed

    def get_key(self, key: int) -> bool:
        """Whether the key is currently held."""
        return self.key_state[key]

    def get_key_down(self, key: int) -> bool:
        """Whether the key went down on the current tick."""
        return self.key_down_tick[key] == self.current_tick

    def get_key_up(self, key: int) -> bool:
        """Whether the key was released on the current tick."""
        return self.key_up_tick[key] == self.current_tick