"""The top-level game: resources, input and the main loop."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

import pygame

from archangel.input_handler import InputHandler

if TYPE_CHECKING:
    from archangel.scene import Scene
    from archangel.texture import Texture

MAX_TEXTURES = 256

_TICK_MASK = 0xFFFFFFFF


class Game:
    """Owns the context, the texture slots, the input handler and the active scene.

    ``ticks`` returns the current time in milliseconds and ``keyboard`` the
    pressed state of every key; they default to pygame's clock and keyboard.
    """

    def __init__(
        self,
        context: Any,
        *,
        ticks: Optional[Callable[[], int]] = None,
        keyboard: Optional[Callable[[], Sequence[bool]]] = None,
    ) -> None:
        self.context = context
        self.main_scene: Optional[Scene] = None
        self.textures: list[Optional[Texture]] = [None] * MAX_TEXTURES
        self.input_handler = InputHandler(0)
        self.tick = 0
        self._ticks = ticks if ticks is not None else pygame.time.get_ticks
        self._keyboard = keyboard if keyboard is not None else pygame.key.get_pressed

    def set_scene(self, scene: Scene) -> None:
        self.main_scene = scene

    def set_up_input_handler(self, keys_used: int) -> None:
        """Start tracking ``keys_used`` logical keys, all released."""
        self.input_handler = InputHandler(keys_used)

    def bind_key(self, key_id: int, scancode: int) -> None:
        self.input_handler.bind_key(key_id, scancode)

    def get_key(self, key: int) -> bool:
        return self.input_handler.get_key(key)

    def get_key_down(self, key: int) -> bool:
        return self.input_handler.get_key_down(key)

    def get_key_up(self, key: int) -> bool:
        return self.input_handler.get_key_up(key)

    def get_texture(self, index: int) -> Optional[Texture]:
        """The texture in a slot, or None if nothing is loaded there."""
        return self.textures[index]

    def set_texture(self, index: int, texture: Texture) -> None:
        if not 0 <= index < MAX_TEXTURES:
            raise IndexError(f"texture slot {index} out of range")
        self.textures[index] = texture

    def _scene(self) -> Scene:
        if self.main_scene is None:
            raise RuntimeError("no scene has been set")
        return self.main_scene

    def update(self, tick: int, keys: Sequence[bool]) -> None:
        """Advance input and the scene to the time ``tick`` in milliseconds."""
        scene = self._scene()
        delta_tick = (tick - self.tick) & _TICK_MASK
        self.tick = tick
        self.input_handler.update(keys, tick)
        scene.update(delta_tick)

    def render(self) -> None:
        scene = self._scene()
        self.context.clear_screen(0x00, 0x00, 0x00, 0xFF)
        scene.render(self.context)
        self.context.render_present()

    def loop(self) -> None:
        """Run one frame: events, update, render."""
        self.context.poll_events()
        self.update(self._ticks(), self._keyboard())
        self.render()

    def run(self) -> None:
        """Run frames until the context asks to quit."""
        while not self.context.quit:
            self.loop()