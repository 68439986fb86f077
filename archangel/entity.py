"""Game entities and their default state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from archangel.vec2 import Vec2

if TYPE_CHECKING:
    from archangel.texture import Texture

MAX_TIMERS = 4

UpdateFn = Callable[["Entity", Any, float], None]
ThinkFn = Callable[["Entity", Any], None]
CollisionFn = Callable[["Entity", Optional["Entity"], Any], None]


class PauseMode(enum.IntEnum):
    PAUSABLE = 0
    ALWAYS = 1
    WHENPAUSED = 2


@dataclass(eq=False)
class Entity:
    """An object living in a scene.

    ``update`` is called every frame with the elapsed seconds, ``think`` once
    the scene tick passes ``next_think``, and ``on_collision`` when the entity
    hits another one (or the world, in which case ``other`` is None).
    """

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=Vec2)
    hitbox_size: Vec2 = field(default_factory=Vec2)

    health: int = 100
    state: int = 0
    type: int = -1
    pause_mode: PauseMode = PauseMode.PAUSABLE
    next_think: int = 0
    active: bool = True

    collision_layer: int = 0
    collision_mask: int = 0
    collision_trigger: int = 0

    texture: Optional[Texture] = field(default=None, repr=False)
    hud_element: bool = False
    cell: int = 0
    texture_offset: Vec2 = field(default_factory=Vec2)

    update: Optional[UpdateFn] = field(default=None, repr=False)
    think: Optional[ThinkFn] = field(default=None, repr=False)
    on_collision: Optional[CollisionFn] = field(default=None, repr=False)

    target: Optional[Entity] = field(default=None, repr=False)
    child: Optional[Entity] = field(default=None, repr=False)
    parent: Optional[Entity] = field(default=None, repr=False)
    next: Optional[Entity] = field(default=None, repr=False)

    removed: bool = False
    free: bool = False

    can_jump: bool = False
    tick_floor: int = 0
    timers: list[int] = field(default_factory=lambda: [0] * MAX_TIMERS)

    def reset(self) -> None:
        """Restore the default properties for a freshly added entity.

        Direction, cell, pause mode and the game-specific fields are kept.
        """
        self.position = Vec2()
        self.velocity = Vec2()
        self.hitbox_size = Vec2()

        self.health = 100
        self.state = 0
        self.type = -1
        self.next_think = 0
        self.active = True

        self.collision_layer = 0
        self.collision_mask = 0
        self.collision_trigger = 0

        self.texture = None
        self.hud_element = False
        self.texture_offset = Vec2()

        self.update = None
        self.on_collision = None
        self.think = None

        self.target = None
        self.child = None
        self.parent = None
        self.next = None

        self.removed = False
        self.free = False