"""The world grid and the entities living in it."""

from __future__ import annotations

import array
import math
from typing import TYPE_CHECKING, Any, Optional

from archangel.box import Axis, check_collision, solve_collision
from archangel.entity import Entity
from archangel.vec2 import Vec2

if TYPE_CHECKING:
    from archangel.texture import Texture

MAX_ENTITIES = 1024

WORLD_WIDTH = 512
WORLD_HEIGHT = 512
WORLD_LAYERS = 2
WORLD_BACKGROUND_LAYER = 0
WORLD_FOREGROUND_LAYER = 1
WORLD_DATA_SIZE = WORLD_WIDTH * WORLD_HEIGHT * WORLD_LAYERS

TILE_WIDTH = 16
TILE_HEIGHT = 16

EMPTY_TILE = -1

_SNAP_FACTOR = 1.01


def _tile_index(x: int, y: int, layer: int) -> Optional[int]:
    if not (0 <= x < WORLD_WIDTH and 0 <= y < WORLD_HEIGHT and 0 <= layer < WORLD_LAYERS):
        return None
    return x + y * WORLD_WIDTH + layer * WORLD_WIDTH * WORLD_HEIGHT


class World:
    """A layered grid of signed byte tiles; -1 marks an empty cell."""

    def __init__(self) -> None:
        self.tiles = array.array("b", [EMPTY_TILE]) * WORLD_DATA_SIZE
        self.collision_layer = 0
        self.texture: Optional[Texture] = None

    def set_tile(self, x: int, y: int, layer: int, tile_id: int) -> None:
        """Set a tile; coordinates outside the world are ignored."""
        index = _tile_index(x, y, layer)
        if index is not None:
            self.tiles[index] = tile_id

    def get_tile(self, x: int, y: int, layer: int) -> int:
        """Return a tile id, or -1 for empty cells and coordinates outside the world."""
        index = _tile_index(x, y, layer)
        if index is None:
            return EMPTY_TILE
        return self.tiles[index]


class Scene:
    """Entities, a tile world and a camera, advanced tick by tick."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self.world = World()
        self.entities: list[Entity] = []
        self.removed: list[Entity] = []
        self.camera = Vec2()
        self.tick = 0

    @property
    def num_entities(self) -> int:
        return len(self.entities)

    @property
    def num_removed(self) -> int:
        return len(self.removed)

    def update(self, delta_tick: int) -> None:
        """Advance the scene by ``delta_tick`` milliseconds."""
        dt = 0.001 * delta_tick
        self.tick += delta_tick
        self._update_entities(dt)
        self._handle_entity_collision()

    def render(self, context: Any) -> None:
        """Draw the background layer, the entities, then the foreground layer."""
        self._render_world(context, WORLD_BACKGROUND_LAYER)
        self._render_entities(context)
        self._render_world(context, WORLD_FOREGROUND_LAYER)

    def search_by_entity_type(self, entity_type: int) -> Optional[Entity]:
        """Chain the live entities of a type through ``next`` in scene order.

        Returns the last entity of the chain, or None if there is none.
        """
        found: Optional[Entity] = None
        for current in self.entities:
            if current.removed or current.type != entity_type:
                continue
            if found is not None:
                found.next = current
            found = current
            found.next = None
        return found

    def add_entity(self) -> Entity:
        """Return a reset entity, reusing a removed slot when one is free."""
        if self.removed:
            entity = self.removed.pop()
        else:
            if len(self.entities) >= MAX_ENTITIES:
                raise RuntimeError(f"scene is full ({MAX_ENTITIES} entities)")
            entity = Entity()
            self.entities.append(entity)
        entity.reset()
        return entity

    def solve_entity_collision(self, entity: Entity, other: Entity) -> None:
        """Separate two overlapping entities without pushing either into the world."""
        original = entity.position.copy()
        axis = solve_collision(
            entity.position, entity.hitbox_size, other.position, other.hitbox_size
        )

        if not self.check_collision_entity_world(entity):
            self._stop(entity, axis)
            return
        entity.position = original

        original = other.position.copy()
        solve_collision(
            other.position, other.hitbox_size, entity.position, entity.hitbox_size
        )

        if not self.check_collision_entity_world(other):
            self._stop(other, axis)
            return
        other.position = original

    def set_world_tile(self, x: int, y: int, layer: int, tile_id: int) -> None:
        self.world.set_tile(x, y, layer, tile_id)

    def get_world_tile(self, x: int, y: int, layer: int) -> int:
        return self.world.get_tile(x, y, layer)

    def check_collision_entity_world(self, entity: Entity) -> bool:
        """Whether the entity overlaps a solid foreground tile it can collide with."""
        if entity.collision_mask & self.world.collision_layer == 0:
            return False

        start_x = int(entity.position.x / TILE_WIDTH)
        start_y = int(entity.position.y / TILE_HEIGHT)
        size_x = int(entity.hitbox_size.x / TILE_WIDTH) + 1
        size_y = int(entity.hitbox_size.y / TILE_HEIGHT) + 1
        tile_size = Vec2(TILE_WIDTH, TILE_HEIGHT)

        for i in range(start_x, start_x + size_x + 1):
            for j in range(start_y, start_y + size_y + 1):
                if self.world.get_tile(i, j, WORLD_FOREGROUND_LAYER) == EMPTY_TILE:
                    continue
                tile_pos = Vec2(i * TILE_WIDTH, j * TILE_HEIGHT)
                if check_collision(tile_pos, tile_size, entity.position, entity.hitbox_size):
                    return True
        return False

    @staticmethod
    def _stop(entity: Entity, axis: Optional[Axis]) -> None:
        if axis is Axis.X:
            entity.velocity.x = 0.0
        else:
            entity.velocity.y = 0.0

    def _update_entities(self, dt: float) -> None:
        # Entities appended by callbacks are picked up in this same pass.
        for entity in self.entities:
            if entity.free:
                self._remove_entity(entity)
            if entity.removed:
                continue

            found_collision = False
            position, velocity, hitbox = entity.position, entity.velocity, entity.hitbox_size

            position.x += velocity.x * dt
            if self.check_collision_entity_world(entity):
                if velocity.x < 0.0:
                    position.x = math.ceil(position.x / TILE_WIDTH) * TILE_WIDTH
                else:
                    max_x = math.floor((position.x + hitbox.x) / TILE_WIDTH)
                    position.x = max_x * TILE_WIDTH - hitbox.x * _SNAP_FACTOR
                velocity.x = 0.0
                found_collision = True

            position.y += velocity.y * dt
            if self.check_collision_entity_world(entity):
                if velocity.y < 0.0:
                    position.y = math.ceil(position.y / TILE_HEIGHT) * TILE_HEIGHT
                else:
                    max_y = math.floor((position.y + hitbox.y) / TILE_HEIGHT)
                    position.y = max_y * TILE_HEIGHT - hitbox.y * _SNAP_FACTOR
                velocity.y = 0.0
                found_collision = True

            if found_collision and entity.on_collision is not None:
                entity.on_collision(entity, None, self)

            if entity.update is not None:
                entity.update(entity, self, dt)

            if entity.think is not None and self.tick > entity.next_think:
                entity.think(entity, self)

    def _render_entities(self, context: Any) -> None:
        for entity in self.entities:
            if entity.removed or entity.texture is None:
                continue

            start = entity.position - entity.texture_offset
            if not entity.hud_element:
                start = start - self.camera

            end_x = start.x + entity.texture.cell_width
            end_y = start.y + entity.texture.cell_height
            if (
                end_x < 0
                or end_y < 0
                or start.x > context.internal_width
                or start.y > context.internal_height
            ):
                continue

            entity.texture.render_cell(
                context, math.floor(start.x), math.floor(start.y), entity.cell
            )

    def _render_tile(self, context: Any, x: int, y: int, layer: int) -> None:
        texture = self.world.texture
        if texture is None:
            return
        tile_id = self.world.get_tile(x, y, layer)
        if tile_id < 0:
            return
        pos = Vec2(x * TILE_WIDTH, y * TILE_HEIGHT) - self.camera
        texture.render_cell(context, int(pos.x), int(pos.y), tile_id)

    def _render_world(self, context: Any, layer: int) -> None:
        camera_x = int(self.camera.x / TILE_WIDTH)
        camera_y = int(self.camera.y / TILE_HEIGHT)
        # Both axes span the internal width, which covers the usual wide screen.
        span = context.internal_width // TILE_WIDTH + 1
        for i in range(-1, span):
            for j in range(-1, span):
                self._render_tile(context, i + camera_x, j + camera_y, layer)

    def _handle_entity_collision(self) -> None:
        for current in self.entities:
            if current.removed:
                continue
            if current.collision_mask == 0 and current.collision_trigger == 0:
                continue

            for other in self.entities:
                if other is current or other.removed:
                    continue

                mask = current.collision_mask & other.collision_layer
                trigger = current.collision_trigger & other.collision_layer
                if not mask and not trigger:
                    continue

                if not check_collision(
                    current.position, current.hitbox_size, other.position, other.hitbox_size
                ):
                    continue

                if mask:
                    self.solve_entity_collision(current, other)

                if current.on_collision is not None:
                    current.on_collision(current, other, self)

                if other.on_collision is not None and mask:
                    other.on_collision(other, current, self)

    def _remove_entity(self, entity: Entity) -> None:
        entity.free = False
        entity.removed = True
        self.removed.append(entity)