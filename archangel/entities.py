"""The game's entity kinds: player, bullet, grounder and jumper."""

from __future__ import annotations

import enum
from typing import Optional

from archangel.entity import Entity
from archangel.scene import Scene
from archangel.vec2 import Vec2

GRAVITY = 400.0

KEY_RIGHT = 0
KEY_LEFT = 1
KEY_JUMP = 2
KEY_DOWN = 3
KEY_SHOOT = 4
NUM_KEYS = 5

TEXTURE_CHARACTER = 0
TEXTURE_TILEMAP = 1
TEXTURE_BULLET = 2

BULLET_TIME_ALIVE = 2000
JUMPER_TIME_ON_FLOOR = 800
PLAYER_COYOTE_TIME = 120

PLAYER_SPEED = 80.0
PLAYER_JUMP_SPEED = -200.0
GROUNDER_SPEED = 100.0
JUMPER_JUMP_SPEED = -150.0
JUMPER_AIM_FACTOR = 2.0
CAMERA_Y = -80.0


class EntityType(enum.IntEnum):
    PLAYER = 0
    BULLET = 1
    GROUNDER = 2


NUM_ENTITY_TYPES = len(EntityType)


def _character_body(entity: Entity, scene: Scene) -> None:
    entity.texture = scene.game.get_texture(TEXTURE_CHARACTER)
    entity.texture_offset = Vec2(3.0, 4.0)
    entity.hitbox_size = Vec2(17.0, 19.0)


# Bullet

def _bullet_think(entity: Entity, scene: Scene) -> None:
    entity.free = True


def _bullet_collision(entity: Entity, other: Optional[Entity], scene: Scene) -> None:
    entity.free = True


def create_bullet(scene: Scene) -> Entity:
    """Add a bullet that disappears on impact or after a fixed time."""
    entity = scene.add_entity()
    entity.texture = scene.game.get_texture(TEXTURE_BULLET)
    entity.position.x = 60.0
    entity.velocity.x = 300.0
    entity.texture_offset = Vec2()
    entity.hitbox_size = Vec2(4.0, 4.0)
    entity.collision_mask = 1
    entity.think = _bullet_think
    entity.on_collision = _bullet_collision
    entity.type = EntityType.BULLET
    entity.next_think = scene.tick + BULLET_TIME_ALIVE
    return entity


# Grounder

def _grounder_update(entity: Entity, scene: Scene, dt: float) -> None:
    entity.velocity.y += GRAVITY * dt


def _grounder_collision(entity: Entity, other: Optional[Entity], scene: Scene) -> None:
    if entity.velocity.x != 0.0:
        return
    entity.direction.x *= -1.0
    entity.velocity.x = entity.direction.x * GROUNDER_SPEED


def create_grounder(scene: Scene) -> Entity:
    """Add a walker that turns around whenever it is stopped."""
    entity = scene.add_entity()
    _character_body(entity, scene)
    entity.velocity.x = GROUNDER_SPEED
    entity.position.x = 0.0
    entity.update = _grounder_update
    entity.on_collision = _grounder_collision
    entity.collision_mask = 3
    entity.direction.x = 1.0
    return entity


# Jumper

def _jumper_update(entity: Entity, scene: Scene, dt: float) -> None:
    entity.velocity.y += GRAVITY * dt
    if entity.velocity.y != 0.0:
        entity.direction.y = entity.velocity.y
    if entity.velocity.x != 0.0:
        entity.direction.x = entity.velocity.x
    if entity.target is None:
        entity.target = scene.search_by_entity_type(EntityType.PLAYER)


def _jumper_collision(entity: Entity, other: Optional[Entity], scene: Scene) -> None:
    if entity.velocity.y != 0.0:
        if entity.velocity.x == 0.0:
            entity.velocity.x = entity.direction.x
        return
    if entity.direction.y < 0.0 or entity.can_jump:
        return
    entity.next_think = scene.tick + JUMPER_TIME_ON_FLOOR
    entity.can_jump = True
    entity.velocity.x = 0.0


def _jumper_think(entity: Entity, scene: Scene) -> None:
    if not entity.can_jump:
        return
    entity.can_jump = False
    entity.velocity.y = JUMPER_JUMP_SPEED
    if entity.target is not None:
        entity.velocity.x = (
            entity.target.position.x - entity.position.x
        ) * JUMPER_AIM_FACTOR


def create_jumper(scene: Scene) -> Entity:
    """Add an enemy that rests on the floor, then leaps toward the player."""
    entity = scene.add_entity()
    _character_body(entity, scene)
    entity.velocity.x = 0.0
    entity.position.x = 0.0
    entity.update = _jumper_update
    entity.on_collision = _jumper_collision
    entity.think = _jumper_think
    entity.collision_layer = 8
    entity.collision_mask = 1
    entity.direction.x = 1.0
    entity.can_jump = False
    return entity


# Player

def _player_update(entity: Entity, scene: Scene, dt: float) -> None:
    game = scene.game
    entity.velocity.x = 0.0
    scene.camera.y = CAMERA_Y

    if entity.velocity.y != 0.0:
        if scene.tick - entity.tick_floor > PLAYER_COYOTE_TIME:
            entity.can_jump = False
        entity.direction.y = entity.velocity.y

    entity.velocity.y += GRAVITY * dt

    if game.get_key(KEY_RIGHT):
        entity.velocity.x += PLAYER_SPEED
    if game.get_key(KEY_LEFT):
        entity.velocity.x -= PLAYER_SPEED

    if game.get_key(KEY_JUMP) and entity.can_jump:
        entity.velocity.y = PLAYER_JUMP_SPEED
        entity.can_jump = False

    if game.get_key_down(KEY_SHOOT):
        bullet = create_bullet(scene)
        bullet.position = entity.position.copy()


def _player_collision(entity: Entity, other: Optional[Entity], scene: Scene) -> None:
    if entity.velocity.y != 0.0:
        return
    if entity.direction.y > 0.0:
        entity.can_jump = True
        entity.tick_floor = scene.tick
    else:
        entity.velocity.y = entity.direction.y


def create_player(scene: Scene) -> Entity:
    """Add the keyboard-controlled player."""
    entity = scene.add_entity()
    _character_body(entity, scene)
    entity.update = _player_update
    entity.on_collision = _player_collision
    entity.position.x = 60.0
    entity.collision_layer = 2
    entity.collision_mask = 1
    entity.collision_trigger = 8
    entity.type = EntityType.PLAYER
    return entity