import pygame
import pytest
from types import SimpleNamespace

from archangel.box import check_collision
from archangel.scene import (
    MAX_ENTITIES,
    TILE_HEIGHT,
    TILE_WIDTH,
    WORLD_BACKGROUND_LAYER,
    WORLD_FOREGROUND_LAYER,
    WORLD_HEIGHT,
    WORLD_LAYERS,
    WORLD_WIDTH,
    Scene,
    World,
)
from archangel.texture import Texture
from archangel.vec2 import Vec2


class RecordingTexture:
    def __init__(self, name, cell_width=16, cell_height=16):
        self.name = name
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.calls = []

    def render_cell(self, context, x, y, cell_id):
        self.calls.append((x, y, cell_id))
        context.log.append((self.name, x, y, cell_id))


def make_context(width=480, height=272):
    return SimpleNamespace(
        target=pygame.Surface((width, height)),
        internal_width=width,
        internal_height=height,
        log=[],
    )


def test_world_starts_empty():
    world = World()
    assert world.get_tile(0, 0, WORLD_BACKGROUND_LAYER) == -1
    assert world.get_tile(WORLD_WIDTH - 1, WORLD_HEIGHT - 1, WORLD_FOREGROUND_LAYER) == -1


def test_world_tile_round_trip():
    world = World()
    world.set_tile(3, 4, WORLD_FOREGROUND_LAYER, 7)
    assert world.get_tile(3, 4, WORLD_FOREGROUND_LAYER) == 7
    assert world.get_tile(3, 4, WORLD_BACKGROUND_LAYER) == -1


@pytest.mark.parametrize(
    "x, y, layer",
    [(-1, 0, 0), (0, -1, 0), (WORLD_WIDTH, 0, 0), (0, WORLD_HEIGHT, 0), (0, 0, WORLD_LAYERS), (0, 0, -1)],
)
def test_world_out_of_range_is_ignored(x, y, layer):
    world = World()
    world.set_tile(x, y, layer, 5)
    assert world.get_tile(x, y, layer) == -1
    assert list(world.tiles).count(5) == 0


def test_scene_world_tile_delegates():
    scene = Scene()
    scene.set_world_tile(1, 2, WORLD_FOREGROUND_LAYER, 3)
    assert scene.get_world_tile(1, 2, WORLD_FOREGROUND_LAYER) == 3
    assert scene.world.get_tile(1, 2, WORLD_FOREGROUND_LAYER) == 3


def test_add_entity_appends_reset_entity():
    scene = Scene()
    entity = scene.add_entity()
    assert scene.entities == [entity]
    assert entity.type == -1
    assert entity.health == 100
    assert not entity.removed


def test_free_entity_is_removed_and_reused():
    scene = Scene()
    entity = scene.add_entity()
    entity.type = 5
    entity.free = True
    scene.update(0)
    assert entity.removed
    assert not entity.free
    assert scene.num_removed == 1

    reused = scene.add_entity()
    assert reused is entity
    assert reused.type == -1
    assert not reused.removed
    assert scene.num_removed == 0
    assert scene.num_entities == 1


def test_removed_entity_is_not_updated():
    scene = Scene()
    calls = []
    entity = scene.add_entity()
    entity.update = lambda e, s, dt: calls.append(e)
    entity.free = True
    scene.update(10)
    assert calls == []


def test_add_entity_when_full_raises():
    scene = Scene()
    for _ in range(MAX_ENTITIES):
        scene.add_entity()
    with pytest.raises(RuntimeError):
        scene.add_entity()


def test_search_by_entity_type_chains_matches():
    scene = Scene()
    first, middle, last = scene.add_entity(), scene.add_entity(), scene.add_entity()
    first.type, middle.type, last.type = 0, 1, 0
    found = scene.search_by_entity_type(0)
    assert found is last
    assert first.next is last
    assert last.next is None


def test_search_by_entity_type_skips_removed_and_missing():
    scene = Scene()
    entity = scene.add_entity()
    entity.type = 2
    entity.free = True
    scene.update(0)
    assert scene.search_by_entity_type(2) is None
    assert scene.search_by_entity_type(9) is None


def test_update_advances_tick_and_passes_seconds():
    scene = Scene()
    seen = []
    entity = scene.add_entity()
    entity.update = lambda e, s, dt: seen.append((e, s, dt))
    scene.update(250)
    scene.update(50)
    assert scene.tick == 300
    assert seen[0][0] is entity and seen[0][1] is scene
    assert seen[0][2] == pytest.approx(0.25)


def test_entity_moves_by_velocity():
    scene = Scene()
    entity = scene.add_entity()
    entity.velocity = Vec2(40.0, -20.0)
    scene.update(1000)
    assert entity.position.x == pytest.approx(entity.velocity.x)
    assert entity.position.y == pytest.approx(entity.velocity.y)


def test_think_runs_only_after_next_think():
    scene = Scene()
    calls = []
    entity = scene.add_entity()
    entity.next_think = 100
    entity.think = lambda e, s: calls.append(s.tick)
    scene.update(100)
    assert calls == []
    scene.update(1)
    assert calls == [101]


def test_entity_lands_on_world_tile():
    scene = Scene()
    scene.world.collision_layer = 1
    scene.set_world_tile(0, 6, WORLD_FOREGROUND_LAYER, 0)
    hits = []
    entity = scene.add_entity()
    entity.collision_mask = 1
    entity.hitbox_size = Vec2(16.0, 16.0)
    entity.position = Vec2(0.0, 70.0)
    entity.velocity = Vec2(0.0, 100.0)
    entity.on_collision = lambda e, other, s: hits.append(other)

    scene.update(200)

    assert entity.velocity.y == 0.0
    assert entity.position.x == 0.0
    assert entity.position.y + entity.hitbox_size.y < 6 * TILE_HEIGHT
    assert hits == [None]
    assert not scene.check_collision_entity_world(entity)


def test_world_collision_requires_matching_mask():
    scene = Scene()
    scene.world.collision_layer = 1
    scene.set_world_tile(0, 0, WORLD_FOREGROUND_LAYER, 0)
    entity = scene.add_entity()
    entity.hitbox_size = Vec2(8.0, 8.0)
    entity.collision_mask = 2
    assert not scene.check_collision_entity_world(entity)
    entity.collision_mask = 1
    assert scene.check_collision_entity_world(entity)


def test_background_tiles_do_not_collide():
    scene = Scene()
    scene.world.collision_layer = 1
    scene.set_world_tile(0, 0, WORLD_BACKGROUND_LAYER, 0)
    entity = scene.add_entity()
    entity.hitbox_size = Vec2(8.0, 8.0)
    entity.collision_mask = 1
    assert not scene.check_collision_entity_world(entity)


def test_masked_entities_are_separated_and_both_notified():
    scene = Scene()
    calls = []
    a, b = scene.add_entity(), scene.add_entity()
    a.position, a.hitbox_size = Vec2(0.0, 0.0), Vec2(10.0, 10.0)
    b.position, b.hitbox_size = Vec2(5.0, 0.0), Vec2(10.0, 10.0)
    a.velocity = Vec2(1.0, 1.0)
    a.collision_mask = 1
    b.collision_layer = 1
    a.on_collision = lambda e, o, s: calls.append((e, o))
    b.on_collision = lambda e, o, s: calls.append((e, o))

    scene.update(0)

    assert a.velocity.x == 0.0
    assert a.velocity.y == 1.0
    assert a.position.x < 0.0
    assert b.position.x == 5.0
    assert not check_collision(a.position, a.hitbox_size, b.position, b.hitbox_size)
    assert calls == [(a, b), (b, a)]


def test_trigger_only_notifies_current_without_moving():
    scene = Scene()
    calls = []
    a, b = scene.add_entity(), scene.add_entity()
    a.hitbox_size = Vec2(10.0, 10.0)
    b.position, b.hitbox_size = Vec2(5.0, 0.0), Vec2(10.0, 10.0)
    a.collision_trigger = 2
    b.collision_layer = 2
    a.on_collision = lambda e, o, s: calls.append((e, o))
    b.on_collision = lambda e, o, s: calls.append((e, o))

    scene.update(0)

    assert calls == [(a, b)]
    assert a.position == Vec2(0.0, 0.0)
    assert b.position == Vec2(5.0, 0.0)


def test_solve_pushes_other_when_entity_would_hit_world():
    scene = Scene()
    scene.world.collision_layer = 1
    scene.set_world_tile(0, 0, WORLD_FOREGROUND_LAYER, 0)
    a, b = scene.add_entity(), scene.add_entity()
    a.position, a.hitbox_size = Vec2(16.0, 0.0), Vec2(10.0, 10.0)
    b.position, b.hitbox_size = Vec2(20.0, 0.0), Vec2(10.0, 10.0)
    a.collision_mask = 1
    b.velocity = Vec2(3.0, 3.0)

    scene.solve_entity_collision(a, b)

    assert a.position == Vec2(16.0, 0.0)
    assert b.position.x > a.position.x + a.hitbox_size.x
    assert b.velocity.x == 0.0
    assert b.velocity.y == 3.0
    assert not check_collision(a.position, a.hitbox_size, b.position, b.hitbox_size)


def test_render_order_and_camera():
    scene = Scene()
    context = make_context()
    tiles = RecordingTexture("tiles")
    sprite = RecordingTexture("sprite")
    scene.world.texture = tiles
    scene.set_world_tile(2, 3, WORLD_BACKGROUND_LAYER, 4)
    scene.set_world_tile(2, 3, WORLD_FOREGROUND_LAYER, 5)
    scene.camera = Vec2(float(TILE_WIDTH), 0.0)
    entity = scene.add_entity()
    entity.texture = sprite
    entity.position = Vec2(50.7, 20.2)
    entity.cell = 3

    scene.render(context)

    assert context.log == [
        ("tiles", TILE_WIDTH, 3 * TILE_HEIGHT, 4),
        ("sprite", 34, 20, 3),
        ("tiles", TILE_WIDTH, 3 * TILE_HEIGHT, 5),
    ]


def test_hud_entity_ignores_camera_and_offscreen_is_skipped():
    scene = Scene()
    context = make_context()
    sprite = RecordingTexture("sprite")
    scene.camera = Vec2(100.0, 0.0)
    hud = scene.add_entity()
    hud.texture = sprite
    hud.hud_element = True
    hud.position = Vec2(10.0, 10.0)
    hidden = scene.add_entity()
    hidden.texture = sprite
    hidden.position = Vec2(1000.0, 10.0)
    offset = scene.add_entity()
    offset.texture = sprite
    offset.position = Vec2(110.0, 10.0)
    offset.texture_offset = Vec2(3.0, 4.0)

    scene.render(context)

    assert sprite.calls == [(10, 10, 0), (7, 6, 0)]


def test_render_draws_real_texture_pixels():
    scene = Scene()
    context = make_context()
    surface = pygame.Surface((32, 16))
    surface.fill((255, 0, 0), pygame.Rect(0, 0, 16, 16))
    surface.fill((0, 255, 0), pygame.Rect(16, 0, 16, 16))
    scene.world.texture = Texture(surface, 16, 16)
    scene.set_world_tile(1, 1, WORLD_FOREGROUND_LAYER, 1)
    entity = scene.add_entity()
    entity.texture = Texture(surface, 16, 16)
    entity.position = Vec2(100.0, 100.0)

    scene.render(context)

    assert tuple(context.target.get_at((TILE_WIDTH, TILE_HEIGHT)))[:3] == (0, 255, 0)
    assert tuple(context.target.get_at((100, 100)))[:3] == (255, 0, 0)
    assert tuple(context.target.get_at((0, 0)))[:3] == (0, 0, 0)