"""Start the game with the demo level."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from archangel.context import Context
from archangel.entities import (
    KEY_DOWN,
    KEY_JUMP,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SHOOT,
    NUM_KEYS,
    TEXTURE_BULLET,
    TEXTURE_CHARACTER,
    TEXTURE_TILEMAP,
    create_jumper,
    create_player,
)
from archangel.game import Game
from archangel.scene import WORLD_FOREGROUND_LAYER, Scene
from archangel.texture import Texture

WINDOW_NAME = "game"
INTERNAL_WIDTH = 480
INTERNAL_HEIGHT = 272
WINDOW_SCALE = 3

_TEXTURES = (
    (TEXTURE_CHARACTER, "character.png", 24, 24),
    (TEXTURE_TILEMAP, "tilemap.png", 16, 16),
    (TEXTURE_BULLET, "res/entities/bullet.png", 4, 4),
)

_KEY_BINDINGS = (
    (KEY_RIGHT, pygame.K_d),
    (KEY_LEFT, pygame.K_a),
    (KEY_JUMP, pygame.K_w),
    (KEY_DOWN, pygame.K_s),
    (KEY_SHOOT, pygame.K_j),
)

_FLOOR_ROW = 6
_FLOOR_LENGTH = 20
_PILLARS = ((0, 5), (10, 5), (19, 5))


def build_level(scene: Scene) -> None:
    """Populate the scene with the player, a jumper and the demo floor."""
    scene.world.collision_layer = 1
    if scene.game is not None:
        scene.world.texture = scene.game.get_texture(TEXTURE_TILEMAP)

    create_player(scene)
    create_jumper(scene)

    for x in range(_FLOOR_LENGTH):
        scene.set_world_tile(x, _FLOOR_ROW, WORLD_FOREGROUND_LAYER, 0)
    for x, y in _PILLARS:
        scene.set_world_tile(x, y, WORLD_FOREGROUND_LAYER, 0)


def _load_textures(game: Game, root: Path) -> None:
    for slot, name, cell_width, cell_height in _TEXTURES:
        game.set_texture(slot, Texture.load(str(root / name), cell_width, cell_height))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="archangel", description="Run the game.")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="directory holding the image files",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        try:
            context = Context(WINDOW_NAME, INTERNAL_WIDTH, INTERNAL_HEIGHT, WINDOW_SCALE)
        except RuntimeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

        with context:
            game = Game(context)
            scene = Scene(game)
            game.set_scene(scene)

            game.set_up_input_handler(NUM_KEYS)
            for key_id, scancode in _KEY_BINDINGS:
                game.bind_key(key_id, scancode)

            try:
                _load_textures(game, args.root)
            except OSError as exc:
                print(exc, file=sys.stderr)
                return 1

            build_level(scene)
            game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())