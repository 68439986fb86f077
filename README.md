# archangel

A small tile-based 2D platformer engine with a demo game, built on pygame.

The engine draws to a fixed internal resolution (480×272 in the demo, shown in
a resizable window three times that size) and keeps a two-layer tile world
(background and foreground), a list of entities with update, think and
collision callbacks, axis-aligned box collision against the world and between
entities, and a keyboard input handler that reports held keys as well as
press and release edges.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing the demo

```
archangel
```

The demo builds a short floor of tiles with a few obstacles, a player and a
jumping enemy that rests on the floor and then leaps towards the player.

The sprite sheets `character.png`, `tilemap.png` and
`res/entities/bullet.png` are read from the current directory, or from another
directory given with `--root`:

```
archangel --root path/to/images
```

If a window cannot be created or an image cannot be loaded, the command prints
the error and exits with status 1.

Controls:

| Key | Action     |
|-----|------------|
| D   | move right |
| A   | move left  |
| W   | jump       |
| J   | shoot      |

S is bound as well but does nothing in the demo. Close the window to quit.

## Using the engine

- `archangel.vec2` – `Vec2`, a mutable 2D vector with `add`, `sub`, `mul`,
  `div`, `dot`, `length_sqr`, `length`, `normalize` and `copy`, plus the
  `+`, `-`, `*` and `/` operators. Dividing by zero, or normalising a zero
  vector, raises `ZeroDivisionError`.
- `archangel.box` – `check_collision` tells whether two boxes overlap or
  touch; `solve_collision` pushes the first box out of the second along the
  shallower axis, in place, and returns the `Axis` it moved along (or `None`
  if the boxes do not collide).
- `archangel.memory` – `Memory`, a fixed-size bump allocator: `alloc`,
  `used` and `available`. A full arena raises `MemoryError`.
- `archangel.input_handler` – `InputHandler`: `bind_key` maps a logical key
  to a key code, `update(keys, tick)` reads the pressed states, and
  `get_key`, `get_key_down` and `get_key_up` report held keys and edges on
  the current tick.
- `archangel.texture` – `Texture`, a sprite sheet split into equally sized
  cells: `Texture.load`, `cell_rect` and `render_cell`. `load` raises
  `OSError` when the file cannot be read.
- `archangel.context` – `Context`, the window and its render target:
  `poll_events`, `clear_screen`, `render_present` (capped at 60 frames per
  second by default) and `close`; it is also a context manager.
- `archangel.entity` – `Entity`, with its position, velocity, hitbox,
  collision layers and masks, texture and callbacks, and `reset`; and
  `PauseMode`.
- `archangel.scene` – `Scene` and its tile `World`. `Scene.update(delta_tick)`
  moves entities, resolves collisions with the world and between entities
  and runs their callbacks; `render` draws the background layer, the
  entities and the foreground layer. `add_entity` reuses removed entities
  first and raises `RuntimeError` past 1024 entities.
- `archangel.game` – `Game`, which ties the context, the scene, the input
  handler and 256 texture slots together. `update(tick, keys)` advances one
  step with given input, `loop` runs one frame and `run` loops until the
  window is closed. The clock and keyboard it reads can be replaced through
  the `ticks` and `keyboard` arguments.
- `archangel.entities` – the demo's entities: `create_player`,
  `create_bullet`, `create_grounder` and `create_jumper`, with their
  `EntityType`.
- `archangel.main` – `build_level`, which fills a scene with the demo level,
  and the `main` entry point.

## What it does not do

- There is no sound and no menu; the demo starts straight into its one level.
- Levels are built in code; there is no level file format.
- An entity's `pause_mode`, `health`, `state` and `active` are stored but
  nothing in the engine acts on them.
- The grounder enemy is available through `create_grounder` but is not placed
  in the demo level.