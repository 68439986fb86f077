"""Axis-aligned box overlap tests and separation."""

from __future__ import annotations

import enum

from archangel.vec2 import Vec2

_NO_OVERLAP = 9999.0
_PUSH_FACTOR = 1.01


class Axis(enum.Enum):
    """The axis along which a collision was resolved."""

    X = "x"
    Y = "y"


def check_collision(a_pos: Vec2, a_size: Vec2, b_pos: Vec2, b_size: Vec2) -> bool:
    """Return True if the two boxes overlap or touch."""
    return not (
        a_pos.x + a_size.x < b_pos.x
        or a_pos.y + a_size.y < b_pos.y
        or b_pos.x + b_size.x < a_pos.x
        or b_pos.y + b_size.y < a_pos.y
    )


def _push(a_start: float, a_len: float, b_start: float, b_len: float) -> float:
    a_end = a_start + a_len
    b_end = b_start + b_len
    if a_start < b_end and a_end > b_end:
        return b_end - a_start
    if a_end > b_start and a_start < b_start:
        return b_start - a_end
    return _NO_OVERLAP


def solve_collision(
    a_pos: Vec2, a_size: Vec2, b_pos: Vec2, b_size: Vec2
) -> Axis | None:
    """Push box A out of box B along the shallower axis.

    ``a_pos`` is modified in place. Returns the axis that was corrected,
    or None if the boxes do not collide.
    """
    if not check_collision(a_pos, a_size, b_pos, b_size):
        return None

    dir_x = _push(a_pos.x, a_size.x, b_pos.x, b_size.x) * _PUSH_FACTOR
    dir_y = _push(a_pos.y, a_size.y, b_pos.y, b_size.y) * _PUSH_FACTOR

    if abs(dir_x) < abs(dir_y):
        a_pos.x += dir_x
        return Axis.X
    a_pos.y += dir_y
    return Axis.Y