"""Sprite sheets split into fixed-size cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from archangel.context import Context


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division that truncates toward zero, with the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


@dataclass
class Texture:
    """An image laid out as a grid of equally sized cells."""

    surface: pygame.Surface
    cell_width: int
    cell_height: int

    def __post_init__(self) -> None:
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell width and height must be positive")

    @classmethod
    def load(cls, filename: str, cell_width: int, cell_height: int) -> Texture:
        """Load an image file; raises OSError if it cannot be read."""
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise OSError(f"failed to load texture: {filename}") from exc
        return cls(surface, cell_width, cell_height)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def num_cells_width(self) -> int:
        return self.width // self.cell_width

    def cell_rect(self, cell_id: int) -> pygame.Rect:
        """The source rectangle of a cell, counted row by row."""
        per_row = self.num_cells_width
        if per_row == 0:
            raise ValueError("texture is narrower than one cell")
        row, column = _trunc_divmod(cell_id, per_row)
        return pygame.Rect(
            column * self.cell_width,
            row * self.cell_height,
            self.cell_width,
            self.cell_height,
        )

    def render_cell(self, context: Context, x: int, y: int, cell_id: int) -> None:
        """Draw one cell onto the context's render target at (x, y)."""
        context.target.blit(self.surface, (int(x), int(y)), self.cell_rect(cell_id))