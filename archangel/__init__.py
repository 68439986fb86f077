"""A small tile-based 2D platformer engine and demo game built on pygame."""

__version__ = "0.1.0"