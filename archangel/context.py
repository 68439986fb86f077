"""Window, render target and event handling."""

from __future__ import annotations

import pygame


class Context:
    """A window drawn from a fixed-size internal target scaled to fit."""

    def __init__(
        self,
        window_name: str,
        width: int,
        height: int,
        scale: int = 1,
        fps: int = 60,
    ) -> None:
        if width <= 0 or height <= 0 or scale <= 0:
            raise ValueError("width, height and scale must be positive")
        try:
            pygame.display.init()
            pygame.display.set_caption(window_name)
            self.window = pygame.display.set_mode(
                (width * scale, height * scale), pygame.RESIZABLE
            )
        except pygame.error as exc:
            raise RuntimeError(f"failed to create window: {exc}") from exc
        self.internal_width = width
        self.internal_height = height
        self.target = pygame.Surface((width, height))
        self.fps = fps
        self._clock = pygame.time.Clock()
        self.quit = False

    def __enter__(self) -> Context:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def poll_events(self) -> None:
        """Drain pending events, noting a request to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit = True

    def clear_screen(self, r: int, g: int, b: int, a: int = 255) -> None:
        """Fill the render target with one colour."""
        self.target.fill((r, g, b, a))

    def render_present(self) -> None:
        """Scale the render target to the window and show it."""
        window = pygame.display.get_surface()
        if window is None:
            raise RuntimeError("the window has been closed")
        self.window = window
        scaled = pygame.transform.scale(self.target, window.get_size())
        window.blit(scaled, (0, 0))
        pygame.display.flip()
        if self.fps > 0:
            self._clock.tick(self.fps)

    def close(self) -> None:
        """Close the window and shut the display down."""
        pygame.display.quit()