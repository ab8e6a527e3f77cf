"""The game window and its event pump."""

from __future__ import annotations

from typing import Callable

import pygame

EventCallback = Callable[[pygame.event.Event], int]


class Window:
    """A display window that can switch to desktop fullscreen with F11."""

    def __init__(self, title: str, width: int, height: int) -> None:
        if not pygame.display.get_init():
            pygame.display.init()
        self._windowed_size = (width, height)
        self.surface = pygame.display.set_mode(self._windowed_size)
        pygame.display.set_caption(title)
        self.mouse_coordinate: tuple[int, int] = (-1, -1)
        self.is_fullscreen = False

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def toggle_fullscreen(self) -> None:
        """Switch between the windowed size and desktop fullscreen."""
        if self.is_fullscreen:
            self.surface = pygame.display.set_mode(self._windowed_size)
            self.is_fullscreen = False
        else:
            sizes = pygame.display.get_desktop_sizes()
            size = sizes[0] if sizes else (0, 0)
            self.surface = pygame.display.set_mode(size, pygame.FULLSCREEN)
            self.is_fullscreen = True

    def poll_events(self, callback: EventCallback) -> int:
        """Pass pending events to callback until it returns non-zero.

        F11 toggles fullscreen before the event reaches the callback.
        Events after the one that stopped the loop stay queued.
        """
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return 0
            if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_F11:
                self.toggle_fullscreen()
            result = callback(event)
            if result:
                return result

    def close(self) -> None:
        pygame.display.quit()

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()