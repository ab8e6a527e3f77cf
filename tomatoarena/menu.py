"""The start menu: server address entry and play and exit buttons."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

import pygame

from tomatoarena.protocol import get_logger
from tomatoarena.ui import Button, Canvas, Element, Text

DEFAULT_FONT_PATH = "assets/fonts/sans.ttf"
DEFAULT_BACKGROUND_PATH = "assets/images/tomario.png"
DEFAULT_IP = "127.0.0.1"
DEFAULT_PORT = "3030"
IP_MAX_LENGTH = 15
PORT_MAX_LENGTH = 5
DISPLAY_MAX_LENGTH = 31
FONT_SIZE = 24

BUTTON_COLOR = (100, 150, 255, 255)
BUTTON_HOVER_COLOR = (255, 100, 100, 255)
TEXT_COLOR = (255, 255, 255, 255)
BAR_COLOR = (100, 150, 255, 255)
PLAY_RECT = (290, 300, 200, 50)
EXIT_RECT = (290, 400, 200, 50)
IP_TEXT_POSITION = (300, 175)
PORT_TEXT_POSITION = (300, 225)
IP_BAR_RECT = (190, 170, 400, 40)
PORT_BAR_RECT = (190, 220, 400, 40)

# Values of Menu.active: which field receives typed text.
FIELD_NONE = 0
FIELD_IP = 1
FIELD_PORT = 2
FIELD_EXIT = -1

log = get_logger("tomatoarena.menu")


class MenuAction(IntEnum):
    """What the game should do after a menu event."""

    EXIT = -1
    NONE = 0
    PLAY = 1


def load_image(path: Union[str, Path]) -> Optional[pygame.Surface]:
    """Load an image, or return None and log a warning when it cannot be read."""
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        log.warning("image error: %s", exc)
        return None


def _contains(rect: pygame.Rect, point: tuple[int, int]) -> bool:
    x, y = point
    return rect.left <= x <= rect.right and rect.top <= y <= rect.bottom


class Menu:
    """The screen shown before joining a server."""

    def __init__(
        self,
        surface: pygame.Surface,
        font_path: Optional[str] = DEFAULT_FONT_PATH,
        background_path: Optional[Union[str, Path]] = DEFAULT_BACKGROUND_PATH,
    ) -> None:
        self.surface = surface
        self.canvas = Canvas()
        self.background = (
            load_image(background_path) if background_path is not None else None
        )
        font = pygame.font.Font(font_path, FONT_SIZE)

        self.play_button = Button(
            surface, "Play Game", font, BUTTON_COLOR, BUTTON_HOVER_COLOR, PLAY_RECT
        )
        self.exit_button = Button(
            surface, "Exit Game", font, BUTTON_COLOR, BUTTON_HOVER_COLOR, EXIT_RECT
        )

        self.ip_address = DEFAULT_IP
        self.port = DEFAULT_PORT

        self.ip_text = Text(surface, f"IP Address: {DEFAULT_IP}", font_path, FONT_SIZE)
        self.ip_text.color = TEXT_COLOR
        self.ip_text.move_to(IP_TEXT_POSITION)

        self.port_text = Text(surface, f"Port: {DEFAULT_PORT}", font_path, FONT_SIZE)
        self.port_text.color = TEXT_COLOR
        self.port_text.move_to(PORT_TEXT_POSITION)

        self.canvas.add(self.play_button.element)
        self.canvas.add(self.exit_button.element)
        self.canvas.add(self.ip_element)
        self.canvas.add(self.port_element)

        self.active = FIELD_NONE

    @property
    def ip_element(self) -> Element:
        return self.ip_text.element

    @property
    def port_element(self) -> Element:
        return self.port_text.element

    def render(self) -> None:
        """Draw the background, the address fields and the buttons."""
        self.surface.fill((0, 0, 0))
        if self.background is not None:
            scaled = pygame.transform.scale(self.background, self.surface.get_size())
            self.surface.blit(scaled, (0, 0))

        self.surface.fill(BAR_COLOR, pygame.Rect(IP_BAR_RECT))
        self.surface.fill(BAR_COLOR, pygame.Rect(PORT_BAR_RECT))

        self.ip_text.text = f"IP Address: {self.ip_address}"[:DISPLAY_MAX_LENGTH]
        self.port_text.text = f"Port: {self.port}"[:DISPLAY_MAX_LENGTH]

        self.canvas.render()

    def handle_event(self, event: pygame.event.Event) -> MenuAction:
        """Feed one event to the menu and report the resulting action."""
        if self.play_button.handle_event(event):
            self.active = FIELD_IP
            return MenuAction.PLAY
        if self.exit_button.handle_event(event):
            self.active = FIELD_EXIT
            return MenuAction.EXIT

        if event.type == pygame.MOUSEBUTTONDOWN:
            if _contains(self.ip_element.rect, event.pos):
                self.active = FIELD_IP
            elif _contains(self.port_element.rect, event.pos):
                self.active = FIELD_PORT
        elif event.type == pygame.TEXTINPUT:
            if self.active == FIELD_IP and len(self.ip_address) < IP_MAX_LENGTH:
                self.ip_address = (self.ip_address + event.text)[:IP_MAX_LENGTH]
            elif self.active == FIELD_PORT and len(self.port) < PORT_MAX_LENGTH:
                self.port = (self.port + event.text)[:PORT_MAX_LENGTH]
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            if self.active == FIELD_IP and self.ip_address:
                self.ip_address = self.ip_address[:-1]
            elif self.active == FIELD_PORT and self.port:
                self.port = self.port[:-1]
        return MenuAction.NONE