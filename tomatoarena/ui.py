"""Screen elements: canvas, text, buttons, health bar and game over screen."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

import pygame

from tomatoarena.entity_list import EntityList

CANVAS_CAPACITY = 256
HEALTH_BAR_RECT = (20, 20, 300, 30)
HEALTH_BAR_WIDTH = 300
HEALTH_BAR_BACKGROUND = (255, 0, 0, 255)
HEALTH_BAR_FOREGROUND = (0, 255, 0, 255)
GAME_OVER_POSITION = (200, 200)
WHITE = (255, 255, 255, 255)

ColorLike = Union[pygame.Color, tuple[int, int, int], tuple[int, int, int, int]]


class Element:
    """A rectangle on screen paired with the component that draws it."""

    def __init__(
        self,
        rect: Union[pygame.Rect, tuple[int, int, int, int]],
        draw: Callable[[Any], None],
        component: Any,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._draw = draw
        self.component = component

    def draw(self) -> None:
        self._draw(self.component)


class Canvas:
    """An ordered collection of elements drawn together."""

    def __init__(self) -> None:
        self.elements = EntityList(CANVAS_CAPACITY)

    def add(self, element: Element) -> None:
        self.elements.add(element)

    def render(self) -> None:
        for element in self.elements:
            element.draw()


class Text:
    """A line of text rendered with a font onto a target surface."""

    def __init__(
        self,
        surface: Optional[pygame.Surface],
        text: str,
        font_path: Optional[str],
        size: int,
    ) -> None:
        self.surface = surface
        self.font_path = font_path
        self._size = size
        self.font = pygame.font.Font(font_path, size)
        self._color = pygame.Color(0, 0, 0, 0)
        self._text = text
        self.texture: Optional[pygame.Surface] = None
        self.element = Element((0, 0, 0, 0), Text.draw, self)
        self.update()

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.update()

    @property
    def color(self) -> pygame.Color:
        return self._color

    @color.setter
    def color(self, value: ColorLike) -> None:
        self._color = pygame.Color(value)
        self.update()

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        self._size = value
        self.font = pygame.font.Font(self.font_path, value)
        self.update()

    def update(self) -> None:
        """Re-render the text and fit the element to it, keeping its position."""
        self.texture = self.font.render(self._text, False, self._color)
        rect = self.element.rect
        self.element.rect = pygame.Rect(rect.topleft, self.texture.get_size())

    def move_to(self, point: tuple[int, int]) -> None:
        self.element.rect.topleft = point

    def draw(self) -> None:
        if self.surface is None or self.texture is None:
            return
        self.surface.blit(self.texture, self.element.rect.topleft)


class Button:
    """A filled rectangle with a centred label that reacts to the mouse."""

    def __init__(
        self,
        surface: pygame.Surface,
        label: str,
        font: pygame.font.Font,
        color: ColorLike,
        hover_color: ColorLike,
        rect: Union[pygame.Rect, tuple[int, int, int, int]],
        on_click: Optional[Callable[[], None]] = None,
    ) -> None:
        self.surface = surface
        self.color = pygame.Color(color)
        self.hover_color = pygame.Color(hover_color)
        self.hover = False
        self.on_click = on_click
        self.element = Element(rect, Button.draw, self)
        self.label_texture = font.render(label, False, WHITE)

    @property
    def rect(self) -> pygame.Rect:
        return self.element.rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track hovering; return True when the button was clicked."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = bool(self.rect.collidepoint(event.pos))
        elif (
            event.type == pygame.MOUSEBUTTONDOWN
            and event.button == pygame.BUTTON_LEFT
            and self.hover
        ):
            if self.on_click is not None:
                self.on_click()
            return True
        return False

    def draw(self) -> None:
        rect = self.rect
        self.surface.fill(self.hover_color if self.hover else self.color, rect)
        label_w, label_h = self.label_texture.get_size()
        position = (rect.x + (rect.w - label_w) // 2, rect.y + (rect.h - label_h) // 2)
        self.surface.blit(self.label_texture, position)


class HealthBar:
    """A green bar over a red background showing health out of 100."""

    def __init__(self) -> None:
        self.rect = pygame.Rect(HEALTH_BAR_RECT)
        self.health = 100

    def update(self, health: int) -> None:
        self.health = health
        self.rect.w = int(HEALTH_BAR_WIDTH * health / 100)

    def draw(self, surface: pygame.Surface) -> None:
        background = pygame.Rect(self.rect.x, self.rect.y, HEALTH_BAR_WIDTH, self.rect.h)
        surface.fill(HEALTH_BAR_BACKGROUND, background)
        if self.rect.w > 0:
            surface.fill(HEALTH_BAR_FOREGROUND, self.rect)


class GameOverScreen:
    """A fixed white message shown when the player has lost."""

    def __init__(
        self,
        surface: pygame.Surface,
        text: str,
        font_path: Optional[str],
        font_size: int,
    ) -> None:
        self.surface = surface
        self.font = pygame.font.Font(font_path, font_size)
        self.texture = self.font.render(text, False, WHITE)
        self.rect = pygame.Rect(GAME_OVER_POSITION, self.texture.get_size())

    def draw(self) -> None:
        self.surface.blit(self.texture, self.rect.topleft)