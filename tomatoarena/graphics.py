"""Images, sprite sheets and tilesets drawn onto pygame surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pygame

ImageSource = Union[str, Path, pygame.Surface]
RectLike = Union[pygame.Rect, tuple[int, int, int, int]]


def _load(source: ImageSource) -> pygame.Surface:
    if isinstance(source, pygame.Surface):
        return source
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"image not found: {path}")
    return pygame.image.load(str(path))


class Sprite:
    """A whole image that can be copied, scaled, onto another surface."""

    def __init__(self, source: ImageSource) -> None:
        self.image = _load(source)

    @property
    def width(self) -> int:
        return self.image.get_width()

    @property
    def height(self) -> int:
        return self.image.get_height()

    def draw(
        self,
        surface: pygame.Surface,
        src: Optional[RectLike] = None,
        dst: Optional[RectLike] = None,
    ) -> None:
        """Copy the src part of the image, stretched, into dst on surface.

        A missing src means the whole image; a missing dst the whole surface.
        """
        bounds = self.image.get_rect()
        src_rect = bounds if src is None else pygame.Rect(src).clip(bounds)
        dst_rect = surface.get_rect() if dst is None else pygame.Rect(dst)
        if src_rect.w <= 0 or src_rect.h <= 0 or dst_rect.w <= 0 or dst_rect.h <= 0:
            return
        part = self.image.subsurface(src_rect)
        if part.get_size() != dst_rect.size:
            part = pygame.transform.scale(part, dst_rect.size)
        surface.blit(part, dst_rect.topleft)


class SpriteSheet:
    """An image cut into a grid of equally sized cells."""

    def __init__(self, source: ImageSource, cell_width: int, cell_height: int) -> None:
        if cell_width <= 0 or cell_height <= 0:
            raise ValueError("cell size must be positive")
        self.sprite = Sprite(source)
        if self.sprite.width % cell_width or self.sprite.height % cell_height:
            raise ValueError(
                f"image of {self.sprite.width}x{self.sprite.height} is not a whole "
                f"number of {cell_width}x{cell_height} cells"
            )
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.width = self.sprite.width // cell_width
        self.height = self.sprite.height // cell_height

    def draw(
        self,
        surface: pygame.Surface,
        cell_x: int,
        cell_y: int,
        dst: Optional[RectLike] = None,
    ) -> None:
        """Draw the cell at column cell_x, row cell_y into dst."""
        src = pygame.Rect(
            cell_x * self.cell_width,
            cell_y * self.cell_height,
            self.cell_width,
            self.cell_height,
        )
        self.sprite.draw(surface, src, dst)


class Tileset:
    """A sprite sheet whose cells are numbered row by row."""

    def __init__(self, source: ImageSource, cell_width: int, cell_height: int) -> None:
        self.sheet = SpriteSheet(source, cell_width, cell_height)

    def draw_tile(
        self, surface: pygame.Surface, tile: int, dst: Optional[RectLike] = None
    ) -> None:
        cell_x = tile % self.sheet.width
        cell_y = tile // self.sheet.width
        self.sheet.draw(surface, cell_x, cell_y, dst)