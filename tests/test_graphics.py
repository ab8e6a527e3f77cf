import pygame
import pytest

from tomatoarena.graphics import Sprite, SpriteSheet, Tileset

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
CELL_COLORS = [RED, GREEN, BLUE, WHITE]


def _sheet_surface():
    """A 2x2 grid of 4x4 cells, coloured row by row."""
    image = pygame.Surface((8, 8))
    for index, color in enumerate(CELL_COLORS):
        x, y = index % 2, index // 2
        image.fill(color, pygame.Rect(x * 4, y * 4, 4, 4))
    return image


@pytest.fixture
def sheet_path(tmp_path):
    path = tmp_path / "sheet.png"
    pygame.image.save(_sheet_surface(), str(path))
    return path


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_sprite_loads_size_from_file(sheet_path):
    sprite = Sprite(sheet_path)
    assert (sprite.width, sprite.height) == (8, 8)


def test_sprite_missing_file():
    with pytest.raises(FileNotFoundError):
        Sprite("no/such/image.png")


def test_sprite_draw_whole_fills_target(sheet_path):
    sprite = Sprite(sheet_path)
    target = pygame.Surface((8, 8))
    sprite.draw(target)
    assert _rgb(target, (0, 0)) == RED
    assert _rgb(target, (7, 7)) == WHITE


def test_sprite_draw_scales_source_into_destination():
    sprite = Sprite(_sheet_surface())
    target = pygame.Surface((20, 20))
    sprite.draw(target, (4, 0, 4, 4), (2, 2, 8, 8))
    assert _rgb(target, (2, 2)) == GREEN
    assert _rgb(target, (9, 9)) == GREEN
    assert _rgb(target, (10, 10)) == (0, 0, 0)


def test_spritesheet_dimensions(sheet_path):
    sheet = SpriteSheet(sheet_path, 4, 4)
    assert (sheet.width, sheet.height) == (2, 2)
    assert (sheet.cell_width, sheet.cell_height) == (4, 4)


def test_spritesheet_rejects_uneven_cells():
    with pytest.raises(ValueError):
        SpriteSheet(_sheet_surface(), 3, 4)


@pytest.mark.parametrize("cell_x,cell_y,color", [(0, 0, RED), (1, 0, GREEN), (0, 1, BLUE), (1, 1, WHITE)])
def test_spritesheet_draws_cell(cell_x, cell_y, color):
    sheet = SpriteSheet(_sheet_surface(), 4, 4)
    target = pygame.Surface((4, 4))
    sheet.draw(target, cell_x, cell_y, (0, 0, 4, 4))
    assert _rgb(target, (0, 0)) == color
    assert _rgb(target, (3, 3)) == color


@pytest.mark.parametrize("tile", range(4))
def test_tileset_numbers_cells_row_by_row(tile):
    tileset = Tileset(_sheet_surface(), 4, 4)
    target = pygame.Surface((6, 6))
    tileset.draw_tile(target, tile, (1, 1, 4, 4))
    assert _rgb(target, (1, 1)) == CELL_COLORS[tile]
    assert _rgb(target, (0, 0)) == (0, 0, 0)