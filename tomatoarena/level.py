"""Tile maps read from comma separated level files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

LEVEL_TILE_SIZE = 64
WORLD_MAX_WIDTH = 256
WORLD_MAX_HEIGHT = 256


def _parse_row(line: str) -> list[int]:
    line = line.split("\r", 1)[0]
    row = []
    for field in line.split(","):
        if field and not (field.isascii() and field.isdigit()):
            raise ValueError(f"invalid tile value {field!r}")
        row.append(int(field) if field else 0)
    return row


def parse_level(text: str) -> tuple[list[int], int, int]:
    """Parse level text into (tiles, width, height).

    Each line is a row of comma separated tile numbers; an empty field is 0.
    Short rows are padded with 0 up to the widest row. Tiles are row-major.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    rows = [_parse_row(line) for line in lines]
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    if width > WORLD_MAX_WIDTH or height > WORLD_MAX_HEIGHT:
        raise ValueError(
            f"level is {width}x{height}, larger than "
            f"{WORLD_MAX_WIDTH}x{WORLD_MAX_HEIGHT}"
        )
    tiles = [tile for row in rows for tile in row + [0] * (width - len(row))]
    return tiles, width, height


def load_level_tiles(path: str | Path) -> tuple[list[int], int, int]:
    """Read and parse a level file."""
    return parse_level(Path(path).read_text(encoding="ascii"))


class Level:
    """A grid of tile numbers drawn with a tileset."""

    def __init__(
        self,
        tiles: Sequence[int],
        width: int,
        height: int,
        tileset: Optional[Any] = None,
    ) -> None:
        if len(tiles) != width * height:
            raise ValueError("tile count does not match level size")
        self.tiles = list(tiles)
        self.width = width
        self.height = height
        self.tileset = tileset

    @classmethod
    def load(cls, path: str | Path, tileset: Optional[Any] = None) -> "Level":
        tiles, width, height = load_level_tiles(path)
        return cls(tiles, width, height, tileset)

    def tile(self, x: int, y: int) -> int:
        """Tile number at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the level")
        return self.tiles[y * self.width + x]