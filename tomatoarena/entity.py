"""Positioned entities, mobs, frame animation and player movement flags."""

from __future__ import annotations

from enum import IntFlag


class PlayerFlag(IntFlag):
    """Movement keys currently held by a player."""

    NONE = 0
    MOVE_UP = 1 << 0
    MOVE_DOWN = 1 << 1
    MOVE_LEFT = 1 << 2
    MOVE_RIGHT = 1 << 3
    MOVE_HORIZONTAL = MOVE_LEFT | MOVE_RIGHT
    MOVE_VERTICAL = MOVE_UP | MOVE_DOWN
    MOVE_ANY = MOVE_UP | MOVE_DOWN | MOVE_LEFT | MOVE_RIGHT


class Entity:
    """An integer position that remembers where it was before the last change."""

    def __init__(self) -> None:
        self.prev_coord: tuple[int, int] = (0, 0)
        self._coord: tuple[int, int] = (0, 0)

    @property
    def coord(self) -> tuple[int, int]:
        """Current position."""
        return self._coord

    @coord.setter
    def coord(self, point: tuple[int, int]) -> None:
        self.prev_coord = self._coord
        self._coord = (int(point[0]), int(point[1]))

    def move(self, dx: float, dy: float) -> None:
        """Shift by (dx, dy), each truncated towards zero."""
        x, y = self._coord
        self.coord = (x + int(dx), y + int(dy))


class Mob:
    """A non-player creature in the world."""

    def __init__(self) -> None:
        self.entity = Entity()

    @property
    def coord(self) -> tuple[int, int]:
        return self.entity.coord

    @coord.setter
    def coord(self, point: tuple[int, int]) -> None:
        self.entity.coord = point

    @property
    def draw_frame_id(self) -> int:
        """Sprite sheet cell used to draw the mob."""
        return 1


class Animation:
    """Cycles through frame_count frames, advancing once speed seconds pass."""

    def __init__(self, speed: float, frame_count: int) -> None:
        self.speed = speed
        self.frame_count = frame_count
        self.timer = 0.0
        self.base = 0
        self._index = 0

    def reset(self) -> None:
        self.timer = 0.0
        self._index = 0
        self.base = 0

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer > self.speed:
            self.timer = 0.0
            self._index = (self._index + 1) % self.frame_count

    def set_frame(self, frame: int) -> None:
        """Jump to a frame within the cycle and restart its timer."""
        self._index = frame
        self.timer = 0.0

    @property
    def frame(self) -> int:
        """Absolute frame: the base offset plus the position in the cycle."""
        return self.base + self._index