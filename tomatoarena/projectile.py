"""Projectiles that fly in a straight line, and the tomato kind."""

from __future__ import annotations

from enum import Enum
from typing import Any

from tomatoarena.collider import Collider, ColliderType

TOMATO_SPEED = 230.0
TOMATO_DAMAGE = 10.0
TOMATO_SIZE = (32 // 2, 32 // 2)


class ProjectileType(Enum):
    TOMATO = 0


class Projectile:
    """A moving box collider that remembers where it was fired from."""

    def __init__(
        self,
        speed: float,
        damage: float,
        collision_size: tuple[int, int],
        coord: tuple[int, int],
        owner: Any,
        type: ProjectileType,
        direction: tuple[float, float],
    ) -> None:
        self.start_coord = (int(coord[0]), int(coord[1]))
        self.speed = speed
        self.damage = damage
        self.collider = Collider(
            (coord[0], coord[1], collision_size[0], collision_size[1]),
            ColliderType.PROJECTILE,
            self,
            lambda target, other: target.on_collision(other),
        )
        self.direction = (float(direction[0]), float(direction[1]))
        self.owner = owner
        self.type = type

    def on_collision(self, other: Collider) -> None:
        """React to a hit; damage is applied by the world, not here."""
        if other.type is ColliderType.PLAYER:
            return

    @property
    def coord(self) -> tuple[int, int]:
        return self.collider.entity.coord

    @coord.setter
    def coord(self, point: tuple[int, int]) -> None:
        self.collider.entity.coord = point

    def update(self, dt: float) -> None:
        """Fly along the direction for dt seconds."""
        x, y = self.coord
        dx, dy = self.direction
        self.coord = (
            int(x + dx * self.speed * dt),
            int(y + dy * self.speed * dt),
        )


class TomatoProjectile(Projectile):
    """A thrown tomato."""

    def __init__(self, direction: tuple[float, float], coord: tuple[int, int]) -> None:
        super().__init__(
            TOMATO_SPEED,
            TOMATO_DAMAGE,
            TOMATO_SIZE,
            coord,
            None,
            ProjectileType.TOMATO,
            direction,
        )
        self.owner = self
        self.coord = coord