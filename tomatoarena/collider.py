"""Axis-aligned box colliders and the pairwise collision pass."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator, Optional

from tomatoarena.entity import Entity
from tomatoarena.entity_list import EntityList

COLLIDER_CAPACITY = 200


class ColliderType(Enum):
    PLAYER = 0
    PROJECTILE = 1


OnCollision = Callable[[Any, "Collider"], None]


class Collider:
    """A box at an entity's position that reports hits to its target."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        type: ColliderType,
        target: Any,
        on_collision: Optional[OnCollision],
    ) -> None:
        x, y, w, h = rect
        self.entity = Entity()
        self.entity.coord = (x, y)
        self.size = (w, h)
        self.type = type
        self.target = target
        self.on_collision = on_collision

    def set_coordinate(self, x: int, y: int) -> None:
        self.entity.coord = (x, y)

    def set_size(self, w: int, h: int) -> None:
        self.size = (w, h)

    def check(self, other: "Collider") -> bool:
        """True when the two boxes overlap with positive area."""
        ax, ay = self.entity.coord
        aw, ah = self.size
        bx, by = other.entity.coord
        bw, bh = other.size
        if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
            return False
        return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah

    def execute(self, other: "Collider") -> bool:
        """On overlap, notify both targets and return True."""
        if not self.check(other):
            return False
        if self.on_collision is not None:
            self.on_collision(self.target, other)
        if other.on_collision is not None:
            other.on_collision(other.target, self)
        return True


class Collision:
    """The set of colliders tested against each other every frame."""

    def __init__(self) -> None:
        self._colliders = EntityList(COLLIDER_CAPACITY)

    def add(self, collider: Collider) -> None:
        self._colliders.add(collider)

    def remove(self, collider: Collider) -> None:
        self._colliders.remove(collider)

    def update(self, handler: Callable[[Collider, Collider], None]) -> None:
        """Test every ordered pair and pass each hit to handler.

        Each hit shortens the range still scanned by one, since the handler
        is expected to drop a collider from the set.
        """
        count = len(self._colliders)
        i = 0
        while i < min(count, len(self._colliders)):
            a = self._colliders[i]
            x = 0
            while x < min(count, len(self._colliders)):
                if x != i:
                    b = self._colliders[x]
                    if a.execute(b):
                        handler(a, b)
                        count -= 1
                x += 1
            i += 1

    def __len__(self) -> int:
        return len(self._colliders)

    def __iter__(self) -> Iterator[Collider]:
        return iter(self._colliders)