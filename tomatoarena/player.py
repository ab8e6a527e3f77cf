"""The player character: movement, facing animation and health."""

from __future__ import annotations

from tomatoarena.collider import Collider, ColliderType
from tomatoarena.entity import Animation, Entity, PlayerFlag

SPAWN_X = 1500
SPAWN_Y = 1500
PLAYER_SPRITE_SIZE = 64
MAX_HEALTH = 100
PLAYER_SPEED = 2.0 * 60.0

# Animation base frames for each facing on the player sprite sheet.
_BASE_UP = 0
_BASE_LEFT = 3
_BASE_RIGHT = 6
_BASE_DOWN = 9


class Player:
    """A player, local or remote, with a box collider that follows it."""

    def __init__(self) -> None:
        self.id = -1
        self.entity = Entity()
        self.entity.move(SPAWN_X, SPAWN_Y)
        self.flags = PlayerFlag.NONE
        self.speed = PLAYER_SPEED
        self.move_animation = Animation(0.075, 3)
        self.health = MAX_HEALTH
        x, y = self.entity.coord
        half = PLAYER_SPRITE_SIZE // 2
        self.collider = Collider(
            (x, y, half, half),
            ColliderType.PLAYER,
            self,
            lambda target, other: target.on_collision(other),
        )

    def on_collision(self, other: Collider) -> None:
        """React to touching another collider; players take no action here."""
        if other.type is ColliderType.PLAYER:
            return

    def update_direction(self) -> None:
        """Pick the animation row from the last step taken."""
        prev_x, prev_y = self.entity.prev_coord
        new_x, new_y = self.entity.coord
        delta_x = prev_x - new_x
        delta_y = prev_y - new_y
        if delta_y == 0:
            self.move_animation.base = _BASE_RIGHT if delta_x < 0 else _BASE_LEFT
        if delta_x == 0:
            self.move_animation.base = _BASE_UP if delta_y < 0 else _BASE_DOWN

    def move_on_flags(self, dt: float) -> None:
        """Step in every direction whose key is held."""
        step = self.speed * dt
        if self.flags & PlayerFlag.MOVE_DOWN:
            self.entity.move(0, step)
        if self.flags & PlayerFlag.MOVE_UP:
            self.entity.move(0, -step)
        if self.flags & PlayerFlag.MOVE_RIGHT:
            self.entity.move(step, 0)
        if self.flags & PlayerFlag.MOVE_LEFT:
            self.entity.move(-step, 0)

    def update(self, dt: float) -> None:
        """Advance the animation and bring the collider to the player."""
        if self.flags in (
            PlayerFlag.MOVE_HORIZONTAL,
            PlayerFlag.MOVE_VERTICAL,
            PlayerFlag.MOVE_VERTICAL | PlayerFlag.MOVE_HORIZONTAL,
        ):
            return
        self.update_direction()
        if not self.flags & PlayerFlag.MOVE_ANY:
            self.move_animation.set_frame(1)
        else:
            self.move_animation.update(dt)
        x, y = self.entity.coord
        self.collider.set_coordinate(x, y)

    @property
    def coord(self) -> tuple[int, int]:
        return self.entity.coord

    @property
    def draw_frame_id(self) -> int:
        """Sprite sheet cell to draw this frame."""
        return self.move_animation.frame

    def set_coord(self, x: int, y: int) -> None:
        self.entity.coord = (x, y)

    def decrement_health(self, amount: int) -> None:
        self.health -= amount

    def respawn(self, x: int, y: int) -> None:
        """Restore full health and place the player at (x, y)."""
        self.health = MAX_HEALTH
        self.set_coord(x, y)