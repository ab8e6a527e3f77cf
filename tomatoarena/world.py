"""The game world: players, mobs, projectiles, the level and collisions."""

from __future__ import annotations

from typing import Any, Callable, Optional

from tomatoarena.collider import Collider, ColliderType, Collision
from tomatoarena.entity import Mob
from tomatoarena.entity_list import EntityList
from tomatoarena.level import Level
from tomatoarena.player import Player
from tomatoarena.projectile import Projectile

PLAYER_CAPACITY = 32
MOB_CAPACITY = 32
PROJECTILE_CAPACITY = 2048
PROJECTILE_RANGE = 500
PROJECTILE_HIT_DAMAGE = 17


def level_paths(tileset_name: str, level_name: str) -> tuple[str, str]:
    """Return (tileset_path, level_path) for the named assets."""
    return (
        f"assets/tilesets/{tileset_name}.png",
        f"assets/levels/{level_name}.csv",
    )


class World:
    """Everything that lives in one game session, seen from the local player."""

    def __init__(self) -> None:
        self.players = EntityList(PLAYER_CAPACITY)
        self.self_player = Player()
        self.mobs = EntityList(MOB_CAPACITY)
        self.collision = Collision()
        self.projectiles = EntityList(PROJECTILE_CAPACITY)
        self.level: Optional[Level] = None
        self.game_over = False
        self.collision.add(self.self_player.collider)

    def load_level(
        self,
        tileset_name: str,
        level_name: str,
        load_tileset: Optional[Callable[[str], Any]] = None,
    ) -> Level:
        """Replace the current level with the named one.

        load_tileset, when given, is called with the tileset path and its
        result is attached to the level.
        """
        self.level = None
        tileset_path, level_path = level_paths(tileset_name, level_name)
        tileset = load_tileset(tileset_path) if load_tileset is not None else None
        self.level = Level.load(level_path, tileset)
        return self.level

    def add_player(self, player: Player) -> int:
        """Add a remote player and its collider; return its index."""
        self.add_collider(player.collider)
        return self.players.add(player)

    def remove_player(self, player: Player) -> None:
        self.remove_collider(player.collider)
        self.players.remove(player)

    def player_by_id(self, id: int) -> Optional[Player]:
        """The remote player with this id, or None."""
        for player in self.players:
            if player.id == id:
                return player
        return None

    def add_mob(self, mob: Mob) -> int:
        return self.mobs.add(mob)

    def add_projectile(self, projectile: Projectile) -> None:
        self.projectiles.add(projectile)

    def remove_projectile(self, projectile: Projectile) -> None:
        self.projectiles.remove(projectile)

    def add_collider(self, collider: Collider) -> None:
        self.collision.add(collider)

    def remove_collider(self, collider: Collider) -> None:
        self.collision.remove(collider)

    def update_projectiles(self, dt: float) -> None:
        """Move projectiles and drop those that flew too far from their start."""
        for projectile in self.projectiles:
            projectile.update(dt)
            start_x, start_y = projectile.start_coord
            x, y = projectile.coord
            if (
                abs(x - start_x) > PROJECTILE_RANGE
                or abs(y - start_y) > PROJECTILE_RANGE
            ):
                self.remove_projectile(projectile)

    def update(self, dt: float) -> None:
        """Advance the whole world by dt seconds."""
        for player in self.players:
            player.update(dt)
        self.self_player.move_on_flags(dt)
        self.self_player.update(dt)
        self.update_projectiles(dt)
        self.collision.update(self.on_collision)

    def on_collision(self, a: Optional[Collider], b: Optional[Collider]) -> None:
        """Apply a projectile hit on a player and remove the projectile."""
        if a is None or b is None:
            return
        for player_side, projectile_side in ((a, b), (b, a)):
            if (
                player_side.type is ColliderType.PLAYER
                and projectile_side.type is ColliderType.PROJECTILE
            ):
                player: Player = player_side.target
                projectile: Projectile = projectile_side.target
                player.decrement_health(PROJECTILE_HIT_DAMAGE)
                if player.health <= 0:
                    self.game_over = True
                self.remove_projectile(projectile)
                self.remove_collider(projectile_side)