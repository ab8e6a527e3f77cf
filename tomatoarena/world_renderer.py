"""Draws the world as seen from a camera pivot."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import pygame

from tomatoarena.entity import Mob
from tomatoarena.graphics import Sprite, SpriteSheet
from tomatoarena.level import LEVEL_TILE_SIZE, Level
from tomatoarena.player import Player
from tomatoarena.projectile import Projectile
from tomatoarena.ui import GameOverScreen, HealthBar
from tomatoarena.world import World

PLAYER_CELL_SIZE = (64, 64)
MOB_CELL_SIZE = (96 // 3, 128 // 4)
MOB_DRAW_SIZE = (17 * 2, 28 * 2)
GAME_OVER_TEXT = "You suck tomatoes!"
GAME_OVER_FONT_SIZE = 48

RectLike = Union[pygame.Rect, tuple[int, int, int, int]]


def project(rect: RectLike, pivot: tuple[int, int]) -> pygame.Rect:
    """Move a world rectangle into screen space relative to pivot."""
    result = pygame.Rect(rect)
    result.x -= pivot[0]
    result.y -= pivot[1]
    return result


def tile_rect(pivot: tuple[int, int], x: int, y: int, w: int, h: int) -> pygame.Rect:
    """Screen rectangle of the level tile at column x, row y."""
    return project((x * LEVEL_TILE_SIZE, y * LEVEL_TILE_SIZE, w, h), pivot)


class WorldRenderer:
    """Holds the world's sprites and draws everything onto a surface."""

    def __init__(self, surface: pygame.Surface, assets_dir: Union[str, Path] = "assets") -> None:
        assets = Path(assets_dir)
        self.surface = surface
        self.player_sheet = SpriteSheet(assets / "sprites" / "player.png", *PLAYER_CELL_SIZE)
        self.mob_sheet = SpriteSheet(assets / "sprites" / "mob.png", *MOB_CELL_SIZE)
        self.projectile_sprite = Sprite(assets / "sprites" / "projectile.png")
        self.health_bar = HealthBar()
        font_path = assets / "fonts" / "sans.ttf"
        if not font_path.is_file():
            raise FileNotFoundError(f"font not found: {font_path}")
        self.game_over_screen = GameOverScreen(
            surface, GAME_OVER_TEXT, str(font_path), GAME_OVER_FONT_SIZE
        )

    def render_level(self, level: Level, pivot: tuple[int, int]) -> None:
        """Draw every visible tile of the level."""
        if level.tileset is None:
            return
        bounds = self.surface.get_rect()
        for y in range(level.height):
            for x in range(level.width):
                rect = tile_rect(pivot, x, y, LEVEL_TILE_SIZE, LEVEL_TILE_SIZE)
                if rect.colliderect(bounds):
                    level.tileset.draw_tile(self.surface, level.tile(x, y), rect)

    def _draw_cell(self, sheet: SpriteSheet, frame: int, rect: pygame.Rect) -> None:
        cell_y, cell_x = divmod(frame, sheet.width)
        sheet.draw(self.surface, cell_x, cell_y, rect)

    def render_player(self, player: Player, pivot: tuple[int, int]) -> None:
        x, y = player.coord
        rect = project((x, y, self.player_sheet.cell_width, self.player_sheet.cell_height), pivot)
        self._draw_cell(self.player_sheet, player.draw_frame_id, rect)

    def render_players(self, world: World, pivot: tuple[int, int]) -> None:
        """Draw the remote players, then the local one on top."""
        for player in world.players:
            self.render_player(player, pivot)
        self.render_player(world.self_player, pivot)

    def _render_mob(self, mob: Mob, pivot: tuple[int, int]) -> None:
        x, y = mob.coord
        rect = project((x, y, *MOB_DRAW_SIZE), pivot)
        self._draw_cell(self.mob_sheet, mob.draw_frame_id, rect)

    def render_mobs(self, world: World, pivot: tuple[int, int]) -> None:
        for mob in world.mobs:
            self._render_mob(mob, pivot)

    def _render_projectile(self, projectile: Projectile, pivot: tuple[int, int]) -> None:
        x, y = projectile.coord
        w, h = projectile.collider.size
        projected = project((x, y, w * 2, h * 2), pivot)
        self.projectile_sprite.draw(self.surface, (0, 0, w * 2, h * 2), projected)

    def render_projectiles(self, world: World, pivot: tuple[int, int]) -> None:
        for projectile in world.projectiles:
            self._render_projectile(projectile, pivot)

    def render(self, world: World, pivot: tuple[int, int]) -> None:
        """Draw the level, projectiles, mobs, players and the health overlay."""
        if world.level is not None:
            self.render_level(world.level, pivot)
        self.render_projectiles(world, pivot)
        self.render_mobs(world, pivot)
        self.render_players(world, pivot)

        health = world.self_player.health
        self.health_bar.update(health)
        self.health_bar.draw(self.surface)
        if health <= 0:
            self.game_over_screen.draw()