"""The game client: menu, play loop and game over handling."""

from __future__ import annotations

import argparse
import re
import time
from typing import Optional

import pygame

from tomatoarena.entity import PlayerFlag
from tomatoarena.graphics import Tileset
from tomatoarena.menu import Menu, MenuAction
from tomatoarena.network import Network
from tomatoarena.player import MAX_HEALTH, SPAWN_X, SPAWN_Y, Player
from tomatoarena.projectile import TomatoProjectile
from tomatoarena.protocol import get_logger, vector_length
from tomatoarena.ui import GameOverScreen
from tomatoarena.window import Window
from tomatoarena.world import World
from tomatoarena.world_renderer import WorldRenderer

TITLE = "Zombie Hunter"
WINDOW_SIZE = (800, 600)
LEVEL_NAME = "dungeon"
TILESET_NAME = "dungeon"
TILESET_CELL_SIZE = 16
GAME_OVER_TEXT = "Press Enter to respawn"
FONT_PATH = "assets/fonts/sans.ttf"
GAME_OVER_FONT_SIZE = 48
THROW_DISTANCE = 50
FRAME_RATE = 60

_MOVE_KEYS = {
    pygame.KSCAN_UP: PlayerFlag.MOVE_UP,
    pygame.KSCAN_W: PlayerFlag.MOVE_UP,
    pygame.KSCAN_DOWN: PlayerFlag.MOVE_DOWN,
    pygame.KSCAN_S: PlayerFlag.MOVE_DOWN,
    pygame.KSCAN_RIGHT: PlayerFlag.MOVE_RIGHT,
    pygame.KSCAN_D: PlayerFlag.MOVE_RIGHT,
    pygame.KSCAN_LEFT: PlayerFlag.MOVE_LEFT,
    pygame.KSCAN_A: PlayerFlag.MOVE_LEFT,
}

log = get_logger("tomatoarena.game")


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class Game:
    """One client session, from the start menu to playing on a server."""

    def __init__(self, window: Window) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.window = window
        self._surface = window.surface
        self.world = World()
        self.world.load_level(
            TILESET_NAME,
            LEVEL_NAME,
            lambda path: Tileset(path, TILESET_CELL_SIZE, TILESET_CELL_SIZE),
        )
        self.world_renderer = WorldRenderer(window.surface)
        self.network: Optional[Network] = None
        self.menu = Menu(window.surface)
        self.game_over_screen = GameOverScreen(
            window.surface, GAME_OVER_TEXT, FONT_PATH, GAME_OVER_FONT_SIZE
        )
        self.in_menu = True
        self.game_over = False

    @property
    def self_player(self) -> Player:
        return self.world.self_player

    def _connect(self) -> None:
        ip = self.menu.ip_address
        port = _leading_int(self.menu.port)
        try:
            self.network = Network(ip, port)
        except (OSError, OverflowError) as exc:
            log.error("Failed to connect to %s:%d: %s", ip, port, exc)
            return
        self.in_menu = False

    def _throw(self, pos: tuple[int, int]) -> None:
        x = pos[0] - self.window.width / 2.0
        y = pos[1] - self.window.height / 2.0
        length = int(vector_length(x, y))
        if length == 0:
            return
        direction = (x / length, y / length)
        pivot_x, pivot_y = self.self_player.coord
        start = (
            int(direction[0] * THROW_DISTANCE + pivot_x),
            int(direction[1] * THROW_DISTANCE + pivot_y),
        )
        tomato = TomatoProjectile(direction, start)
        self.world.add_projectile(tomato)
        self.world.add_collider(tomato.collider)
        if self.network is not None:
            self.network.send_projectile(self.self_player.id, tomato)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle one event; return True when the game should quit."""
        if event.type == pygame.QUIT:
            return True

        player = self.self_player
        if self.game_over:
            if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_RETURN:
                player.respawn(SPAWN_X, SPAWN_Y)
                player.health = MAX_HEALTH
                self.game_over = False
            return False

        if self.in_menu:
            action = self.menu.handle_event(event)
            if action is MenuAction.PLAY:
                self._connect()
            elif action is MenuAction.EXIT:
                return True
            return False

        flags = player.flags
        if event.type == pygame.MOUSEBUTTONDOWN:
            self._throw(event.pos)
        elif event.type == pygame.MOUSEMOTION:
            self.window.mouse_coordinate = tuple(event.pos)
        elif event.type == pygame.KEYDOWN:
            flag = _MOVE_KEYS.get(getattr(event, "scancode", None))
            if flag is not None:
                flags |= flag
        elif event.type == pygame.KEYUP:
            flag = _MOVE_KEYS.get(getattr(event, "scancode", None))
            if flag is not None:
                flags &= ~flag
        player.flags = PlayerFlag(flags)
        return False

    def update(self, dt: float) -> None:
        """Advance the world and the connection unless the game is over."""
        if self.game_over:
            return
        if not self.in_menu:
            self.world.update(dt)
            if self.network is not None:
                self.network.update(self.world)
        if self.self_player.health <= 0:
            self.game_over = True

    def _sync_surface(self) -> None:
        surface = self.window.surface
        if surface is self._surface:
            return
        self._surface = surface
        self.world_renderer.surface = surface
        self.world_renderer.game_over_screen.surface = surface
        self.game_over_screen.surface = surface
        menu = self.menu
        for holder in (menu, menu.play_button, menu.exit_button, menu.ip_text, menu.port_text):
            holder.surface = surface

    def render(self) -> None:
        """Draw the current screen and present it."""
        self._sync_surface()
        surface = self.window.surface
        surface.fill((0, 0, 0))
        if self.game_over:
            self.game_over_screen.draw()
        elif self.in_menu:
            self.menu.render()
        else:
            x, y = self.self_player.coord
            pivot = (x - self.window.width // 2, y - self.window.height // 2)
            self.world_renderer.render(self.world, pivot)
        if pygame.display.get_surface() is not None:
            pygame.display.flip()

    def run(self) -> None:
        """Loop over events, updates and frames until asked to quit."""
        clock = pygame.time.Clock()
        last = time.perf_counter()
        while not self.window.poll_events(self.handle_event):
            now = time.perf_counter()
            dt = now - last
            last = now
            self.update(dt)
            self.render()
            clock.tick(FRAME_RATE)

    def close(self) -> None:
        if self.network is not None:
            self.network.close()
            self.network = None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play the game.")
    parser.parse_args(argv)
    pygame.init()
    try:
        window = Window(TITLE, *WINDOW_SIZE)
    except pygame.error as exc:
        log.error("Failed to open window: %s", exc)
        return 1
    with window:
        game = Game(window)
        try:
            game.run()
        finally:
            game.close()
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())