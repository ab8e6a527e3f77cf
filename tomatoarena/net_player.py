"""Apply messages from the server to the local world."""

from __future__ import annotations

from tomatoarena.entity import PlayerFlag
from tomatoarena.player import Player
from tomatoarena.projectile import TomatoProjectile
from tomatoarena.protocol import Opcode, decode
from tomatoarena.world import World


def player_disconnect(world: World, id: int) -> None:
    """Remove the remote player with this id, if present."""
    player = world.player_by_id(id)
    if player is not None:
        world.remove_player(player)


def player_join(world: World, id: int) -> Player:
    """Add a remote player with this id."""
    player = Player()
    player.id = id
    world.add_player(player)
    return player


def player_move(world: World, id: int, x: int, y: int, flags: int) -> None:
    """Place a remote player and set its held movement keys."""
    player = world.player_by_id(id)
    if player is not None:
        player.flags = PlayerFlag(flags)
        player.set_coord(x, y)


def add_projectile(
    world: World, x: int, y: int, direction_x: float, direction_y: float
) -> TomatoProjectile:
    """Spawn a tomato thrown by another player."""
    projectile = TomatoProjectile((direction_x, direction_y), (x, y))
    world.add_projectile(projectile)
    world.add_collider(projectile.collider)
    return projectile


def player_connected(world: World, id: int) -> None:
    """Record the id the server gave the local player."""
    world.self_player.id = id


def react(world: World, message: str | bytes) -> Opcode:
    """Apply one server message and return its opcode.

    Raises ValueError for a message that cannot be decoded.
    """
    opcode, fields = decode(message)
    if opcode is Opcode.CONNECTED:
        player_connected(world, *fields)
    elif opcode is Opcode.JOINED:
        player_join(world, *fields)
    elif opcode is Opcode.DISCONNECT:
        player_disconnect(world, *fields)
    elif opcode is Opcode.PLAYERMOVE:
        player_move(world, *fields)
    elif opcode is Opcode.PROJECTILE:
        _sender, x, y, direction_x, direction_y = fields
        add_projectile(world, x, y, direction_x, direction_y)
    return opcode