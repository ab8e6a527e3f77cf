"""Client side of the connection to the relay server."""

from __future__ import annotations

import select
import socket
from typing import Optional

from tomatoarena.entity import PlayerFlag
from tomatoarena.net_player import react
from tomatoarena.player import Player
from tomatoarena.projectile import Projectile
from tomatoarena.protocol import Opcode, encode, get_logger
from tomatoarena.world import World

BUFFER_SIZE = 1024
CONNECT_TIMEOUT = 5.0

log = get_logger("tomatoarena.network")


def _message(opcode: Opcode, *fields: object) -> str:
    # Every message ends with a space, as the server's peers expect.
    return encode(opcode, *fields) + " "


class Network:
    """A TCP connection to the server that exchanges game messages."""

    def __init__(self, host: str, port: int) -> None:
        try:
            self._sock = socket.create_connection((host, port), timeout=CONNECT_TIMEOUT)
        except (OSError, OverflowError) as exc:
            log.error("Couldn't open TCP connection with %s: %s", host, exc)
            raise
        self._sock.settimeout(None)
        self.host = host
        self.port = port
        self.connected = True

    def send(self, data: str | bytes) -> None:
        """Send data as it is; raises OSError when the socket fails."""
        payload = data.encode("ascii") if isinstance(data, str) else bytes(data)
        try:
            self._sock.sendall(payload)
        except OSError:
            log.warning("Failed to send message")
            raise

    def _send_buffer(self, message: str) -> None:
        """Send message in one fixed-size, NUL padded buffer."""
        payload = message.encode("ascii")[:BUFFER_SIZE]
        self.send(payload.ljust(BUFFER_SIZE, b"\0"))

    def send_projectile(self, player_id: int, projectile: Projectile) -> None:
        """Tell the other players about a projectile thrown by player_id."""
        x, y = projectile.start_coord
        dx, dy = projectile.direction
        self._send_buffer(_message(Opcode.PROJECTILE, player_id, x, y, dx, dy))

    def send_player_movement(self, player: Player) -> bool:
        """Report the player's position while a movement key is held.

        Returns True when a message was sent.
        """
        if not self.connected or not player.flags & PlayerFlag.MOVE_ANY:
            return False
        x, y = player.coord
        self._send_buffer(
            _message(Opcode.PLAYERMOVE, player.id, x, y, int(player.flags))
        )
        return True

    def update(self, world: World) -> Optional[Opcode]:
        """Send the local movement, then apply at most one waiting message.

        Returns the opcode of the message applied, or None.
        """
        self.send_player_movement(world.self_player)
        if not self.connected:
            return None
        readable, _, _ = select.select([self._sock], [], [], 0)
        if not readable:
            return None
        try:
            data = self._sock.recv(BUFFER_SIZE)
        except OSError:
            data = b""
        if not data:
            self.connected = False
            log.warning("Connection to %s closed", self.host)
            return None
        try:
            return react(world, data)
        except ValueError as exc:
            log.warning("Ignoring message: %s", exc)
            return None

    def close(self) -> None:
        self.connected = False
        self._sock.close()

    def __enter__(self) -> "Network":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()