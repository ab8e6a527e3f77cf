"""The relay server: tracks clients and forwards messages between them."""

from __future__ import annotations

import argparse
import selectors
import socket
from typing import Optional

from tomatoarena.protocol import Opcode, encode, get_logger, random_int

DEFAULT_PORT = 3030
MAX_CLIENTS = 100
BUFFER_SIZE = 1024
MAX_CLIENT_ID = 1000000

log = get_logger("tomatoarena.server")


class ServerClient:
    """A connected player as the server sees it."""

    def __init__(self, sock: socket.socket, client_id: int) -> None:
        self.sock = sock
        self.id = client_id
        self.address = sock.getpeername()

    def send(self, message: str | bytes) -> None:
        """Send message in one fixed-size, NUL padded buffer."""
        payload = message.encode("ascii") if isinstance(message, str) else bytes(message)
        self.sock.sendall(payload[:BUFFER_SIZE].ljust(BUFFER_SIZE, b"\0"))


def _describe(address: object) -> str:
    if isinstance(address, tuple) and len(address) >= 2:
        return f"{address[0]} on port {address[1]}"
    return str(address)


class Server:
    """Accepts players and relays each player's messages to the others."""

    def __init__(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        self.clients: list[ServerClient] = []
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._listener.bind((host, port))
            self._listener.listen()
            self._listener.setblocking(False)
        except OSError:
            self._listener.close()
            raise
        self._selector = selectors.DefaultSelector()
        self._selector.register(self._listener, selectors.EVENT_READ, None)

    @property
    def address(self) -> tuple[str, int]:
        """The (host, port) the server listens on."""
        return self._listener.getsockname()[:2]

    def _notify(self, client: ServerClient, message: str | bytes) -> None:
        try:
            client.send(message)
        except OSError as exc:
            log.warning("Failed to send to client %d: %s", client.id, exc)

    def accept(self) -> Optional[ServerClient]:
        """Accept a pending connection and introduce it to everyone else."""
        try:
            conn, _ = self._listener.accept()
        except (BlockingIOError, InterruptedError):
            return None
        conn.setblocking(True)
        if len(self.clients) >= MAX_CLIENTS:
            log.warning("Refusing connection: %d clients connected", len(self.clients))
            conn.close()
            return None
        try:
            client = ServerClient(conn, random_int(0, MAX_CLIENT_ID))
        except OSError as exc:
            log.warning("Failed to get remote ip of a client: '%s'", exc)
            conn.close()
            return None

        self._notify(client, encode(Opcode.CONNECTED, client.id))
        for other in self.clients:
            self._notify(client, encode(Opcode.JOINED, other.id))
        for other in self.clients:
            self._notify(other, encode(Opcode.JOINED, client.id))

        self.clients.append(client)
        log.info(
            "Accepted a connection from %s with %d users id: %d",
            _describe(client.address),
            len(self.clients),
            client.id,
        )
        self._selector.register(conn, selectors.EVENT_READ, client)
        return client

    def disconnect(self, client: ServerClient) -> None:
        """Drop a client and tell the others it left."""
        try:
            self._selector.unregister(client.sock)
        except (KeyError, ValueError):
            pass
        client.sock.close()
        self.clients = [c for c in self.clients if c is not client]
        log.debug("Closing client id(%d) total(%d)", client.id, len(self.clients))
        for other in self.clients:
            self._notify(other, encode(Opcode.DISCONNECT, client.id))

    def relay(self, client: ServerClient, message: bytes) -> None:
        """Forward message, unchanged, to every client but its sender."""
        for target in self.clients:
            if target.id != client.id:
                try:
                    target.sock.sendall(message)
                except OSError as exc:
                    log.warning("Failed to relay to client %d: %s", target.id, exc)
        text = bytes(message).split(b"\0", 1)[0].decode("ascii", "replace")
        log.info("Received: %s", text)

    def poll(self, timeout: Optional[float] = None) -> int:
        """Handle whatever sockets are ready; return how many were."""
        events = self._selector.select(timeout)
        for key, _ in events:
            if key.fileobj is self._listener:
                self.accept()
                continue
            client: ServerClient = key.data
            if not any(c is client for c in self.clients):
                continue
            try:
                data = client.sock.recv(BUFFER_SIZE)
            except OSError:
                data = b""
            if data:
                self.relay(client, data)
            else:
                self.disconnect(client)
        return len(events)

    def serve_forever(self) -> None:
        while True:
            self.poll(None)

    def close(self) -> None:
        """Close every client connection and the listening socket."""
        for client in self.clients:
            client.sock.close()
        self.clients = []
        self._selector.close()
        self._listener.close()

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the game relay server.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        server = Server(args.host, args.port)
    except (OSError, OverflowError) as exc:
        log.error("Failed to open TCP '%s'", exc)
        return 1
    log.info("Server is now up")
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())