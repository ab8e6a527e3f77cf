"""Wire protocol, logging helpers and small numeric utilities."""

from __future__ import annotations

import logging
import math
import random
from enum import IntEnum

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
WHITE = "\x1b[37m"


class Opcode(IntEnum):
    """Message kinds exchanged between client and server."""

    JOINED = 0
    CONNECTED = 1
    PLAYERMOVE = 2
    PROJECTILE = 3
    DISCONNECT = 4


# Field types that follow the opcode in each message.
_LAYOUTS: dict[Opcode, tuple[type, ...]] = {
    Opcode.JOINED: (int,),
    Opcode.CONNECTED: (int,),
    Opcode.DISCONNECT: (int,),
    Opcode.PLAYERMOVE: (int, int, int, int),
    Opcode.PROJECTILE: (int, int, int, float, float),
}


class ColorFormatter(logging.Formatter):
    """Formatter that prefixes each line with a coloured level tag."""

    _STYLES = (
        (logging.ERROR, RED, "ERROR"),
        (logging.WARNING, YELLOW, "WARN"),
        (logging.INFO, GREEN, "INFO"),
        (logging.DEBUG, BLUE, "DEBUG"),
    )

    def format(self, record: logging.LogRecord) -> str:
        color, label = BLUE, "DEBUG"
        for level, style_color, style_label in self._STYLES:
            if record.levelno >= level:
                color, label = style_color, style_label
                break
        return f"{color}[{label}] {WHITE}{super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing coloured lines to stderr, configured once."""
    logger = logging.getLogger(name)
    if not any(isinstance(h.formatter, ColorFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ColorFormatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    return logger


def _format_field(value: object) -> str:
    if isinstance(value, float):
        return "%f" % value
    return "%d" % int(value)


def encode(opcode: Opcode, *args: object) -> str:
    """Build a space separated message: the opcode followed by its fields."""
    return " ".join(_format_field(field) for field in (int(opcode), *args))


def decode(message: str | bytes) -> tuple[Opcode, tuple]:
    """Parse a message into its opcode and typed fields.

    Bytes are cut at the first NUL, as messages travel in fixed-size buffers.
    Raises ValueError for an unknown opcode or missing or malformed fields.
    """
    if isinstance(message, (bytes, bytearray)):
        message = bytes(message).split(b"\0", 1)[0].decode("ascii", "replace")
    else:
        message = message.split("\0", 1)[0]
    tokens = message.split()
    if not tokens:
        raise ValueError("empty message")
    try:
        opcode = Opcode(int(tokens[0]))
    except ValueError as exc:
        raise ValueError(f"unknown opcode in message {message!r}") from exc
    layout = _LAYOUTS[opcode]
    fields = tokens[1:1 + len(layout)]
    if len(fields) < len(layout):
        raise ValueError(f"message {message!r} is missing fields")
    try:
        values = tuple(kind(token) for kind, token in zip(layout, fields))
    except ValueError as exc:
        raise ValueError(f"malformed field in message {message!r}") from exc
    return opcode, values


def random_int(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    return random.randint(low, high)


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the range [low, high]."""
    value = low if value < low else value
    return high if value > high else value


def vector_length(x: float, y: float) -> float:
    """Euclidean length of the vector (x, y)."""
    return math.hypot(x, y)