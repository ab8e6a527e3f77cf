"""A top-down multiplayer tomato-throwing arena game: pygame client, relay server and game logic."""

__version__ = "0.1.0"