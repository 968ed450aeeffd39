"""A multiplayer terminal maze game with an XML-RPC server and curses clients."""

__version__ = "0.1.0"
__all__ = ["character", "client", "game", "interface", "server", "types"]