"""WebSocket hub: plays Hold'em rounds and broadcasts showdowns to clients."""

from .server import HubServer

__all__ = ["HubServer"]
