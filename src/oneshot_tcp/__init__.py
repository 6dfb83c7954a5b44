"""
Single-use server-side TCP connections.

A Connection listens on one address and port, accepts exactly one client,
and hands the accepted socket to the caller. Once that socket has been shut
down the Connection cannot be used again.

Components:
    - connection: The Connection handle and its lifecycle
    - config: Listener settings and the ephemeral port sentinel
    - exceptions: Errors raised for misuse of a Connection
"""

from .config import DEFAULT_BACKLOG, EPHEMERAL_PORT, ListenerConfig
from .connection import Connection
from .exceptions import ConnectionBusyError, ConnectionReuseError, OneShotError

__all__ = [
    # Connection lifecycle
    "Connection",
    # Configuration
    "ListenerConfig",
    "EPHEMERAL_PORT",
    "DEFAULT_BACKLOG",
    # Errors
    "OneShotError",
    "ConnectionReuseError",
    "ConnectionBusyError",
]
