"""
Listener configuration.

Constants and the runtime configuration model used when a Connection
binds its transient listening socket.
"""

from typing import Final

from pydantic import Field

from oneshot_tcp.types import StrictBaseModel

EPHEMERAL_PORT: Final = "0"
"""Port sentinel asking the OS to pick any free port at bind time."""

DEFAULT_BACKLOG: Final = 128
"""Pending connection queue length handed to listen(2) by default."""


class ListenerConfig(StrictBaseModel):
    """Runtime configuration for the single-use listener."""

    backlog: int = Field(default=DEFAULT_BACKLOG, ge=1)
    """Pending connection queue length passed to listen()."""

    reuse_address: bool = True
    """
    Set SO_REUSEADDR before binding.

    Lets a fixed port be bound again while an earlier connection on it
    sits in TIME_WAIT. Has no effect on ephemeral ports.
    """
