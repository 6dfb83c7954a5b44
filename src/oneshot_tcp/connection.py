"""
Single-use server-side TCP connection.

A Connection binds a listener, waits for exactly one client, keeps the
accepted socket and throws the listener away. After the stream has been
shut down the handle is spent: it can never listen again.

Lifecycle
---------

    Idle --connect()--> Connected --close()--> Closed

    - A failed connect() leaves the handle Idle, so connect() may be retried.
    - A failed close() leaves the handle Connected, so close() may be retried.
    - close() on an Idle or Closed handle is a no-op.
    - connect() on a Closed handle raises ConnectionReuseError without I/O.
    - connect() on a Connected handle raises ConnectionBusyError without I/O.

Teardown
--------

Leaving a ``with`` block, or the handle being garbage collected, runs the
same logic as close(). Those paths have no caller to report to, so an OSError
from the shutdown is logged at DEBUG level and dropped.
"""

from __future__ import annotations

import logging
import socket
from types import TracebackType
from typing import Any

from .config import EPHEMERAL_PORT, ListenerConfig
from .exceptions import ConnectionBusyError, ConnectionReuseError

logger = logging.getLogger(__name__)


class Connection:
    """
    A TCP listener that accepts one client and then owns its stream.

    Example usage:
        conn = Connection("127.0.0.1", "0")
        conn.connect()              # blocks until a client dials conn.port
        data = conn.stream.recv(1024)
        conn.close()
    """

    def __init__(self, address: str, port: str, config: ListenerConfig | None = None) -> None:
        """
        Create an idle connection. Performs no I/O.

        Args:
            address: Host to bind, used literally (e.g. "127.0.0.1", "::1").
            port: Port to bind as a string. "0" asks the OS for a free port.
            config: Listener settings. Defaults to ListenerConfig().
        """
        self._address = address
        self._port = port
        self._config = config if config is not None else ListenerConfig()
        self._stream: socket.socket | None = None
        self._used_up = False

    @property
    def address(self) -> str:
        """Host the listener binds to."""
        return self._address

    @property
    def port(self) -> str:
        """
        Port the listener binds to.

        When created with "0", this holds the OS-assigned port as soon as the
        bind inside connect() succeeds. It is already readable from another
        thread while connect() is still waiting for the client.
        """
        return self._port

    @property
    def config(self) -> ListenerConfig:
        """Listener settings."""
        return self._config

    @property
    def stream(self) -> socket.socket | None:
        """The accepted client socket, or None when no client is held."""
        return self._stream

    @property
    def used_up(self) -> bool:
        """Whether the stream was shut down, forbidding any further connect()."""
        return self._used_up

    @property
    def is_connected(self) -> bool:
        """Whether an accepted stream is currently held."""
        return self._stream is not None

    @property
    def local_address(self) -> Any:
        """Local socket address of the held stream, or None."""
        if self._stream is None:
            return None
        return self._stream.getsockname()

    @property
    def peer_address(self) -> Any:
        """Remote socket address of the held stream, or None."""
        if self._stream is None:
            return None
        return self._stream.getpeername()

    def connect(self) -> None:
        """
        Listen on address:port and accept exactly one client.

        Blocks with no timeout until a client connects. The listening socket
        is closed before this returns, whether it succeeds or not.

        Raises:
            ConnectionReuseError: If the handle was already closed.
            ConnectionBusyError: If a stream is already held.
            OSError: If resolving, binding, listening or accepting fails.
        """
        if self._used_up:
            raise ConnectionReuseError()

        if self._stream is not None:
            raise ConnectionBusyError(self._address, self._port)

        # Literal host:port only. AI_NUMERICSERV keeps the port from being
        # looked up as a service name.
        family, sock_type, proto, _, sockaddr = socket.getaddrinfo(
            self._address,
            self._port,
            type=socket.SOCK_STREAM,
            flags=socket.AI_PASSIVE | socket.AI_NUMERICSERV,
        )[0]

        with socket.socket(family, sock_type, proto) as listener:
            if self._config.reuse_address:
                listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(sockaddr)
            listener.listen(self._config.backlog)

            if self._port == EPHEMERAL_PORT:
                self._port = str(listener.getsockname()[1])

            logger.debug("Listening on %s:%s", self._address, self._port)
            stream, peer = listener.accept()

        logger.debug("Accepted %s on %s:%s", peer, self._address, self._port)
        self._stream = stream

    def close(self) -> None:
        """
        Shut down the held stream in both directions and release it.

        Does nothing when no stream is held. On failure the stream is kept
        and the handle is not marked used up, so close() can be retried.

        Raises:
            OSError: If the shutdown fails.
        """
        if self._stream is None:
            return

        self._stream.shutdown(socket.SHUT_RDWR)
        self._stream.close()

        self._used_up = True
        self._stream = None
        logger.debug("Closed connection on %s:%s", self._address, self._port)

    def _teardown(self) -> None:
        """Run close() for an implicit exit path, dropping any OSError."""
        try:
            self.close()
        except OSError as e:
            logger.debug("Ignoring error closing %s:%s: %s", self._address, self._port, e)

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._teardown()

    def __del__(self) -> None:
        # __init__ may not have completed.
        if getattr(self, "_stream", None) is not None:
            self._teardown()

    def __repr__(self) -> str:
        if self._stream is not None:
            state = "connected"
        elif self._used_up:
            state = "closed"
        else:
            state = "idle"
        return f"Connection(address={self._address!r}, port={self._port!r}, state={state!r})"
