"""
Shared pytest fixtures for connection tests.

Provides a client dialer that runs on a helper thread, so a test can call
the blocking connect() on the main thread while a client dials in.
"""

from __future__ import annotations

import socket
from collections.abc import Callable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from oneshot_tcp import EPHEMERAL_PORT, Connection
from tests.oneshot_tcp.helpers import DIAL_TIMEOUT_SECS, dial_when_listening


@pytest.fixture
def dial() -> Iterator[Callable[[Connection], Future[socket.socket]]]:
    """
    Start dialing a connection from a helper thread.

    Returns a future for the client socket. Client sockets are closed when
    the test finishes.
    """
    futures: list[Future[socket.socket]] = []

    with ThreadPoolExecutor(max_workers=2) as executor:

        def _start(conn: Connection) -> Future[socket.socket]:
            future = executor.submit(dial_when_listening, conn)
            futures.append(future)
            return future

        yield _start

    for future in futures:
        if future.exception() is None:
            future.result().close()


@pytest.fixture
def connected(
    dial: Callable[[Connection], Future[socket.socket]],
) -> tuple[Connection, socket.socket]:
    """A loopback connection on an ephemeral port with its accepted client."""
    conn = Connection("127.0.0.1", EPHEMERAL_PORT)
    future = dial(conn)
    conn.connect()
    return conn, future.result(timeout=DIAL_TIMEOUT_SECS)


@pytest.fixture
def occupied_port() -> Iterator[int]:
    """A loopback port held by a listening socket for the duration of the test."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        yield blocker.getsockname()[1]
