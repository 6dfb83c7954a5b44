"""Exception hierarchy for single-use connections."""

from __future__ import annotations


class OneShotError(Exception):
    """
    Base exception for misuse of a single-use connection.

    OS failures are never wrapped in this hierarchy. They surface as the
    OSError raised by the socket module, errno and message intact.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ConnectionReuseError(OneShotError):
    """Raised when connect() is called on a connection that was already closed."""

    def __init__(self) -> None:
        super().__init__("Cannot reuse a Connection.")


class ConnectionBusyError(OneShotError):
    """
    Raised when connect() is called while an accepted stream is still held.

    Attributes:
        address: Address the connection was created for.
        port: Port the held stream was accepted on.
    """

    def __init__(self, address: str, port: str) -> None:
        self.address = address
        self.port = port
        super().__init__(f"Connection on {address}:{port} already holds an accepted stream")
