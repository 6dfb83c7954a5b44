"""Test helpers for connection tests."""

from .sockets import DIAL_TIMEOUT_SECS, broken_stream, dial_when_listening, mock_listener

__all__ = [
    "DIAL_TIMEOUT_SECS",
    "broken_stream",
    "dial_when_listening",
    "mock_listener",
]
