"""Name and IPv4 address of the local host."""

from __future__ import annotations

import socket


def host_name() -> str:
    """The local host's name; raises OSError if it cannot be read."""
    return socket.gethostname()


def host_address() -> str:
    """The IPv4 address the local host's name resolves to."""
    return socket.gethostbyname(host_name())