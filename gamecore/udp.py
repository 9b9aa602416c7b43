"""A non-blocking UDP socket exchanging datagrams with ``Address`` endpoints."""

from __future__ import annotations

import socket

from .address import Address


class UdpSocket:
    """A UDP socket bound to all interfaces; usable as a context manager."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None

    def __enter__(self) -> UdpSocket:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def open(self, port: int) -> None:
        """Bind to the given port and switch to non-blocking mode."""
        if self._sock is not None:
            raise RuntimeError("socket is already open")
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        try:
            sock.bind(("", port))
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        self._sock = sock

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def is_open(self) -> bool:
        return self._sock is not None

    def _require_open(self) -> socket.socket:
        if self._sock is None:
            raise RuntimeError("socket is not open")
        return self._sock

    def send(self, destination: Address, data: bytes) -> bool:
        """Send one datagram; True if every byte went out."""
        payload = bytes(data)
        if not payload:
            raise ValueError("cannot send an empty datagram")
        sock = self._require_open()
        try:
            sent = sock.sendto(payload, (destination.ip_string(), destination.port))
        except BlockingIOError:
            return False
        return sent == len(payload)

    def receive(self, size: int = 1024) -> tuple[Address, bytes] | None:
        """Return the next datagram and its sender, or None if none is waiting."""
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        sock = self._require_open()
        try:
            payload, (host, port) = sock.recvfrom(size)
        except (BlockingIOError, ConnectionResetError):
            return None
        if not payload:
            return None
        return Address.from_string(host, port), payload