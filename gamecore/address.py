"""IPv4 endpoint: a 32-bit address in host order and a port."""

from __future__ import annotations

import socket
from dataclasses import dataclass

DEFAULT_ADDRESS = (127 << 24) | 1
DEFAULT_PORT = 31415


@dataclass(frozen=True)
class Address:
    """An IPv4 address and port; defaults to 127.0.0.1:31415."""

    address: int = DEFAULT_ADDRESS
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not 0 <= self.address <= 0xFFFFFFFF:
            raise ValueError(f"address {self.address} is not a 32-bit value")
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port {self.port} is out of range")

    @classmethod
    def from_string(cls, text: str, port: int) -> Address:
        """Parse dotted IPv4 notation."""
        try:
            packed = socket.inet_aton(text)
        except OSError as error:
            raise ValueError(f"invalid IPv4 address: {text!r}") from error
        return cls(int.from_bytes(packed, "big"), port)

    @classmethod
    def from_octets(cls, a: int, b: int, c: int, d: int, port: int) -> Address:
        octets = (a, b, c, d)
        if any(not 0 <= octet <= 255 for octet in octets):
            raise ValueError(f"octets must lie in 0..255, got {octets}")
        return cls(int.from_bytes(bytes(octets), "big"), port)

    @property
    def a(self) -> int:
        return (self.address >> 24) & 0xFF

    @property
    def b(self) -> int:
        return (self.address >> 16) & 0xFF

    @property
    def c(self) -> int:
        return (self.address >> 8) & 0xFF

    @property
    def d(self) -> int:
        return self.address & 0xFF

    def ip_string(self) -> str:
        return f"{self.a}.{self.b}.{self.c}.{self.d}"

    def __str__(self) -> str:
        return f"{self.ip_string()}:{self.port}"