# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Channel transport abstraction and factory."""

from __future__ import annotations

import socket
from collections.abc import Callable
from typing import Protocol

from ..config import ProbeSettings, load_probe_settings


class Transport(Protocol):
    """Minimal protocol for a text channel to a vty endpoint.

    ``read_until`` returns everything up to and including the first match of
    ``pattern`` and keeps the rest for the next call. It raises ``TimeoutError``
    when the pattern did not show up within ``timeout`` seconds and ``EOFError``
    once the peer closed the channel. ``close`` may be called more than once.
    """

    def read_until(self, pattern: str, timeout: float) -> str: ...

    def write(self, data: str) -> None: ...

    def close(self) -> None: ...


TransportFactory = Callable[[str, int | str, ProbeSettings], Transport]


def resolve_port(port: int | str) -> int:
    """Return a TCP port number for a numeric port or a services-database name.

    Raises ``OSError`` for unknown service names and ``ValueError`` for numbers
    outside the TCP port range.
    """
    if isinstance(port, int):
        number = port
    else:
        text = str(port).strip()
        if not text.isdecimal() or not text.isascii():
            return socket.getservbyname(text, "tcp")
        number = int(text)
    if not 0 < number < 65536:
        raise ValueError(f"port {number} out of range")
    return number


def open_transport(host: str, port: int | str, settings: ProbeSettings | None = None) -> Transport:
    """Factory for the default netmiko-backed transport."""
    from .netmiko_transport import NetmikoTransport

    return NetmikoTransport.connect(host, port, settings or load_probe_settings())
