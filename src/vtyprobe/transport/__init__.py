# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport exports."""

from .adapters import StubTransport
from .client import Transport, TransportFactory, open_transport, resolve_port
from .netmiko_transport import NetmikoTransport, VtyTelnetConnection

__all__ = [
    "NetmikoTransport",
    "StubTransport",
    "Transport",
    "TransportFactory",
    "VtyTelnetConnection",
    "open_transport",
    "resolve_port",
]
