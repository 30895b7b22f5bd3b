# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""netmiko-backed Transport implementation."""

from __future__ import annotations

import logging
from typing import Any

from netmiko.base_connection import BaseConnection
from netmiko.exceptions import ConnectionException, NetmikoTimeoutException, ReadTimeout

from ..config import ProbeSettings, load_probe_settings
from ..errors import ErrorCategory, ProbeConnectionError, categorize_exception
from .client import Transport, resolve_port

logger = logging.getLogger(__name__)

DEVICE_TYPE = "generic_telnet"


class VtyTelnetConnection(BaseConnection):
    """
    Telnet channel to a vty port.

    netmiko opens the channel and handles telnet option negotiation. Login and
    prompt handling are left to VtySession, which needs to tell a rejected
    password apart from a slow device.
    """

    def telnet_login(self, *args: Any, **kwargs: Any) -> str:  # noqa: ARG002
        return ""

    def session_preparation(self) -> None:
        return None


class NetmikoTransport(Transport):
    def __init__(self, connection: BaseConnection):
        self._connection = connection
        self._closed = False

    @classmethod
    def connect(cls, host: str, port: int | str, settings: ProbeSettings | None = None) -> NetmikoTransport:
        settings = settings or load_probe_settings()
        try:
            port_number = resolve_port(port)
        except (OSError, ValueError, OverflowError) as exc:
            raise ProbeConnectionError(host, port, ErrorCategory.SERVICE_ERROR, str(exc)) from exc

        logger.debug("Connecting to %s:%s (timeout %.1fs)", host, port_number, settings.connect_timeout)
        try:
            connection = VtyTelnetConnection(
                host=host,
                port=port_number,
                device_type=DEVICE_TYPE,
                timeout=settings.connect_timeout,
                encoding=settings.encoding,
            )
        except (OSError, NetmikoTimeoutException, ConnectionException) as exc:
            raise ProbeConnectionError(host, port, categorize_exception(exc), str(exc)) from exc
        return cls(connection)

    def read_until(self, pattern: str, timeout: float) -> str:
        try:
            return self._connection.read_until_pattern(pattern=pattern, read_timeout=max(timeout, 0.01))
        except ReadTimeout as exc:
            raise TimeoutError(str(exc)) from exc

    def write(self, data: str) -> None:
        self._connection.write_channel(data)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._connection.disconnect()
