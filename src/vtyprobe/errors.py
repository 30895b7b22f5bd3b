# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
from enum import Enum

from netmiko.exceptions import ConnectionException, NetmikoTimeoutException


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    CONNECTION_REFUSED = "CONNECTION_REFUSED"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    SERVICE_ERROR = "SERVICE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map socket-level and netmiko exceptions to ErrorCategory.
    """
    if isinstance(exc, NetmikoTimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, ConnectionException):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (socket.timeout, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, ConnectionRefusedError):
        return ErrorCategory.CONNECTION_REFUSED

    if isinstance(exc, (ConnectionError, OSError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "connect timeout",
        ErrorCategory.CONNECTION_REFUSED: "connection refused",
        ErrorCategory.CONNECTION_ERROR: "network connectivity issue",
        ErrorCategory.DNS_ERROR: "name resolution failure",
        ErrorCategory.SERVICE_ERROR: "unknown service name",
        ErrorCategory.UNKNOWN_ERROR: "network error",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "network error")


class ProbeError(Exception):
    """Base class for every terminal probe failure (reported as UNKNOWN)."""


class ProbeConnectionError(ProbeError):
    """The vty endpoint could not be reached."""

    def __init__(self, host: str, port: int | str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR, detail: str = ""):
        self.host = host
        self.port = port
        self.category = category
        self.detail = detail
        reason = error_category_to_reason(category) or detail
        super().__init__(f"Can't connect to {host}:{port}! ({reason})" if reason else f"Can't connect to {host}:{port}!")


class ProtocolError(ProbeError):
    """The device did not produce the expected prompt."""


class ProbeTimeoutError(ProtocolError):
    """The overall operation deadline expired while waiting on the device."""


class AuthenticationError(ProtocolError):
    """The device rejected the supplied password."""


class ConfigurationError(ProbeError):
    """Probe settings are unusable (for example an unknown text encoding)."""


class ExtractionError(ProbeError):
    """No numeric value could be extracted from the command output."""


class ThresholdSpecError(ProbeError, ValueError):
    """A warning/critical range specification could not be parsed."""


class FilterSpecError(ProbeError, ValueError):
    """The output filter is not a valid regular expression."""


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "ErrorCategory",
    "ExtractionError",
    "FilterSpecError",
    "ProbeConnectionError",
    "ProbeError",
    "ProbeTimeoutError",
    "ProtocolError",
    "ThresholdSpecError",
    "categorize_exception",
    "error_category_to_reason",
]
