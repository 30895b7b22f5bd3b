# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
vtyprobe package entrypoint.

vtyprobe is a monitoring plugin that logs into a router's vty shell (Quagga,
FRR and similar), runs one show command, pulls a number out of the output and
reports an OK/WARNING/CRITICAL/UNKNOWN verdict with optional perfdata. The
stream is abstracted behind an injectable transport interface, and domain
objects are modeled with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import (
    AuthenticationError,
    ExtractionError,
    ProbeConnectionError,
    ProbeError,
    ProbeTimeoutError,
    ProtocolError,
)
from .extraction import extract_value
from .log import setup_logging
from .models import ProbeConfig, ProbeReport, Verdict
from .report import format_status_line
from .runtime import ProbeRunner
from .thresholds import evaluate
from .transport import NetmikoTransport, StubTransport, Transport, open_transport
from .version import __version__
from .vty import VtySession

__all__ = [
    "AuthenticationError",
    "ExtractionError",
    "ProbeConfig",
    "ProbeConnectionError",
    "ProbeError",
    "ProbeReport",
    "ProbeRunner",
    "ProbeSettings",
    "ProbeTimeoutError",
    "ProtocolError",
    "NetmikoTransport",
    "StubTransport",
    "Transport",
    "Verdict",
    "VtySession",
    "evaluate",
    "extract_value",
    "format_status_line",
    "load_probe_settings",
    "open_transport",
    "setup_logging",
    "__version__",
]
