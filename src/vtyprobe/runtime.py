# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe runner: connect, authenticate, run one command, extract, evaluate."""

from __future__ import annotations

import codecs
import logging
from contextlib import closing

from .config import ProbeSettings, load_probe_settings
from .errors import ConfigurationError, ProbeError
from .extraction import compile_filter, extract_value
from .models import ProbeConfig, ProbeReport, RawOutput, Verdict
from .thresholds import evaluate, parse_range
from .transport.client import TransportFactory, open_transport
from .vty.session import VtySession

logger = logging.getLogger(__name__)


class ProbeRunner:
    """
    Runs the probe pipeline for a single ProbeConfig.

    The transport factory is injectable so the whole pipeline can run against a
    scripted device. Every ProbeError ends the run with an UNKNOWN report; the
    session is closed on every path once it has been opened.
    """

    def __init__(
        self,
        settings: ProbeSettings | None = None,
        transport_factory: TransportFactory | None = None,
    ):
        self.settings = settings or load_probe_settings()
        self.transport_factory = transport_factory or open_transport

    def validate(self, config: ProbeConfig) -> None:
        """Reject malformed settings, filter or range specs before touching the network."""
        try:
            codecs.lookup(self.settings.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown encoding {self.settings.encoding!r}") from exc
        compile_filter(config.filter)
        parse_range(config.warning)
        parse_range(config.critical)

    def collect(self, config: ProbeConfig) -> RawOutput:
        transport = self.transport_factory(config.host, config.port, self.settings)
        with closing(transport), VtySession(transport, self.settings) as session:
            session.login(config.password)
            if config.escalate:
                session.escalate()
            return session.run_command(config.command)

    def run(self, config: ProbeConfig) -> ProbeReport:
        logger.info("Running %r on %s:%s", config.command, config.host, config.port)
        try:
            self.validate(config)
            lines = self.collect(config)
            value = extract_value(lines, config.filter)
        except ProbeError as exc:
            logger.info("Probe failed: %s", exc)
            return ProbeReport.unknown(str(exc))

        verdict = evaluate(value, config.warning, config.critical) if config.has_thresholds else Verdict.OK
        return ProbeReport(
            verdict=verdict,
            message=f"{config.label}:{value}",
            value=value,
            perfdata_label=config.label if config.emit_perfdata else None,
        )
