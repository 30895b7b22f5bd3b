# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe input/output models."""

from __future__ import annotations

from dataclasses import dataclass, field

from .verdict import Verdict

RawOutput = tuple[str, ...]


@dataclass(frozen=True)
class ProbeConfig:
    """Caller input for a single probe run; never mutated once built."""

    host: str
    port: int | str
    password: str = field(repr=False)
    command: str
    metric_name: str
    filter: str = ""
    escalate: bool = False
    warning: str | None = None
    critical: str | None = None
    emit_perfdata: bool = False

    @property
    def label(self) -> str:
        """Name used in the status message: the metric name, else the filter."""
        return self.metric_name or self.filter

    @property
    def has_thresholds(self) -> bool:
        return self.warning is not None or self.critical is not None


@dataclass(frozen=True)
class ProbeReport:
    """Outcome of one run, ready to be rendered as a status line."""

    verdict: Verdict
    message: str
    value: int | None = None
    perfdata_label: str | None = None

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    @classmethod
    def unknown(cls, message: str) -> ProbeReport:
        return cls(verdict=Verdict.UNKNOWN, message=message)
