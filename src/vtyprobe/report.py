# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Status line rendering."""

from __future__ import annotations

import sys
from typing import TextIO

from .models import ProbeReport


def format_perfdata(label: str, value: int) -> str:
    quoted = label.replace("'", "''")
    return f"'{quoted}'={value}"


def format_status_line(report: ProbeReport) -> str:
    line = f"{report.verdict.value} {report.message}"
    if report.perfdata_label is not None and report.value is not None:
        line = f"{line} | {format_perfdata(report.perfdata_label, report.value)}"
    return line


def emit(report: ProbeReport, stream: TextIO | None = None) -> int:
    """Write the status line and return the exit code for the verdict."""
    out = stream or sys.stdout
    out.write(format_status_line(report) + "\n")
    out.flush()
    return report.exit_code


__all__ = ["emit", "format_perfdata", "format_status_line"]
