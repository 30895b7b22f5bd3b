# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Threshold evaluation using monitoring-plugin range specs.

A range spec describes the *acceptable* interval: ``10`` (0..10), ``10:``
(10..inf), ``~:10`` (-inf..10), ``10:20``, and ``@10:20`` to alert when the
value lies inside the interval. Parsing and matching are delegated to
``nagiosplugin.Range`` so existing alerting configurations keep their meaning.
"""

from __future__ import annotations

import nagiosplugin

from .errors import ThresholdSpecError
from .models import Verdict


def parse_range(spec: str | None) -> nagiosplugin.Range | None:
    if spec is None:
        return None
    try:
        return nagiosplugin.Range(spec)
    except ValueError as exc:
        raise ThresholdSpecError(f"Invalid range spec {spec!r}: {exc}") from exc


def breaches(value: int | float, spec: str | None) -> bool:
    """True when ``value`` falls outside the acceptable range (never for a missing spec)."""
    threshold = parse_range(spec)
    if threshold is None:
        return False
    return not threshold.match(value)


def evaluate(value: int | float, warning: str | None = None, critical: str | None = None) -> Verdict:
    if breaches(value, critical):
        return Verdict.CRITICAL
    if breaches(value, warning):
        return Verdict.WARNING
    return Verdict.OK


__all__ = ["breaches", "evaluate", "parse_range"]
