# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for vtyprobe."""

from .probe import ProbeConfig, ProbeReport, RawOutput
from .verdict import Verdict

__all__ = [
    "ProbeConfig",
    "ProbeReport",
    "RawOutput",
    "Verdict",
]
