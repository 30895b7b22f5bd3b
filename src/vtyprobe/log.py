# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for vtyprobe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("VTYPROBE_LOG_LEVEL", "WARNING").upper()

_VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def level_for_verbosity(verbosity: int) -> str | None:
    """Map a repeated -v count to a level name (None keeps the default)."""
    if verbosity <= 0:
        return None
    return _VERBOSITY_LEVELS.get(verbosity, "DEBUG")


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use.

    Records go to stderr; stdout is reserved for the status line.
    """
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["level_for_verbosity", "setup_logging"]
