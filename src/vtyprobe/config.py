# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for vtyprobe."""

import codecs
import os
from dataclasses import dataclass

from .version import __version__

PROG_NAME = "vtyprobe"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        parsed = float(value) if value is not None else default
        return parsed if parsed > 0 else default
    except ValueError:
        return default


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _encoding_env(name: str, default: str) -> str:
    value = _str_env(name, default)
    try:
        codecs.lookup(value)
    except LookupError:
        return default
    return value


@dataclass(frozen=True)
class ProbeSettings:
    """Probe defaults, passed explicitly into the pipeline."""

    timeout: float = 15.0
    connect_timeout: float = 5.0
    enable_command: str = "en"
    encoding: str = "utf-8"
    read_size: int = 4096
    prog_name: str = PROG_NAME
    version: str = __version__

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_float_env("VTYPROBE_TIMEOUT", cls.timeout),
            connect_timeout=_float_env("VTYPROBE_CONNECT_TIMEOUT", cls.connect_timeout),
            enable_command=_str_env("VTYPROBE_ENABLE_COMMAND", cls.enable_command),
            encoding=_encoding_env("VTYPROBE_ENCODING", cls.encoding),
        )

    @property
    def version_info(self) -> str:
        return f"{self.prog_name} version : {self.version}"


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
