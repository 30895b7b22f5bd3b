# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket

from vtyprobe import config
from vtyprobe.errors import (
    ErrorCategory,
    ProbeConnectionError,
    categorize_exception,
    error_category_to_reason,
)


def test_probe_settings_defaults(monkeypatch):
    for name in ("VTYPROBE_TIMEOUT", "VTYPROBE_CONNECT_TIMEOUT", "VTYPROBE_ENABLE_COMMAND", "VTYPROBE_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_probe_settings()
    assert settings.timeout == 15.0
    assert settings.connect_timeout == 5.0
    assert settings.enable_command == "en"
    assert settings.encoding == "utf-8"
    assert settings.version_info == f"vtyprobe version : {settings.version}"


def test_probe_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("VTYPROBE_TIMEOUT", "30")
    monkeypatch.setenv("VTYPROBE_CONNECT_TIMEOUT", "2.5")
    monkeypatch.setenv("VTYPROBE_ENABLE_COMMAND", "enable")
    monkeypatch.setenv("VTYPROBE_ENCODING", "latin-1")

    settings = config.load_probe_settings()

    assert settings.timeout == 30.0
    assert settings.connect_timeout == 2.5
    assert settings.enable_command == "enable"
    assert settings.encoding == "latin-1"


def test_probe_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("VTYPROBE_TIMEOUT", "not-a-number")
    monkeypatch.setenv("VTYPROBE_CONNECT_TIMEOUT", "-1")
    monkeypatch.setenv("VTYPROBE_ENABLE_COMMAND", "   ")

    settings = config.load_probe_settings()

    assert settings.timeout == config.ProbeSettings.timeout
    assert settings.connect_timeout == config.ProbeSettings.connect_timeout
    assert settings.enable_command == "en"


def test_load_probe_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("VTYPROBE_TIMEOUT", "7")
    assert config.load_probe_settings().timeout == 7.0
    monkeypatch.setenv("VTYPROBE_TIMEOUT", "8")
    assert config.load_probe_settings().timeout == 8.0


def test_categorize_socket_exceptions():
    assert categorize_exception(socket.timeout("timed out")) == ErrorCategory.TIMEOUT
    assert categorize_exception(socket.gaierror(-2, "Name or service not known")) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionRefusedError(111, "refused")) == ErrorCategory.CONNECTION_REFUSED
    assert categorize_exception(ConnectionResetError(104, "reset")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("x")) == ErrorCategory.UNKNOWN_ERROR
    assert error_category_to_reason(None) == ""


def test_connection_error_message_names_endpoint():
    exc = ProbeConnectionError("router1", 2605, ErrorCategory.TIMEOUT)
    assert str(exc) == "Can't connect to router1:2605! (connect timeout)"
    assert exc.host == "router1"
    assert exc.port == 2605


def test_level_for_verbosity():
    from vtyprobe.log import level_for_verbosity

    assert level_for_verbosity(0) is None
    assert level_for_verbosity(1) == "INFO"
    assert level_for_verbosity(2) == "DEBUG"
    assert level_for_verbosity(5) == "DEBUG"


def test_unknown_encoding_env_falls_back(monkeypatch):
    monkeypatch.setenv("VTYPROBE_ENCODING", "nope")
    assert config.load_probe_settings().encoding == "utf-8"


def test_netmiko_exceptions_are_categorized():
    from netmiko.exceptions import ConnectionException, NetmikoTimeoutException

    assert categorize_exception(NetmikoTimeoutException("timed out")) == ErrorCategory.TIMEOUT
    assert categorize_exception(ConnectionException("failed")) == ErrorCategory.CONNECTION_ERROR
