# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Prompt-driven vty session.

A session waits on the channel until one of a set of prompt patterns shows up
and writes single command lines. It covers the fixed login sequence, the
optional privilege escalation and the execution of one command. Every wait is
bounded by a single deadline computed when the session is created.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from enum import Enum

from ..config import ProbeSettings, load_probe_settings
from ..errors import AuthenticationError, ProbeTimeoutError, ProtocolError
from ..models import RawOutput
from ..transport.client import Transport

logger = logging.getLogger(__name__)

PASSWORD_PROMPT = r"Password:"
USER_PROMPT = r"[^\r\n]*>[ \t]*\Z"
PRIVILEGED_PROMPT = r"[^\r\n]*#[ \t]*\Z"
BAD_PASSWORDS = r"% Bad passwords"


class SessionState(str, Enum):
    CLOSED = "CLOSED"
    CONNECTED = "CONNECTED"
    AUTHENTICATED = "AUTHENTICATED"
    PRIVILEGED = "PRIVILEGED"
    COMMAND_SENT = "COMMAND_SENT"


def _alternation(patterns: tuple[str, ...]) -> tuple[str, re.Pattern[str]]:
    """Build the channel pattern and a named-group twin telling which one matched.

    The channel pattern only uses non-capturing groups; netmiko splits its
    buffer on it.
    """
    channel = "|".join(f"(?:{pattern})" for pattern in patterns)
    named = re.compile("|".join(f"(?P<p{index}>{pattern})" for index, pattern in enumerate(patterns)))
    return channel, named


class VtySession:
    """Drives one transport for the duration of a probe run."""

    def __init__(
        self,
        transport: Transport,
        settings: ProbeSettings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.transport = transport
        self.settings = settings or load_probe_settings()
        self._clock = clock
        self._deadline = clock() + self.settings.timeout
        self.prompt = USER_PROMPT
        self.state = SessionState.CONNECTED

    def read_until(self, *patterns: str, what: str = "prompt") -> tuple[int, str, str]:
        """
        Wait until any of ``patterns`` shows up on the channel.

        Returns the index of the pattern that matched first in the stream, the
        text preceding the match and the matched text.
        """
        channel_pattern, named = _alternation(patterns)
        remaining = self._deadline - self._clock()
        if remaining <= 0:
            raise ProbeTimeoutError(f"Timeout after {self.settings.timeout:g}s waiting for {what}")
        try:
            text = self.transport.read_until(channel_pattern, remaining)
        except TimeoutError as exc:
            raise ProbeTimeoutError(f"Timeout after {self.settings.timeout:g}s waiting for {what}") from exc
        except EOFError as exc:
            raise ProtocolError(f"Connection closed by device while waiting for {what}") from exc
        except OSError as exc:
            raise ProtocolError(f"Read error while waiting for {what}: {exc}") from exc

        match = named.search(text)
        if match is None or match.lastgroup is None:
            raise ProtocolError(f"Unexpected output while waiting for {what}")
        return int(match.lastgroup[1:]), text[: match.start()], match.group(0)

    def write_line(self, line: str) -> None:
        try:
            self.transport.write(f"{line}\n")
        except OSError as exc:
            raise ProtocolError(f"Write error: {exc}") from exc

    def login(self, password: str) -> None:
        """Answer the password prompt and wait for the unprivileged prompt.

        Reaching a line ending in ``>`` counts as a successful login. A repeated
        password prompt or a "% Bad passwords" notice fails fast instead of
        running into the timeout.
        """
        self.read_until(PASSWORD_PROMPT, what="password prompt")
        self.write_line(password)
        index, _, matched = self.read_until(USER_PROMPT, PASSWORD_PROMPT, BAD_PASSWORDS, what="login prompt")
        if index != 0:
            raise AuthenticationError("Authentication failed: password rejected by device")
        logger.debug("Logged in, prompt %r", matched.strip())
        self.prompt = USER_PROMPT
        self.state = SessionState.AUTHENTICATED

    def escalate(self) -> None:
        self.write_line(self.settings.enable_command)
        index, _, matched = self.read_until(
            PRIVILEGED_PROMPT, PASSWORD_PROMPT, USER_PROMPT, what="privileged prompt"
        )
        if index == 1:
            raise AuthenticationError("Privilege escalation requires an enable password")
        if index == 2:
            raise ProtocolError(f"Privilege escalation refused by device ('{self.settings.enable_command}')")
        logger.debug("Privileges gained, prompt %r", matched.strip())
        self.prompt = PRIVILEGED_PROMPT
        self.state = SessionState.PRIVILEGED

    def run_command(self, command: str) -> RawOutput:
        """Send ``command`` and return its output lines without the echoed command."""
        self.write_line(command)
        self.state = SessionState.COMMAND_SENT
        _, before, _ = self.read_until(self.prompt, what="command completion")
        lines = before.splitlines()
        output = tuple(lines[1:])
        logger.debug("Command %r returned %d line(s)", command, len(output))
        return output

    def close(self) -> None:
        if self.state == SessionState.CLOSED:
            return
        try:
            self.transport.close()
        finally:
            self.state = SessionState.CLOSED

    def __enter__(self) -> VtySession:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
