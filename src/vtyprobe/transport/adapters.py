# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable transports for tests and offline runs."""

from __future__ import annotations

import re

from .client import Transport


def _to_text(data: str | bytes) -> str:
    return data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests.

    ``greeting`` is readable right after connect. Every line written is looked up
    in ``replies`` and the matching reply becomes readable. Waiting for a pattern
    that is not pending behaves like a silent device (``TimeoutError``), or like
    a closed channel (``EOFError``) when ``hangup`` is set.
    """

    def __init__(
        self,
        greeting: str | bytes = "",
        replies: dict[str, str | bytes] | None = None,
        *,
        hangup: bool = False,
    ):
        self._pending = _to_text(greeting)
        self._replies = {line: _to_text(reply) for line, reply in (replies or {}).items()}
        self._hangup = hangup
        self.written: list[str] = []
        self.patterns: list[str] = []
        self.closed = False
        self.close_calls = 0

    def add(self, line: str, reply: str | bytes) -> None:
        self._replies[line] = _to_text(reply)

    def read_until(self, pattern: str, timeout: float) -> str:  # noqa: ARG002
        if self.closed:
            raise OSError("transport is closed")
        self.patterns.append(pattern)
        match = re.search(pattern, self._pending)
        if match is None:
            if self._hangup:
                raise EOFError("connection closed")
            raise TimeoutError("timed out")
        text = self._pending[: match.end()]
        self._pending = self._pending[match.end() :]
        return text

    def write(self, data: str) -> None:
        if self.closed:
            raise OSError("transport is closed")
        for line in data.splitlines():
            self.written.append(line)
            reply = self._replies.get(line)
            if reply is not None:
                self._pending += reply

    def close(self) -> None:
        self.close_calls += 1
        self.closed = True
