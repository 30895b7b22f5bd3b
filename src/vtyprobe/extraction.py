# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Numeric value extraction from command output."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from .errors import ExtractionError, FilterSpecError

NO_MATCH_MESSAGE = "No output match with the filter given"
NO_DIGITS_MESSAGE = "Matched output line contains no numeric value"

_NON_DIGITS = re.compile(r"[^0-9]")


@lru_cache(maxsize=64)
def compile_filter(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise FilterSpecError(f"Invalid filter {pattern!r}: {exc}") from exc


def first_match(lines: Iterable[str], pattern: str) -> str | None:
    """Return the first line the (unanchored, case-sensitive) filter matches.

    Later matches are ignored, so an ambiguous filter silently picks the first hit.
    """
    compiled = compile_filter(pattern)
    for line in lines:
        if compiled.search(line):
            return line
    return None


def strip_non_digits(text: str) -> str:
    return _NON_DIGITS.sub("", text)


def extract_value(lines: Iterable[str], pattern: str) -> int:
    line = first_match(lines, pattern)
    if line is None:
        raise ExtractionError(NO_MATCH_MESSAGE)
    digits = strip_non_digits(line)
    if not digits:
        raise ExtractionError(NO_DIGITS_MESSAGE)
    return int(digits)


__all__ = [
    "NO_DIGITS_MESSAGE",
    "NO_MATCH_MESSAGE",
    "compile_filter",
    "extract_value",
    "first_match",
    "strip_non_digits",
]
