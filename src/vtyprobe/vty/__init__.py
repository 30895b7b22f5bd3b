# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .session import (
    BAD_PASSWORDS,
    PASSWORD_PROMPT,
    PRIVILEGED_PROMPT,
    USER_PROMPT,
    SessionState,
    VtySession,
)

__all__ = [
    "BAD_PASSWORDS",
    "PASSWORD_PROMPT",
    "PRIVILEGED_PROMPT",
    "USER_PROMPT",
    "SessionState",
    "VtySession",
]
