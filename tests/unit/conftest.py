# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from vtyprobe.transport import StubTransport

GREETING = (
    "\r\nHello, this is Quagga (version 0.99.22.4).\r\n"
    "Copyright 1996-2005 Kunihiro Ishiguro, et al.\r\n\r\n\r\n"
    "User Access Verification\r\n\r\nPassword: "
)

SHOW_MEMORY = (
    "sh mem\r\n"
    "System allocator statistics:\r\n"
    "  Total heap allocated: 4096 bytes\r\n"
    "  Total Prefixes 150 used\r\n"
    "bgpd> "
)


@pytest.fixture
def device():
    """A scripted bgpd vty accepting the password 'secret'."""
    return StubTransport(
        greeting=GREETING,
        replies={
            "secret": "\r\nbgpd> ",
            "sh mem": SHOW_MEMORY,
            "en": "en\r\nbgpd# ",
            "sh ip bgp summary": (
                "sh ip bgp summary\r\n"
                "BGP router identifier 10.0.0.1, local AS number 65000\r\n"
                "RIB entries 42, using 4032 bytes of memory\r\n"
                "bgpd# "
            ),
        },
    )
