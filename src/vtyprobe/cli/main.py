# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""vtyprobe CLI."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from ..config import ProbeSettings, load_probe_settings
from ..errors import FilterSpecError, ThresholdSpecError
from ..extraction import compile_filter
from ..log import level_for_verbosity, setup_logging
from ..models import ProbeConfig, Verdict
from ..report import emit
from ..runtime import ProbeRunner
from ..thresholds import parse_range

EPILOG = """\
examples:
  %(prog)s -H vty_addr -p bgpd -P secret -C "sh bgp ipv6 unicast statistics" \\
      -F "Total Prefixes" -n bgp_prefixes -c 100: -f
  %(prog)s -H vty_addr -p 2605 -P secret -C "sh mem" -F "Total heap allocated" -n heap_memory -f
"""


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with the UNKNOWN exit code."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(Verdict.UNKNOWN.exit_code, f"{self.prog}: error: {message}\n")


def _range_spec(value: str) -> str:
    try:
        parse_range(value)
    except ThresholdSpecError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _filter_spec(value: str) -> str:
    try:
        compile_filter(value)
    except FilterSpecError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid timeout {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("timeout must be positive")
    return parsed


def build_parser(settings: ProbeSettings | None = None) -> argparse.ArgumentParser:
    settings = settings or ProbeSettings()
    parser = PluginArgumentParser(
        prog=settings.prog_name,
        description="Check a key/numeric value pair printed by a router vty show command",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-H", "--host", required=True, help="Hostname")
    parser.add_argument("-p", "--port", required=True, help="Port to connect to (number or service name)")
    parser.add_argument("-P", "--password", required=True, help="VTYSH password")
    parser.add_argument(
        "-e", "--en", dest="escalate", action="store_true", help="Gain privileges (via 'en') before the command"
    )
    parser.add_argument("-C", "--command", required=True, help="Command to execute")
    parser.add_argument("-F", "--filter", default="", type=_filter_spec, help="grep filter selecting the output line")
    parser.add_argument("-n", "--name", required=True, help="Metric name used in the message and perfdata")
    parser.add_argument("-w", "--warning", type=_range_spec, help="Warning range")
    parser.add_argument("-c", "--critical", type=_range_spec, help="Critical range")
    parser.add_argument("-f", dest="perfdata", action="store_true", help="Print performance data")
    parser.add_argument(
        "-t", "--timeout", type=_positive_float, help=f"Seconds before the check times out (default {settings.timeout:g})"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more to stderr (repeatable)")
    parser.add_argument("-V", "--version", action="version", version=settings.version_info)
    return parser


def config_from_args(args: argparse.Namespace) -> ProbeConfig:
    return ProbeConfig(
        host=args.host,
        port=args.port,
        password=args.password,
        command=args.command,
        metric_name=args.name,
        filter=args.filter,
        escalate=args.escalate,
        warning=args.warning,
        critical=args.critical,
        emit_perfdata=args.perfdata,
    )


def main(argv: list[str] | None = None) -> int:
    settings = load_probe_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(level_for_verbosity(args.verbose))

    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout)

    report = ProbeRunner(settings=settings).run(config_from_args(args))
    return emit(report)


if __name__ == "__main__":
    raise SystemExit(main())
