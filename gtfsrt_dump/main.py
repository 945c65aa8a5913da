"""
GTFS-realtime Dump - Command line entry point
"""

from __future__ import annotations

import argparse
import sys

from .commands import compare, dump
from .services.config_manager import FAILURE_EXIT_STATUS, USAGE_EXIT_STATUS, ConfigManager


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with the tool's usage status instead of 2"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_STATUS, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="rtd",
        description="Decode GTFS-realtime Feed Message.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-d", dest="stdin", action="store_true", help="Read from standard input.")
    mode.add_argument(
        "-w",
        dest="diff",
        action="store_true",
        help="Diff each files. (at least 2 files required.)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr.")
    parser.add_argument("files", nargs="*", help="Feed message files.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the tool and return its exit status"""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    args = parser.parse_args(argv)

    config = ConfigManager.get_instance()
    if args.verbose:
        config.set("verbose", True)

    if args.stdin:
        ok = dump.dump_stream(sys.stdin.buffer)
        return 0 if ok else FAILURE_EXIT_STATUS

    if args.diff:
        if len(args.files) < 2:
            parser.print_help()
            return USAGE_EXIT_STATUS
        failures = compare.compare_files(args.files)
        return FAILURE_EXIT_STATUS if failures else 0

    if not args.files:
        parser.print_help()
        return 0

    try:
        failures = dump.dump_files(args.files)
    except OSError as e:
        print(f"[rtd] {e}", file=sys.stderr)
        return FAILURE_EXIT_STATUS

    return FAILURE_EXIT_STATUS if failures else 0


if __name__ == "__main__":
    sys.exit(main())
