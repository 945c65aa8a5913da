"""Plain mode: print the annotated rendering of each input"""

from __future__ import annotations

import sys
from typing import BinaryIO, Iterable, TextIO

from ..services.config_manager import ConfigManager
from ..services.feed_renderer import FeedDecodeError, read_feed, render_feed


def print_lines(lines: Iterable[str], out: TextIO | None = None):
    if out is None:
        out = sys.stdout
    for line in lines:
        print(line, file=out)


def dump_stream(stream: BinaryIO, out: TextIO | None = None, name: str = "<stdin>") -> bool:
    """Render one feed read from a binary stream. Returns False on decode failure."""
    data = stream.read()
    if ConfigManager.get_instance().verbose:
        print(f"[DumpCommand] Read {len(data)} bytes from {name}", file=sys.stderr)

    try:
        lines = render_feed(data)
    except FeedDecodeError as e:
        print(f"[DumpCommand] {name}: {e}", file=sys.stderr)
        return False

    print_lines(lines, out)
    return True


def dump_files(paths: list[str], out: TextIO | None = None) -> int:
    """
    Render each file in order and return how many failed to decode.

    A file that cannot be opened raises OSError and stops the batch;
    renderings already printed stay printed.
    """
    config = ConfigManager.get_instance()
    failures = 0

    for path in paths:
        try:
            lines = read_feed(path)
        except FeedDecodeError as e:
            print(f"[DumpCommand] {path}: {e}", file=sys.stderr)
            failures += 1
            continue

        if config.verbose:
            print(f"[DumpCommand] Rendered {len(lines)} lines from {path}", file=sys.stderr)
        print_lines(lines, out)

    return failures
