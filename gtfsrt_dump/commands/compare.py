"""Compare mode: side-by-side diff of consecutive feed snapshots"""

from __future__ import annotations

import sys
from typing import TextIO

from ..models.diff import DiffResult
from ..services.config_manager import ConfigManager
from ..services.diff_formatter import DiffFormatter
from ..services.diff_generator import DiffGenerator
from ..services.feed_renderer import FeedDecodeError, read_feed
from .dump import print_lines

diff_generator = DiffGenerator()
diff_formatter = DiffFormatter()


def compare_pair(source_path: str, target_path: str, out: TextIO | None = None) -> DiffResult:
    """Diff two feed files, printing the banner and deltas only if they differ"""
    source_lines = read_feed(source_path)
    target_lines = read_feed(target_path)

    diff_result = diff_generator.generate_diff(
        source_lines,
        target_lines,
        source_name=source_path,
        target_name=target_path,
    )

    lines = diff_formatter.format_diff(
        diff_result,
        header=lambda: diff_formatter.format_banner(
            diff_result.source_name, diff_result.target_name
        ),
    )
    print_lines(lines, out)

    if ConfigManager.get_instance().verbose:
        print(
            f"[CompareCommand] {source_path} @ {target_path}: "
            f"{len(diff_result.changes())} changed blocks",
            file=sys.stderr,
        )

    return diff_result


def compare_files(paths: list[str], out: TextIO | None = None) -> int:
    """
    Compare each path with the next one (1 vs 2, 2 vs 3, ...) and return the
    number of pairs that could not be compared. Unreadable or undecodable
    files are reported and skipped.
    """
    failures = 0

    for source_path, target_path in zip(paths, paths[1:]):
        try:
            compare_pair(source_path, target_path, out)
        except OSError as e:
            print(f"[CompareCommand] {e}", file=sys.stderr)
            failures += 1
        except FeedDecodeError as e:
            print(f"[CompareCommand] {source_path} @ {target_path}: {e}", file=sys.stderr)
            failures += 1

    return failures
