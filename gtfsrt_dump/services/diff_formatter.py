"""
Diff Formatter - Side-by-side text layout for diff results
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

from ..models.diff import Delta, DeltaType, DiffResult
from .config_manager import SOURCE_COLUMN_WIDTH

HeaderCallback = Callable[[], Optional[str]]


class DiffFormatter:
    """Render non-equal deltas as position markers plus source | target rows"""

    def __init__(self, column_width: int = SOURCE_COLUMN_WIDTH):
        self.column_width = column_width

    def format_banner(self, source_name: str, target_name: str) -> str:
        """Banner naming the two inputs being compared"""
        return f"{source_name:>{self.column_width}} @ {target_name}"

    def format_marker(self, delta: Delta) -> str:
        """Position marker line for a non-equal delta"""
        position = f"{delta.source.position:>{self.column_width}}"

        if delta.type == DeltaType.CHANGE:
            return f"{position} =>"
        elif delta.type == DeltaType.DELETE:
            return f"{position} - {delta.target.position}"
        elif delta.type == DeltaType.INSERT:
            return f"{position} + {delta.target.position}"
        else:
            raise ValueError(f"No marker for delta type: {delta.type}")

    def format_rows(self, delta: Delta) -> list[str]:
        """Zip source and target lines, padding the shorter side with ''"""
        return [
            f"{source_line:<{self.column_width}} | {target_line}"
            for source_line, target_line in zip_longest(
                delta.source.lines, delta.target.lines, fillvalue=""
            )
        ]

    def format_diff(
        self,
        diff_result: DiffResult,
        header: HeaderCallback | None = None,
    ) -> list[str]:
        """
        Format every non-equal delta. The header callback runs at most once,
        right before the first non-equal delta; a returned string becomes
        the first output line.
        """
        lines = []
        header_printed = False

        for delta in diff_result.deltas:
            if delta.type == DeltaType.EQUAL:
                continue

            if not header_printed:
                header_printed = True
                if header is not None:
                    banner = header()
                    if banner is not None:
                        lines.append(banner)

            lines.append(self.format_marker(delta))
            lines.extend(self.format_rows(delta))

        return lines
