"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DeltaType(str, Enum):
    """Kinds of edit between two rendered documents"""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    CHANGE = "change"


class Chunk(BaseModel):
    """A contiguous run of lines and where it starts in its document"""

    position: int  # 0-indexed
    lines: list[str] = []

    def size(self) -> int:
        return len(self.lines)


class Delta(BaseModel):
    """A single classified edit operation"""

    type: DeltaType
    source: Chunk
    target: Chunk


class DiffResult(BaseModel):
    """Ordered deltas covering both documents end to end"""

    deltas: list[Delta] = []
    source_name: str | None = None
    target_name: str | None = None

    @property
    def has_changes(self) -> bool:
        return any(delta.type != DeltaType.EQUAL for delta in self.deltas)

    def changes(self) -> list[Delta]:
        """Non-equal deltas, in document order"""
        return [delta for delta in self.deltas if delta.type != DeltaType.EQUAL]

    def source_lines(self) -> list[str]:
        """Rebuild the source document from the source chunks"""
        return [line for delta in self.deltas for line in delta.source.lines]

    def target_lines(self) -> list[str]:
        """Rebuild the target document from the target chunks"""
        return [line for delta in self.deltas for line in delta.target.lines]
