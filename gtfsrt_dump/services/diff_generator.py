"""
Diff Generator Service - Classify line edits between two rendered feeds
"""

from __future__ import annotations

from rapidfuzz.distance import Indel

from ..models.diff import Chunk, Delta, DeltaType, DiffResult


class DiffGenerator:
    """Generate ordered deltas between two line sequences"""

    def generate_diff(
        self,
        source_lines: list[str],
        target_lines: list[str],
        source_name: str | None = None,
        target_name: str | None = None,
    ) -> DiffResult:
        """Generate structured diff from source and target lines"""
        return DiffResult(
            deltas=self._extract_deltas(list(source_lines), list(target_lines)),
            source_name=source_name,
            target_name=target_name,
        )

    def _edit_blocks(
        self,
        source: list[str],
        target: list[str],
    ) -> list[tuple[bool, int, int, int, int]]:
        """
        Minimal insert/delete script as (equal, i1, i2, j1, j2) blocks.
        Neighbouring non-equal opcodes are merged into one block.
        """
        blocks = []

        for op in Indel.opcodes(source, target):
            if op.src_start == op.src_end and op.dest_start == op.dest_end:
                continue

            equal = op.tag == "equal"
            if blocks and not equal and not blocks[-1][0]:
                _, i1, _, j1, _ = blocks[-1]
                blocks[-1] = (False, i1, op.src_end, j1, op.dest_end)
            else:
                blocks.append((equal, op.src_start, op.src_end, op.dest_start, op.dest_end))

        return blocks

    def _extract_deltas(
        self,
        source: list[str],
        target: list[str],
    ) -> list[Delta]:
        """Turn edit blocks into deltas, equal runs included"""
        deltas = []

        for equal, i1, i2, j1, j2 in self._edit_blocks(source, target):
            if equal:
                delta_type = DeltaType.EQUAL
            elif i1 == i2:
                delta_type = DeltaType.INSERT
            elif j1 == j2:
                delta_type = DeltaType.DELETE
            else:
                delta_type = DeltaType.CHANGE

            deltas.append(
                Delta(
                    type=delta_type,
                    source=Chunk(position=i1, lines=source[i1:i2]),
                    target=Chunk(position=j1, lines=target[j1:j2]),
                )
            )

        return deltas
