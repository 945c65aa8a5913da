"""Models module - Pydantic data models"""

from .diff import Chunk, Delta, DeltaType, DiffResult

__all__ = [
    # Diff models
    "Chunk",
    "Delta",
    "DeltaType",
    "DiffResult",
]
