"""
Stage 3: Sequence Building

ЦКП: Плоский список непустых классифицированных строк.
"""

from .stage import SequenceStage, SequenceResult, FlatItem

__all__ = [
    "SequenceStage",
    "SequenceResult",
    "FlatItem",
]
