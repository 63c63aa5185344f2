"""
Stage 6: Result Building

ЦКП: ParsedOrderLine со статусами ok / store-error / product-error / both-error.
"""

from .stage import ResultStage

__all__ = [
    "ResultStage",
]
