"""
Stage 2: Line Classification

ЦКП: Тип каждой строки чата (skip / boundary / store / product / unknown).
"""

from .line_types import LineType, ClassifiedLine
from .line_classifier import LineClassifier
from .store_matcher import StoreMatcher

__all__ = [
    "LineType",
    "ClassifiedLine",
    "LineClassifier",
    "StoreMatcher",
]
