"""
Stage 1: Normalization

ЦКП: Полуширинные цифры и обрезка пробелов.
"""

from .stage import Normalizer

__all__ = [
    "Normalizer",
]
