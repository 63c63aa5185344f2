"""
Stage 4: Segmentation

ЦКП: Сегменты товаров с ближайшими магазинами до и после.
"""

from .stage import SegmentationStage, SegmentationResult, Segment

__all__ = [
    "SegmentationStage",
    "SegmentationResult",
    "Segment",
]
