"""
Stage 5: Store Assignment

ЦКП: Эвристика вперёд/назад с учётом заполненных магазинов.
"""

from .stage import AssignmentStage, AssignmentResult, AssignmentRule, SegmentAssignment

__all__ = [
    "AssignmentStage",
    "AssignmentResult",
    "AssignmentRule",
    "SegmentAssignment",
]
