"""
Stage 5: Store Assignment

ЦКП: Магазин для каждого сегмента.

Input: SegmentationResult.segments
Output: AssignmentResult(assignments: позиция строки -> позиция магазина)

Алгоритм (сегменты строго по порядку, "заполненные" магазины накапливаются):
1. store_before есть и ещё не заполнен -> store_before (вперёд)
2. иначе store_after есть -> store_after (назад: "товары, потом магазин")
3. иначе store_before есть -> store_before (довесок к последнему магазину)
4. иначе магазина нет
Магазин становится заполненным, только если в сегменте есть PRODUCT.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set
from loguru import logger

from ..s4_segmentation import Segment


class AssignmentRule(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    FALLBACK = "fallback"
    UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class SegmentAssignment:
    segment_index: int
    store_position: Optional[int]
    rule: AssignmentRule

    def to_dict(self) -> dict:
        return {
            "segment_index": self.segment_index,
            "store_position": self.store_position,
            "rule": self.rule.value,
        }


@dataclass
class AssignmentResult:
    """
    Результат Stage 5: Store Assignment.
    """
    segments: List[SegmentAssignment] = field(default_factory=list)
    # Позиция элемента (PRODUCT/UNKNOWN) -> позиция STORE
    assignments: Dict[int, Optional[int]] = field(default_factory=dict)
    filled: Set[int] = field(default_factory=set)

    def store_for(self, position: int) -> Optional[int]:
        return self.assignments.get(position)

    def to_dict(self) -> dict:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "filled": sorted(self.filled),
        }


class AssignmentStage:
    """
    Stage 5: Store Assignment.

    Решение для сегмента i зависит от заполненности после сегментов 0..i-1,
    поэтому обработка только последовательная.
    """

    def process(self, segments: List[Segment]) -> AssignmentResult:
        result = AssignmentResult()

        for segment in segments:
            store_position, rule = self._choose_store(segment, result.filled)

            result.segments.append(SegmentAssignment(
                segment_index=segment.index,
                store_position=store_position,
                rule=rule,
            ))
            for item in segment.items:
                result.assignments[item.position] = store_position

            # Сегмент только из UNKNOWN не блокирует магазин для настоящих товаров
            if store_position is not None and segment.has_product:
                result.filled.add(store_position)

            logger.trace(
                f"[Stage 5: Assignment] Сегмент {segment.index} -> {store_position} ({rule.value})"
            )

        unassigned = sum(1 for s in result.segments if s.rule == AssignmentRule.UNASSIGNED)
        logger.debug(
            f"[Stage 5: Assignment] {len(result.segments)} сегментов, "
            f"заполнено магазинов: {len(result.filled)}, без магазина: {unassigned}"
        )
        return result

    @staticmethod
    def _choose_store(segment: Segment, filled: Set[int]):
        if segment.store_before is not None and segment.store_before not in filled:
            return segment.store_before, AssignmentRule.FORWARD
        if segment.store_after is not None:
            return segment.store_after, AssignmentRule.BACKWARD
        if segment.store_before is not None:
            return segment.store_before, AssignmentRule.FALLBACK
        return None, AssignmentRule.UNASSIGNED
