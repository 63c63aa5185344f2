"""
Stage 4: Segmentation

ЦКП: Группы строк товаров, разделённые магазинами и границами сообщений.

Input: SequenceResult.items
Output: SegmentationResult(segments, store_positions)

Асимметрия:
- сегменты режутся и магазином, и границей (BOUNDARY)
- поиск ближайшего магазина (store_before / store_after) границы игнорирует
"""

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from ..s2_classification import LineType
from ..s3_sequence import FlatItem


@dataclass(frozen=True)
class Segment:
    """Максимальная серия PRODUCT/UNKNOWN между разделителями."""
    index: int
    items: tuple                        # FlatItem в исходном порядке
    store_before: Optional[int] = None  # Позиция ближайшего STORE до сегмента
    store_after: Optional[int] = None   # Позиция ближайшего STORE после сегмента

    @property
    def has_product(self) -> bool:
        return any(item.line_type == LineType.PRODUCT for item in self.items)

    @property
    def start(self) -> int:
        return self.items[0].position

    @property
    def end(self) -> int:
        return self.items[-1].position

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "positions": [item.position for item in self.items],
            "store_before": self.store_before,
            "store_after": self.store_after,
            "has_product": self.has_product,
        }


@dataclass
class SegmentationResult:
    """
    Результат Stage 4: Segmentation.
    """
    segments: List[Segment] = field(default_factory=list)
    store_positions: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "store_positions": self.store_positions,
        }


class SegmentationStage:
    """
    Stage 4: Segmentation.
    """

    def process(self, items: List[FlatItem]) -> SegmentationResult:
        store_positions = [item.position for item in items if item.line_type == LineType.STORE]
        result = SegmentationResult(store_positions=store_positions)

        run: List[FlatItem] = []
        for item in items:
            if item.classified.is_separator:
                self._close_run(run, store_positions, result)
                run = []
            else:
                run.append(item)
        self._close_run(run, store_positions, result)

        logger.debug(
            f"[Stage 4: Segmentation] {len(result.segments)} сегментов, "
            f"{len(store_positions)} магазинов"
        )
        return result

    def _close_run(self, run: List[FlatItem], store_positions: List[int], result: SegmentationResult) -> None:
        if not run:
            return
        start, end = run[0].position, run[-1].position
        segment = Segment(
            index=len(result.segments),
            items=tuple(run),
            store_before=self._nearest_before(store_positions, start),
            store_after=self._nearest_after(store_positions, end),
        )
        result.segments.append(segment)
        logger.trace(
            f"[Stage 4: Segmentation] Сегмент {segment.index}: [{start}..{end}] "
            f"before={segment.store_before} after={segment.store_after}"
        )

    @staticmethod
    def _nearest_before(store_positions: List[int], position: int) -> Optional[int]:
        i = bisect_left(store_positions, position)
        return store_positions[i - 1] if i > 0 else None

    @staticmethod
    def _nearest_after(store_positions: List[int], position: int) -> Optional[int]:
        i = bisect_left(store_positions, position)
        return store_positions[i] if i < len(store_positions) else None
