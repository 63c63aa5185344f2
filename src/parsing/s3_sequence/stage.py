"""
Stage 3: Sequence Building

ЦКП: Плоская последовательность классифицированных строк.

Input: текст заказа, мастера магазинов и товаров
Output: SequenceResult(items, skipped_lines)

Пустые строки (SKIP) в последовательность не попадают.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from loguru import logger

from contracts.order_dto import StoreMaster, ProductMaster

from ..s1_normalization import Normalizer
from ..s2_classification import LineClassifier, ClassifiedLine, LineType


@dataclass(frozen=True)
class FlatItem:
    """Элемент плоской последовательности."""
    position: int           # Индекс в плоском списке
    line_number: int        # Номер строки в исходном тексте (с 0)
    classified: ClassifiedLine

    @property
    def line_type(self) -> LineType:
        return self.classified.line_type

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "line_number": self.line_number,
            **self.classified.to_dict(),
        }


@dataclass
class SequenceResult:
    """
    Результат Stage 3: Sequence Building.
    """
    items: List[FlatItem] = field(default_factory=list)
    skipped_lines: List[str] = field(default_factory=list)
    total_lines: int = 0

    def count(self, line_type: LineType) -> int:
        return sum(1 for item in self.items if item.line_type == line_type)

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "skipped_lines": self.skipped_lines,
            "total_lines": self.total_lines,
            "counts": {t.value: self.count(t) for t in LineType if t != LineType.SKIP},
        }


class SequenceStage:
    """
    Stage 3: Sequence Building.

    Нормализует и классифицирует каждую строку по порядку.
    """

    def __init__(
        self,
        normalizer: Optional[Normalizer] = None,
        line_classifier: Optional[LineClassifier] = None,
    ):
        self.normalizer = normalizer or Normalizer()
        self.line_classifier = line_classifier or LineClassifier()

    def process(
        self,
        text: str,
        stores: List[StoreMaster],
        products: List[ProductMaster],
    ) -> SequenceResult:
        raw_lines = text.split("\n")
        result = SequenceResult(total_lines=len(raw_lines))

        for line_number, raw_line in enumerate(raw_lines):
            normalized = self.normalizer.normalize(raw_line)
            classified = self.line_classifier.classify(normalized, stores, products)

            if classified.line_type == LineType.SKIP:
                # SKIP бывает только у пустой строки, поэтому список на практике пуст.
                # TODO: согласовать с заказчиком, какие строки должны попадать в skipped_lines
                if normalized:
                    result.skipped_lines.append(normalized)
                continue

            result.items.append(FlatItem(
                position=len(result.items),
                line_number=line_number,
                classified=classified,
            ))

        logger.debug(
            f"[Stage 3: Sequence] {result.total_lines} строк -> {len(result.items)} элементов "
            f"(store={result.count(LineType.STORE)}, product={result.count(LineType.PRODUCT)}, "
            f"unknown={result.count(LineType.UNKNOWN)}, boundary={result.count(LineType.BOUNDARY)})"
        )
        return result
