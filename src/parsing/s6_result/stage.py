"""
Stage 6: Result Building

ЦКП: Строки ParsedOrderLine со статусом, в исходном порядке.

Input: SequenceResult.items, AssignmentResult
Output: List[ParsedOrderLine]

STORE и BOUNDARY строк результата не дают.
"""

from typing import List, Optional
from loguru import logger

from contracts.order_dto import ParsedOrderLine, LineStatus, StoreMaster

from ..s2_classification import LineType
from ..s3_sequence import FlatItem
from ..s5_assignment import AssignmentResult


class ResultStage:
    """
    Stage 6: Result Building.
    """

    def process(self, items: List[FlatItem], assignment: AssignmentResult) -> List[ParsedOrderLine]:
        lines: List[ParsedOrderLine] = []

        for item in items:
            if item.classified.is_separator:
                continue

            store = self._resolve_store(items, assignment.store_for(item.position))
            lines.append(self._build_line(item, store))

        logger.debug(
            f"[Stage 6: Result] {len(lines)} строк, "
            f"ошибок: {sum(1 for line in lines if line.status != LineStatus.OK)}"
        )
        return lines

    @staticmethod
    def _resolve_store(items: List[FlatItem], store_position: Optional[int]) -> Optional[StoreMaster]:
        if store_position is None:
            return None
        return items[store_position].classified.store

    @staticmethod
    def _build_line(item: FlatItem, store: Optional[StoreMaster]) -> ParsedOrderLine:
        c = item.classified
        store_name = store.formal_name if store else ""

        if c.line_type == LineType.PRODUCT:
            return ParsedOrderLine(
                store_name=store_name,
                product_name=c.product.product_name,
                quantity=c.quantity,
                alias=c.product.alias,
                supplier=c.product.supplier,
                status=LineStatus.OK if store else LineStatus.STORE_ERROR,
                raw_text=c.raw_text,
            )

        if c.line_type == LineType.UNKNOWN:
            # Исходный текст в product_name, чтобы пользователь мог перебить товар
            return ParsedOrderLine(
                store_name=store_name,
                product_name=c.raw_text,
                quantity="",
                alias="",
                supplier="",
                status=LineStatus.PRODUCT_ERROR if store else LineStatus.BOTH_ERROR,
                raw_text=c.raw_text,
            )

        raise ValueError(f"Unexpected line type in result: {c.line_type}")
