"""
Parsing Pipeline - Оркестратор разбора заказа из чата.

Координирует выполнение этапов в строгом порядке:
1. Normalization → 2. Classification → 3. Sequence →
4. Segmentation → 5. Store Assignment → 6. Result
Параллельно по всему тексту: поиск упоминания даты.

Возвращает ParseResult (контракт Parsing -> UI/Submission).
Разбор никогда не падает на плохом тексте: всё уходит в статусы строк.
"""

import time
from dataclasses import dataclass
from typing import Optional, Sequence
from loguru import logger

from contracts.order_dto import StoreMaster, ProductMaster, ParseResult

from .domain.exceptions import ParsingValidationError
from .rules.config_loader import RulesConfig
from .s1_normalization import Normalizer
from .s2_classification import LineClassifier
from .s3_sequence import SequenceStage, SequenceResult
from .s4_segmentation import SegmentationStage, SegmentationResult
from .s5_assignment import AssignmentStage, AssignmentResult
from .s6_result import ResultStage
from .metadata.date_alert_detector import DateAlertDetector, DateAlertResult


@dataclass
class PipelineResult:
    """
    Полный результат пайплайна со всеми промежуточными данными.

    Используется для отладки и анализа.
    """
    # Финальный результат
    dto: ParseResult

    # Промежуточные результаты этапов
    sequence: Optional[SequenceResult] = None
    segmentation: Optional[SegmentationResult] = None
    assignment: Optional[AssignmentResult] = None
    date_alert: Optional[DateAlertResult] = None

    # Метрики
    processing_time_ms: float = 0.0
    stages_completed: int = 0

    def to_dict(self) -> dict:
        return {
            "dto": self.dto.model_dump(by_alias=True, mode="json") if self.dto else None,
            "sequence": self.sequence.to_dict() if self.sequence else None,
            "segmentation": self.segmentation.to_dict() if self.segmentation else None,
            "assignment": self.assignment.to_dict() if self.assignment else None,
            "date_alert": self.date_alert.to_dict() if self.date_alert else None,
            "processing_time_ms": self.processing_time_ms,
            "stages_completed": self.stages_completed,
        }


class OrderParsingPipeline:
    """
    Пайплайн разбора текста заказа.

    Не хранит состояния между вызовами (кроме кеша сортировки товаров
    в классификаторе, который на результат не влияет).
    """

    def __init__(
        self,
        rules: Optional[RulesConfig] = None,
        sequence_stage: Optional[SequenceStage] = None,
        segmentation_stage: Optional[SegmentationStage] = None,
        assignment_stage: Optional[AssignmentStage] = None,
        result_stage: Optional[ResultStage] = None,
        date_alert_detector: Optional[DateAlertDetector] = None,
    ):
        """
        Args:
            rules: Правила разбора (по умолчанию rules/ja_chat.yaml)
            Этапы опциональны: по умолчанию создаются стандартные.
        """
        self.rules = rules or RulesConfig.load()

        self.sequence_stage = sequence_stage or SequenceStage(
            normalizer=Normalizer(),
            line_classifier=LineClassifier(self.rules),
        )
        self.segmentation_stage = segmentation_stage or SegmentationStage()
        self.assignment_stage = assignment_stage or AssignmentStage()
        self.result_stage = result_stage or ResultStage()
        self.date_alert_detector = date_alert_detector or DateAlertDetector(self.rules)

        logger.debug(f"[OrderParsingPipeline] Инициализирован (правила: {self.rules.rules_code})")

    def process(
        self,
        text: str,
        stores: Sequence[StoreMaster],
        products: Sequence[ProductMaster],
    ) -> PipelineResult:
        """
        Разбирает текст заказа.

        Raises:
            ParsingValidationError: нарушен контракт вызова (None вместо мастера и т.п.)
        """
        stores, products = self._validate_input(text, stores, products)

        start_time = time.time()
        logger.info(
            f"[OrderParsingPipeline] Старт: {len(text)} символов, "
            f"{len(stores)} магазинов, {len(products)} товаров"
        )

        date_alert = self.date_alert_detector.detect(text)

        sequence = self.sequence_stage.process(text, stores, products)
        segmentation = self.segmentation_stage.process(sequence.items)
        assignment = self.assignment_stage.process(segmentation.segments)
        lines = self.result_stage.process(sequence.items, assignment)

        dto = ParseResult(
            lines=lines,
            date_alert=date_alert.keyword,
            skipped_lines=list(sequence.skipped_lines),
        )

        processing_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"[OrderParsingPipeline] Завершено за {processing_time_ms:.1f}ms: "
            f"{len(lines)} строк, ошибок: {dto.error_count}, date_alert={dto.date_alert}"
        )

        return PipelineResult(
            dto=dto,
            sequence=sequence,
            segmentation=segmentation,
            assignment=assignment,
            date_alert=date_alert,
            processing_time_ms=processing_time_ms,
            stages_completed=6,
        )

    @staticmethod
    def _validate_input(text, stores, products):
        if not isinstance(text, str):
            raise ParsingValidationError(
                message=f"text должен быть строкой, получено {type(text).__name__}",
                component="OrderParsingPipeline",
            )
        for name, table, model in (("stores", stores, StoreMaster), ("products", products, ProductMaster)):
            if table is None:
                raise ParsingValidationError(
                    message=f"{name}: мастер не передан (None)",
                    component="OrderParsingPipeline",
                )
            bad = [i for i, entry in enumerate(table) if not isinstance(entry, model)]
            if bad:
                raise ParsingValidationError(
                    message=f"{name}: записи {bad[:5]} не являются {model.__name__}",
                    component="OrderParsingPipeline",
                )
        return list(stores), list(products)


_default_pipeline: Optional[OrderParsingPipeline] = None


def parse(
    text: str,
    stores: Sequence[StoreMaster],
    products: Sequence[ProductMaster],
) -> ParseResult:
    """
    Точка входа движка: текст + мастера -> ParseResult.
    """
    global _default_pipeline
    if _default_pipeline is None:
        _default_pipeline = OrderParsingPipeline()
    return _default_pipeline.process(text, stores, products).dto
