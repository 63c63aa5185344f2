"""
Домен Parsing: Разбор текста заказов из чата (LINE) в строки заказа.

Архитектура: 6-этапный пайплайн
- Stage 1: Normalization (полуширинные цифры, обрезка пробелов)
- Stage 2: Classification (skip / boundary / store / product / unknown)
- Stage 3: Sequence (плоский список непустых строк)
- Stage 4: Segmentation (группы товаров между магазинами и границами)
- Stage 5: Store Assignment (эвристика вперёд/назад)
- Stage 6: Result (ParsedOrderLine со статусами)
+ DateAlertDetector по всему тексту

Вход: текст, StoreMaster[], ProductMaster[]
Выход: contracts.ParseResult
"""

from src.parsing.pipeline import OrderParsingPipeline, PipelineResult, parse
from src.parsing.rules import RulesConfig
from src.parsing.submission import build_order_rows

# Stage exports
from src.parsing.s1_normalization import Normalizer
from src.parsing.s2_classification import LineClassifier, LineType, ClassifiedLine
from src.parsing.s3_sequence import SequenceStage, SequenceResult, FlatItem
from src.parsing.s4_segmentation import SegmentationStage, SegmentationResult, Segment
from src.parsing.s5_assignment import AssignmentStage, AssignmentResult, AssignmentRule
from src.parsing.s6_result import ResultStage
from src.parsing.metadata import DateAlertDetector, DateAlertResult

__all__ = [
    # Pipeline
    "OrderParsingPipeline",
    "PipelineResult",
    "parse",
    "RulesConfig",
    "build_order_rows",
    # Stages
    "Normalizer",
    "LineClassifier",
    "LineType",
    "ClassifiedLine",
    "SequenceStage",
    "SequenceResult",
    "FlatItem",
    "SegmentationStage",
    "SegmentationResult",
    "Segment",
    "AssignmentStage",
    "AssignmentResult",
    "AssignmentRule",
    "ResultStage",
    "DateAlertDetector",
    "DateAlertResult",
]
