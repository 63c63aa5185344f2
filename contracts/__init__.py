"""
Контракты DTO проекта разбора заказов из чата.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Мастер-данные: StoreMaster, ProductMaster (order_dto.py)
- Parsing -> UI/Submission: ParseResult, ParsedOrderLine (order_dto.py)
- Submission -> журнал: OrderRow (order_dto.py)
"""

from .order_dto import (
    LineStatus,
    StoreMaster,
    ProductMaster,
    ParsedOrderLine,
    ParseResult,
    OrderRow,
)

__all__ = [
    "LineStatus",
    "StoreMaster",
    "ProductMaster",
    "ParsedOrderLine",
    "ParseResult",
    "OrderRow",
]
