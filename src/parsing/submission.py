"""
Подготовка строк заказа к записи в журнал отгрузок.

ЦКП: List[OrderRow] для одной даты отгрузки.

Сам журнал (таблица на дату) здесь не пишется - только формируются строки.
"""

from datetime import datetime
from typing import Iterable, List, Optional
from loguru import logger

from contracts.order_dto import ParsedOrderLine, OrderRow, LineStatus


def build_order_rows(
    lines: Iterable[ParsedOrderLine],
    shipping_date: str,
    processor: str = "",
    registered_at: Optional[datetime] = None,
    include_errors: bool = False,
) -> List[OrderRow]:
    """
    Превращает принятые строки разбора в строки журнала.

    Args:
        lines: Строки разбора (обычно уже поправленные оператором)
        shipping_date: Дата отгрузки (ключ таблицы журнала)
        processor: Кто обработал (необязательно)
        registered_at: Время регистрации, по умолчанию сейчас
        include_errors: Брать и строки с ошибками (по умолчанию только ok)

    Returns:
        Строки журнала с seq_no 1..n в исходном порядке.
        В product_name подставляется alias, если он задан.
    """
    registered_at = registered_at or datetime.now()

    rows: List[OrderRow] = []
    skipped = 0
    for line in lines:
        if line.status != LineStatus.OK and not include_errors:
            skipped += 1
            continue
        rows.append(OrderRow(
            shipping_date=shipping_date,
            store_name=line.store_name,
            product_name=line.alias or line.product_name,
            quantity=line.quantity,
            supplier=line.supplier,
            processor=processor.strip(),
            registered_at=registered_at,
            seq_no=len(rows) + 1,
        ))

    if skipped:
        logger.warning(f"[Submission] Пропущено строк с ошибками: {skipped}")
    logger.debug(f"[Submission] Подготовлено {len(rows)} строк на {shipping_date}")
    return rows
