#!/usr/bin/env python3
"""
Точка входа: разбор текста заказа из чата.

Использование:
    # Текст из файла, мастера из data/masters.yaml
    python scripts/parse_order.py order.txt

    # Текст из stdin, свои мастера
    cat order.txt | python scripts/parse_order.py --masters masters.json

    # Строки для журнала отгрузок (только ok)
    python scripts/parse_order.py order.txt --shipping-date 2026-10-19 --processor 原
"""

import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import MASTERS_FILE, RULES_CODE, LOG_LEVEL
from src.parsing.domain.exceptions import ParsingError
from src.parsing.infrastructure.master_repository import MasterRepository
from src.parsing.pipeline import OrderParsingPipeline
from src.parsing.rules import RulesConfig
from src.parsing.submission import build_order_rows


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Разбор заказа из чата в строки заказа")
    parser.add_argument("path", nargs="?", help="Файл с текстом заказа (по умолчанию stdin)")
    parser.add_argument("--masters", default=str(MASTERS_FILE), help="Файл мастер-данных (YAML/JSON)")
    parser.add_argument("--rules", default=RULES_CODE, help="Набор правил разбора")
    parser.add_argument("--shipping-date", help="Вывести строки журнала на эту дату отгрузки")
    parser.add_argument("--processor", default="", help="Кто обработал (для строк журнала)")
    parser.add_argument("--debug-trace", action="store_true", help="Вывести промежуточные результаты этапов")
    parser.add_argument("--pretty", action="store_true", help="JSON с отступами")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог (DEBUG)")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else LOG_LEVEL,
    )


def read_text(path: Optional[str]) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        text = read_text(args.path)
    except OSError as e:
        logger.error(f"[parse_order] Не удалось прочитать текст: {e}")
        return 1

    try:
        repository = MasterRepository(Path(args.masters))
        stores = repository.list_stores()
        products = repository.list_products()
        pipeline = OrderParsingPipeline(rules=RulesConfig.load(args.rules))
        result = pipeline.process(text, stores, products)
    except ParsingError as e:
        logger.error(f"[parse_order] {e}")
        return 1

    if args.shipping_date:
        try:
            rows = build_order_rows(result.dto.lines, args.shipping_date, processor=args.processor)
        except ValueError as e:
            logger.error(f"[parse_order] Некорректные данные для журнала: {e}")
            return 1
        output = [row.model_dump(by_alias=True, mode="json") for row in rows]
    elif args.debug_trace:
        output = result.to_dict()
    else:
        output = result.dto.model_dump(by_alias=True, mode="json")

    print(json.dumps(output, ensure_ascii=False, indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
