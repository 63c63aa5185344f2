from dataclasses import dataclass
from typing import Optional
from loguru import logger

from ..rules.config_loader import RulesConfig


@dataclass
class DateAlertResult:
    """Результат поиска упоминания даты."""
    keyword: Optional[str] = None
    source: str = "none"     # keyword / pattern / none

    def to_dict(self) -> dict:
        return {"keyword": self.keyword, "source": self.source}


class DateAlertDetector:
    """
    Ищет в тексте заказа упоминание даты ("明日", "月曜", "11月3日").

    Только подсказка для оператора: на разбор строк не влияет.
    Ключевые слова проверяются в порядке списка, а не по позиции в тексте,
    затем regex по всему тексту.
    """

    def __init__(self, rules: Optional[RulesConfig] = None):
        self.rules = rules or RulesConfig.load()

    def detect(self, text: str) -> DateAlertResult:
        """
        Args:
            text: Исходный текст целиком (без разбиения на строки)
        """
        for keyword in self.rules.date_keywords:
            if keyword in text:
                logger.debug(f"[DateAlertDetector] Ключевое слово даты: '{keyword}'")
                return DateAlertResult(keyword=keyword, source="keyword")

        match = self.rules.date_regex.search(text)
        if match:
            logger.debug(f"[DateAlertDetector] Дата по шаблону: '{match.group(0)}'")
            return DateAlertResult(keyword=match.group(0), source="pattern")

        return DateAlertResult()
