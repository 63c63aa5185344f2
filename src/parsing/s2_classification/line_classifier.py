from typing import List, Optional, Tuple
from loguru import logger

from contracts.order_dto import StoreMaster, ProductMaster

from ..rules.config_loader import RulesConfig
from .line_types import ClassifiedLine
from .store_matcher import StoreMatcher


class LineClassifier:
    """
    Элемент-функция: Определяет тип строки чата.

    Упорядоченный список правил, побеждает первое сработавшее:
    1. пустая строка -> SKIP
    2. метка времени LINE -> STORE (магазин в конце) или BOUNDARY
    3. чистое приветствие -> BOUNDARY
    4. чистая преамбула заказа ("明日の注文を") -> BOUNDARY
    5. имя магазина -> STORE
    6. префикс товара (самый длинный) -> PRODUCT
    7. всё остальное -> UNKNOWN
    """

    def __init__(self, rules: Optional[RulesConfig] = None):
        self.rules = rules or RulesConfig.load()
        self.store_matcher = StoreMatcher(self.rules.honorific_suffixes)

        # Кеш сортировки мастера товаров: (исходный порядок, по длине).
        # Пара заменяется целиком, поэтому параллельные вызовы видят согласованное состояние.
        self._sorted_cache: Tuple[Tuple[ProductMaster, ...], Tuple[ProductMaster, ...]] = ((), ())

    def classify(
        self,
        line: str,
        stores: List[StoreMaster],
        products: List[ProductMaster],
    ) -> ClassifiedLine:
        """
        Классифицирует одну НОРМАЛИЗОВАННУЮ строку.
        """
        if line == "":
            return ClassifiedLine.skip()

        timestamp_match = self.rules.timestamp_regex.match(line)
        if timestamp_match:
            body = line[timestamp_match.end():].strip()
            store = self.store_matcher.match_trailing(body, stores)
            if store:
                logger.trace(f"[LineClassifier] Метка времени с магазином: '{line}' -> {store.formal_name}")
                return ClassifiedLine.for_store(store, raw_text=line)
            return ClassifiedLine.boundary(raw_text=line)

        if self.is_greeting(line):
            return ClassifiedLine.boundary(raw_text=line)

        if self.is_order_preamble(line):
            return ClassifiedLine.boundary(raw_text=line)

        store = self.store_matcher.match_exact(line, stores)
        if store:
            return ClassifiedLine.for_store(store, raw_text=line)

        match = self.extract_product(line, products)
        if match:
            product, quantity = match
            return ClassifiedLine.for_product(product, quantity, raw_text=line)

        return ClassifiedLine.unknown(raw_text=line)

    def is_greeting(self, text: str) -> bool:
        """
        Строка содержит приветствие и после вырезания ВСЕХ фраз и пунктуации пуста.

        "よろしくお願いします。" -> True
        "よろしくお願いします。本マグロ2kg" -> False
        """
        if not any(phrase in text for phrase in self.rules.greeting_phrases):
            return False
        return self._strip_greetings(text) == ""

    def is_order_preamble(self, text: str) -> bool:
        """"明日の注文を" / "ご注文" (+ приветствие) без содержимого."""
        match = self.rules.order_preamble_regex.match(text)
        if not match or match.end() == 0:
            return False
        return self._strip_greetings(text[match.end():]) == ""

    def _strip_greetings(self, text: str) -> str:
        remaining = text
        # Порядок YAML: "以上よろしくお願いします" теряет "よろしくお願いします" раньше и оставляет "以上"
        for phrase in self.rules.greeting_phrases:
            remaining = remaining.replace(phrase, "")
        return self.rules.greeting_punctuation_regex.sub("", remaining).strip()

    def extract_product(
        self,
        line: str,
        products: List[ProductMaster],
    ) -> Optional[Tuple[ProductMaster, str]]:
        """
        Ищет товар, имя которого является префиксом строки.

        При нескольких кандидатах побеждает самое длинное имя.
        Остаток строки (без пробелов по краям) - количество как есть.
        """
        for product in self._products_by_length(products):
            if line.startswith(product.product_name):
                quantity = line[len(product.product_name):].strip()
                return product, quantity
        return None

    def _products_by_length(self, products: List[ProductMaster]) -> Tuple[ProductMaster, ...]:
        key = tuple(products)
        cached_key, cached_sorted = self._sorted_cache
        if key == cached_key:
            return cached_sorted
        # sorted() стабилен: при равной длине порядок мастера сохраняется
        ordered = tuple(sorted(key, key=lambda p: len(p.product_name), reverse=True))
        self._sorted_cache = (key, ordered)
        logger.trace(f"[LineClassifier] Отсортировано {len(ordered)} товаров по длине имени")
        return ordered
