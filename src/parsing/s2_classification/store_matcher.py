from typing import List, Optional, Sequence
from loguru import logger

from contracts.order_dto import StoreMaster


class StoreMatcher:
    """
    Элемент-функция: Поиск магазина по имени из чата.

    Точное сравнение (регистр и Unicode как есть), без нечёткого поиска.
    Сначала строка целиком, затем строка без вежливого суффикса.
    """

    def __init__(self, honorific_suffixes: Sequence[str]):
        self.honorific_suffixes = tuple(honorific_suffixes)

    def strip_honorific(self, text: str) -> List[str]:
        """
        Варианты text без каждого подходящего суффикса (в порядке списка).

        "ゆもとさんです" -> ["ゆもと", "ゆもとさん"]
        """
        return [
            text[:-len(suffix)]
            for suffix in self.honorific_suffixes
            if text.endswith(suffix) and len(text) > len(suffix)
        ]

    def match_exact(self, text: str, stores: List[StoreMaster]) -> Optional[StoreMaster]:
        """Строка равна input_name (как есть или без любого из суффиксов)."""
        for store in stores:
            if store.input_name == text:
                return store

        candidates = self.strip_honorific(text)
        if candidates:
            for store in stores:
                if store.input_name in candidates:
                    logger.trace(f"[StoreMatcher] '{text}' -> '{store.input_name}' (без суффикса)")
                    return store
        return None

    def match_trailing(self, text: str, stores: List[StoreMaster]) -> Optional[StoreMaster]:
        """
        Строка заканчивается на input_name (как есть или с вежливым суффиксом).

        Используется для строк LINE: "10:08 原 勇樹 ゆもとさん".
        """
        for store in stores:
            if not store.input_name:
                continue
            if text.endswith(store.input_name):
                return store
            if any(text.endswith(store.input_name + suffix) for suffix in self.honorific_suffixes):
                return store
        return None
