"""
Config Loader для правил разбора чата.

ЦКП: Загрузка неизменяемой модели RulesConfig из YAML.

Архитектурный принцип:
- Таблицы фраз и регулярки живут в YAML, а не в коде
- RulesConfig заморожен: классификатор владеет экземпляром, глобального состояния нет
- Регулярки компилируются один раз при загрузке
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, ClassVar

import yaml
from loguru import logger

from ..domain.exceptions import ParsingConfigurationError

RULES_DIR = Path(__file__).parent
DEFAULT_RULES_CODE = "ja_chat"

_REQUIRED_KEYS = (
    "honorific_suffixes",
    "timestamp_pattern",
    "order_preamble_pattern",
    "greeting_punctuation",
    "greeting_phrases",
    "date_keywords",
    "date_pattern",
)


@dataclass(frozen=True)
class RulesConfig:
    """
    Правила классификации строк чата.

    Все списки - кортежи в порядке приоритета из YAML.
    """
    rules_code: str
    honorific_suffixes: Tuple[str, ...]
    greeting_phrases: Tuple[str, ...]
    date_keywords: Tuple[str, ...]
    timestamp_regex: re.Pattern
    order_preamble_regex: re.Pattern
    greeting_punctuation_regex: re.Pattern
    date_regex: re.Pattern
    source_file: Optional[str] = None

    _cache: ClassVar[Dict[str, "RulesConfig"]] = {}

    @classmethod
    def load(cls, rules_code: str = DEFAULT_RULES_CODE, rules_dir: Optional[Path] = None) -> "RulesConfig":
        """
        Загружает правила из <rules_dir>/<rules_code>.yaml (с кешем).

        Raises:
            ParsingConfigurationError: файл не найден или в нём нет нужных ключей
        """
        config_file = Path(rules_dir or RULES_DIR) / f"{rules_code}.yaml"
        cache_key = str(config_file.resolve())
        if cache_key in cls._cache:
            return cls._cache[cache_key]

        if not config_file.exists():
            raise ParsingConfigurationError(
                message=f"Файл правил не найден: {config_file}",
                component="RulesConfig",
            )

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ParsingConfigurationError(
                message=f"Не удалось прочитать YAML: {config_file}",
                component="RulesConfig",
                original_error=e,
            )

        config = cls.from_dict(data, source_file=config_file.name)
        cls._cache[cache_key] = config

        logger.debug(
            f"[RulesConfig] Загружены правила {config.rules_code}: "
            f"{len(config.greeting_phrases)} greeting_phrases, "
            f"{len(config.date_keywords)} date_keywords"
        )
        return config

    @classmethod
    def from_dict(cls, data: dict, source_file: Optional[str] = None) -> "RulesConfig":
        """Собирает RulesConfig из словаря (формат YAML)."""
        if not isinstance(data, dict):
            raise ParsingConfigurationError(
                message="Правила должны быть словарём",
                component="RulesConfig",
            )

        missing = [key for key in _REQUIRED_KEYS if key not in data]
        if missing:
            raise ParsingConfigurationError(
                message=f"В правилах отсутствуют ключи: {', '.join(missing)}",
                component="RulesConfig",
            )

        try:
            return cls(
                rules_code=str(data.get("rules_code", DEFAULT_RULES_CODE)),
                honorific_suffixes=cls._as_tuple(data, "honorific_suffixes"),
                greeting_phrases=cls._as_tuple(data, "greeting_phrases"),
                date_keywords=cls._as_tuple(data, "date_keywords"),
                timestamp_regex=re.compile(data["timestamp_pattern"]),
                order_preamble_regex=re.compile(data["order_preamble_pattern"]),
                greeting_punctuation_regex=re.compile(data["greeting_punctuation"]),
                date_regex=re.compile(data["date_pattern"]),
                source_file=source_file,
            )
        except (re.error, TypeError) as e:
            raise ParsingConfigurationError(
                message="Некорректный паттерн в правилах",
                component="RulesConfig",
                original_error=e,
            )

    @staticmethod
    def _as_tuple(data: dict, key: str) -> Tuple[str, ...]:
        value = data[key] or []
        if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
            raise ParsingConfigurationError(
                message=f"'{key}' должен быть списком непустых строк",
                component="RulesConfig",
            )
        return tuple(value)

    @classmethod
    def clear_cache(cls) -> None:
        """Очищает кеш (для тестов)."""
        cls._cache.clear()
