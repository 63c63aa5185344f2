"""
Настройки проекта Chat Order Parser.

Значения можно переопределить переменными окружения.
"""

import os
from pathlib import Path

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = DATA_DIR / "output"

# =============================================================================
# МАСТЕР-ДАННЫЕ
# =============================================================================
# Файл с мастерами магазинов и товаров (YAML или JSON)
MASTERS_FILE = Path(os.getenv(
    "ORDER_MASTERS_FILE",
    str(DATA_DIR / "masters.yaml")
))

# =============================================================================
# ПРАВИЛА РАЗБОРА
# =============================================================================
# Имя файла правил в src/parsing/rules/ (без .yaml)
RULES_CODE = os.getenv("ORDER_RULES_CODE", "ja_chat")

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("ORDER_LOG_LEVEL", "INFO")
