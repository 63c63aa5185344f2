"""
Правила разбора чата (фразы, суффиксы, регулярки).
"""

from .config_loader import RulesConfig, DEFAULT_RULES_CODE, RULES_DIR

__all__ = [
    "RulesConfig",
    "DEFAULT_RULES_CODE",
    "RULES_DIR",
]
