"""
Экстракторы метаданных для домена Parsing.

Содержит поиск упоминания даты в тексте заказа.
"""

from .date_alert_detector import DateAlertDetector, DateAlertResult

__all__ = [
    "DateAlertDetector", "DateAlertResult",
]
