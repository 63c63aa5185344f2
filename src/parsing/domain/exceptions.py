"""
Исключения для домена Parsing.

Разбор текста заказа сам по себе не падает на плохом вводе: любые
неоднозначности уходят в статус строки. Исключения здесь только для
нарушений контракта вызова, конфигурации и файлов мастер-данных.
"""


class ParsingError(Exception):
    """Базовое исключение для ошибок домена Parsing."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Parsing Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class ParsingConfigurationError(ParsingError):
    """Ошибка конфигурации правил разбора (rules/*.yaml)."""
    pass


class ParsingValidationError(ParsingError):
    """Нарушение предусловий вызова (None вместо мастера, не строка и т.п.)."""
    pass


class MasterDataError(ParsingError):
    """Некорректные мастер-данные или индекс строки мастера."""
    pass


class ParsingFileSystemError(ParsingError):
    """Ошибка файловой системы в домене Parsing."""
    pass


class ParsingFileNotFoundError(ParsingFileSystemError):
    """Файл не найден в домене Parsing."""
    pass


class ParsingFileWriteError(ParsingFileSystemError):
    """Ошибка записи файла в домене Parsing."""
    pass
