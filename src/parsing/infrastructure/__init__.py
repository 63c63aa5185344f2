"""
Инфраструктурный слой домена Parsing.

Содержит менеджер файлов и репозиторий мастер-данных.
"""

from .file_manager import ParsingFileManager
from .master_repository import MasterRepository

__all__ = [
    "ParsingFileManager",
    "MasterRepository",
]
