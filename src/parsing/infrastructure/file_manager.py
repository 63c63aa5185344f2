"""
Менеджер файлов для домена Parsing.

Чтение и запись файлов мастер-данных (JSON или YAML по расширению).
"""

import json
from pathlib import Path
from typing import Dict, Any
import yaml
from loguru import logger

from ..domain.exceptions import ParsingFileNotFoundError, ParsingFileWriteError

YAML_SUFFIXES = (".yaml", ".yml")


class ParsingFileManager:
    """Менеджер файлов для домена Parsing."""

    def save_data(self, data: Dict[str, Any], file_path: Path) -> Path:
        """
        Сохраняет данные в JSON или YAML файл (по расширению).

        Raises:
            ParsingFileWriteError: Если не удалось сохранить файл
        """
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding='utf-8') as f:
                if file_path.suffix.lower() in YAML_SUFFIXES:
                    yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
                else:
                    json.dump(data, f, ensure_ascii=False, indent=2)

            logger.debug(f"[Parsing] Файл сохранен: {file_path}")
            return file_path

        except (IOError, OSError, TypeError, yaml.YAMLError) as e:
            raise ParsingFileWriteError(
                message=f"Не удалось сохранить файл: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )

    def load_data(self, file_path: Path) -> Dict[str, Any]:
        """
        Загружает данные из JSON или YAML файла.

        Raises:
            ParsingFileNotFoundError: Если файл не существует
            ParsingFileWriteError: Если не удалось прочитать файл
        """
        try:
            if not file_path.exists():
                raise ParsingFileNotFoundError(
                    message=f"Файл не найден: {file_path}",
                    component="ParsingFileManager"
                )

            with open(file_path, 'r', encoding='utf-8') as f:
                if file_path.suffix.lower() in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)

            logger.debug(f"[Parsing] Файл загружен: {file_path}")
            return data if data is not None else {}

        except ParsingFileNotFoundError:
            raise
        except (IOError, OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ParsingFileWriteError(
                message=f"Не удалось загрузить файл: {file_path}",
                component="ParsingFileManager",
                original_error=e
            )
