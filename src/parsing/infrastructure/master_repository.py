"""
Репозиторий мастер-данных (店舗マスタ / 商品マスタ) на файле.

Формат файла (JSON или YAML):

    stores:
      - {inputName: ゆもとさん, formalName: ゆもと}
    products:
      - {productName: 本マグロ, alias: "", supplier: 豊洲}

Строки адресуются по позиции (с 0), как строки таблицы.
Движок разбора использует только list_stores() / list_products().
"""

from pathlib import Path
from typing import List, Optional, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from contracts.order_dto import StoreMaster, ProductMaster

from ..domain.exceptions import MasterDataError, ParsingFileNotFoundError
from .file_manager import ParsingFileManager

M = TypeVar("M", bound=BaseModel)

STORES_KEY = "stores"
PRODUCTS_KEY = "products"


class MasterRepository:
    """CRUD по позиции строки поверх одного файла мастер-данных."""

    def __init__(self, file_path: Path, file_manager: Optional[ParsingFileManager] = None):
        self.file_path = Path(file_path)
        self.file_manager = file_manager or ParsingFileManager()
        self._stores: List[StoreMaster] = []
        self._products: List[ProductMaster] = []
        self._loaded = False

    # === Чтение ===

    def list_stores(self) -> List[StoreMaster]:
        self._ensure_loaded()
        return list(self._stores)

    def list_products(self) -> List[ProductMaster]:
        self._ensure_loaded()
        return list(self._products)

    # === Магазины ===

    def add_store(self, entry: StoreMaster) -> None:
        self._ensure_loaded()
        self._stores.append(entry)
        self.save()

    def update_store(self, index: int, entry: StoreMaster) -> None:
        self._ensure_loaded()
        self._check_index(index, self._stores, STORES_KEY)
        self._stores[index] = entry
        self.save()

    def delete_store(self, index: int) -> StoreMaster:
        self._ensure_loaded()
        self._check_index(index, self._stores, STORES_KEY)
        removed = self._stores.pop(index)
        self.save()
        return removed

    # === Товары ===

    def add_product(self, entry: ProductMaster) -> None:
        self._ensure_loaded()
        self._products.append(entry)
        self.save()

    def update_product(self, index: int, entry: ProductMaster) -> None:
        self._ensure_loaded()
        self._check_index(index, self._products, PRODUCTS_KEY)
        self._products[index] = entry
        self.save()

    def delete_product(self, index: int) -> ProductMaster:
        self._ensure_loaded()
        self._check_index(index, self._products, PRODUCTS_KEY)
        removed = self._products.pop(index)
        self.save()
        return removed

    # === Файл ===

    def reload(self) -> None:
        """Перечитывает файл. Отсутствующий файл = пустые мастера."""
        try:
            data = self.file_manager.load_data(self.file_path)
        except ParsingFileNotFoundError:
            logger.warning(f"[MasterRepository] Файл мастеров не найден, начинаем с пустых: {self.file_path}")
            data = {}

        if not isinstance(data, dict):
            raise MasterDataError(
                message=f"Ожидался словарь со списками '{STORES_KEY}' и '{PRODUCTS_KEY}'",
                component="MasterRepository",
            )

        self._stores = self._parse_rows(data.get(STORES_KEY) or [], StoreMaster, STORES_KEY)
        self._products = self._parse_rows(data.get(PRODUCTS_KEY) or [], ProductMaster, PRODUCTS_KEY)
        self._loaded = True
        self._warn_duplicates()

        logger.info(
            f"[MasterRepository] Загружено: {len(self._stores)} магазинов, "
            f"{len(self._products)} товаров ({self.file_path.name})"
        )

    def save(self) -> Path:
        data = {
            STORES_KEY: [s.model_dump(by_alias=True) for s in self._stores],
            PRODUCTS_KEY: [p.model_dump(by_alias=True) for p in self._products],
        }
        return self.file_manager.save_data(data, self.file_path)

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.reload()

    @staticmethod
    def _parse_rows(rows: list, model: Type[M], key: str) -> List[M]:
        if not isinstance(rows, list):
            raise MasterDataError(
                message=f"'{key}' должен быть списком",
                component="MasterRepository",
            )

        parsed: List[M] = []
        for i, row in enumerate(rows):
            if not isinstance(row, dict):
                raise MasterDataError(
                    message=f"{key}[{i}]: ожидался словарь, получено {type(row).__name__}",
                    component="MasterRepository",
                )
            # Пустые строки таблицы пропускаем, как пустые строки листа
            if not any(str(v).strip() for v in row.values() if v is not None):
                logger.warning(f"[MasterRepository] {key}[{i}]: пустая строка пропущена")
                continue
            try:
                parsed.append(model.model_validate(row))
            except ValidationError as e:
                raise MasterDataError(
                    message=f"{key}[{i}]: некорректная запись",
                    component="MasterRepository",
                    original_error=e,
                )
        return parsed

    @staticmethod
    def _check_index(index: int, rows: list, key: str) -> None:
        if not 0 <= index < len(rows):
            raise MasterDataError(
                message=f"{key}: индекс {index} вне диапазона (0..{len(rows) - 1})",
                component="MasterRepository",
            )

    def _warn_duplicates(self) -> None:
        seen = set()
        for store in self._stores:
            if store.input_name in seen:
                logger.warning(
                    f"[MasterRepository] Дубликат inputName '{store.input_name}': сработает первая запись"
                )
            seen.add(store.input_name)
