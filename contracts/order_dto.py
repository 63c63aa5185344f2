"""
DTO контракт: Parsing -> Submission

Мастер-данные (店舗マスタ / 商品マスタ) и результат разбора текста заказа из чата.

ВАЖНО: JSON-имена полей (inputName, formalName, productName, ...) совпадают с
форматом фронтенда и таблиц. В Python-коде используем snake_case.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineStatus(str, Enum):
    """Статус строки результата (что пользователь должен поправить вручную)."""
    OK = "ok"
    STORE_ERROR = "store-error"
    PRODUCT_ERROR = "product-error"
    BOTH_ERROR = "both-error"


class StoreMaster(BaseModel):
    """
    Запись мастера магазинов.

    Несколько input_name могут указывать на один formal_name.
    """

    input_name: str = Field(..., alias="inputName", description="Имя магазина как пишут в чате")
    formal_name: str = Field(..., alias="formalName", description="Официальное имя магазина")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProductMaster(BaseModel):
    """
    Запись мастера товаров.

    product_name используется как префикс строки чата.
    """

    product_name: str = Field(..., alias="productName", description="Каноническое имя товара (префикс)")
    alias: str = Field("", description="Отображаемое имя (変換名)")
    supplier: str = Field("", description="Поставщик (発注先)")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("product_name")
    @classmethod
    def validate_product_name(cls, v: str) -> str:
        # Пустой префикс совпал бы с любой строкой
        if not v:
            raise ValueError("productName must not be empty")
        return v


class ParsedOrderLine(BaseModel):
    """
    Одна строка результата разбора.

    Создаётся один раз в ResultBuilder. Правки делаются через model_copy(update=...).
    """

    store_name: str = Field("", alias="storeName", description="Официальное имя магазина или пусто")
    product_name: str = Field("", alias="productName", description="Имя товара или исходный текст строки")
    quantity: str = Field("", description="Текст после имени товара, без валидации")
    alias: str = Field("", description="Отображаемое имя товара")
    supplier: str = Field("", description="Поставщик")
    status: LineStatus = Field(..., description="Статус строки")
    raw_text: str = Field("", alias="rawText", description="Нормализованный исходный текст")

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)


class ParseResult(BaseModel):
    """
    Итог одного вызова parse().

    Не сохраняется; единственное возвращаемое значение движка.
    """

    lines: list[ParsedOrderLine] = Field(default_factory=list, description="Строки заказа в исходном порядке")
    date_alert: str | None = Field(None, alias="dateAlert", description="Найденное упоминание даты")
    skipped_lines: list[str] = Field(default_factory=list, alias="skippedLines", description="Пропущенные строки")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def error_count(self) -> int:
        return sum(1 for line in self.lines if line.status != LineStatus.OK)


class OrderRow(BaseModel):
    """
    Строка для записи в журнал отгрузок (одна таблица на дату отгрузки).
    """

    shipping_date: str = Field(..., alias="shippingDate", description="Дата отгрузки")
    store_name: str = Field(..., alias="storeName", description="Официальное имя магазина")
    product_name: str = Field(..., alias="productName", description="Имя товара (alias приоритетнее)")
    quantity: str = Field("", description="Количество")
    supplier: str = Field("", description="Поставщик")
    processor: str = Field("", description="Кто обработал")
    registered_at: datetime = Field(..., alias="registeredAt", description="Время регистрации")
    seq_no: int | None = Field(None, alias="seqNo", description="Порядковый номер")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("shipping_date")
    @classmethod
    def validate_shipping_date(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("shippingDate must not be empty")
        return v.strip()
