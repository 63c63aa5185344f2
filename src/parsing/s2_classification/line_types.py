from dataclasses import dataclass
from enum import Enum
from typing import Optional

from contracts.order_dto import StoreMaster, ProductMaster


class LineType(Enum):
    SKIP = "skip"
    BOUNDARY = "boundary"
    STORE = "store"
    PRODUCT = "product"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    Результат классификации одной строки.

    Payload зависит от типа:
    - STORE: store
    - PRODUCT: product, quantity, raw_text
    - UNKNOWN: raw_text
    - SKIP / BOUNDARY: ничего
    """
    line_type: LineType
    store: Optional[StoreMaster] = None
    product: Optional[ProductMaster] = None
    quantity: str = ""
    raw_text: str = ""

    @classmethod
    def skip(cls) -> "ClassifiedLine":
        return cls(LineType.SKIP)

    @classmethod
    def boundary(cls, raw_text: str = "") -> "ClassifiedLine":
        return cls(LineType.BOUNDARY, raw_text=raw_text)

    @classmethod
    def for_store(cls, store: StoreMaster, raw_text: str = "") -> "ClassifiedLine":
        return cls(LineType.STORE, store=store, raw_text=raw_text)

    @classmethod
    def for_product(cls, product: ProductMaster, quantity: str, raw_text: str) -> "ClassifiedLine":
        return cls(LineType.PRODUCT, product=product, quantity=quantity, raw_text=raw_text)

    @classmethod
    def unknown(cls, raw_text: str) -> "ClassifiedLine":
        return cls(LineType.UNKNOWN, raw_text=raw_text)

    @property
    def is_separator(self) -> bool:
        return self.line_type in (LineType.STORE, LineType.BOUNDARY)

    @property
    def is_content(self) -> bool:
        return self.line_type in (LineType.PRODUCT, LineType.UNKNOWN)

    def to_dict(self) -> dict:
        return {
            "type": self.line_type.value,
            "store": self.store.input_name if self.store else None,
            "product": self.product.product_name if self.product else None,
            "quantity": self.quantity,
            "raw_text": self.raw_text,
        }
