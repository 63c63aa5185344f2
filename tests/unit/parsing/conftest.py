"""
Общие фикстуры для unit-тестов домена Parsing.
"""

import pytest

from contracts.order_dto import StoreMaster, ProductMaster
from src.parsing.s2_classification import ClassifiedLine
from src.parsing.s3_sequence import FlatItem


@pytest.fixture
def stores():
    return [
        StoreMaster(input_name="ゆもとさん", formal_name="ゆもと"),
        StoreMaster(input_name="金田", formal_name="金田"),
        StoreMaster(input_name="マルコ", formal_name="マルコ"),
        StoreMaster(input_name="コマル", formal_name="コマル"),
    ]


@pytest.fixture
def products():
    # Короткое имя стоит раньше длинного: порядок мастера не должен влиять
    return [
        ProductMaster(product_name="本マグロ", alias="", supplier="豊洲"),
        ProductMaster(product_name="本マグロ中トロ", alias="中トロ", supplier="豊洲"),
        ProductMaster(product_name="本鮪", alias="本マグロ", supplier="豊洲"),
        ProductMaster(product_name="うに", alias="", supplier="豊洲"),
        ProductMaster(product_name="ホタテ", alias="帆立", supplier="北海"),
    ]


@pytest.fixture
def make_items():
    """Строит плоскую последовательность из ClassifiedLine."""
    def _make(*classified):
        return [
            FlatItem(position=i, line_number=i, classified=c)
            for i, c in enumerate(classified)
        ]
    return _make


@pytest.fixture
def store_a():
    return ClassifiedLine.for_store(StoreMaster(input_name="A", formal_name="Store A"), raw_text="A")


@pytest.fixture
def store_b():
    return ClassifiedLine.for_store(StoreMaster(input_name="B", formal_name="Store B"), raw_text="B")


@pytest.fixture
def product_line():
    def _make(name="P", quantity="1"):
        product = ProductMaster(product_name=name, alias="", supplier="S")
        return ClassifiedLine.for_product(product, quantity, raw_text=f"{name}{quantity}")
    return _make
