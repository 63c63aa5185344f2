"""
Unit-тесты для MasterRepository.

ЦКП: Чтение мастеров и CRUD по позиции строки с сохранением в файл.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from contracts.order_dto import StoreMaster, ProductMaster
from src.parsing.domain.exceptions import MasterDataError
from src.parsing.infrastructure import MasterRepository


@pytest.fixture
def masters_file(tmp_path):
    path = tmp_path / "masters.yaml"
    path.write_text(yaml.safe_dump({
        "stores": [
            {"inputName": "金田さん", "formalName": "金田"},
            {"inputName": "金田", "formalName": "金田"},
        ],
        "products": [
            {"productName": "本マグロ", "alias": "", "supplier": "豊洲"},
        ],
    }, allow_unicode=True), encoding="utf-8")
    return path


class TestRead:

    def test_list_masters(self, masters_file):
        repo = MasterRepository(masters_file)
        stores = repo.list_stores()
        assert [s.input_name for s in stores] == ["金田さん", "金田"]
        assert stores[0].formal_name == "金田"
        assert repo.list_products()[0].supplier == "豊洲"

    def test_missing_file_gives_empty_masters(self, tmp_path):
        repo = MasterRepository(tmp_path / "absent.yaml")
        assert repo.list_stores() == []
        assert repo.list_products() == []

    def test_json_file(self, tmp_path):
        path = tmp_path / "masters.json"
        path.write_text(json.dumps({
            "stores": [{"inputName": "マルコ", "formalName": "マルコ"}],
            "products": [],
        }, ensure_ascii=False), encoding="utf-8")
        assert MasterRepository(path).list_stores()[0].input_name == "マルコ"

    def test_blank_rows_skipped(self, tmp_path):
        path = tmp_path / "masters.yaml"
        path.write_text(yaml.safe_dump({
            "stores": [{"inputName": "", "formalName": ""}, {"inputName": "A", "formalName": "A"}],
            "products": [{"productName": "", "alias": "", "supplier": ""}],
        }), encoding="utf-8")
        repo = MasterRepository(path)
        assert len(repo.list_stores()) == 1
        assert repo.list_products() == []

    def test_invalid_row_raises(self, tmp_path):
        path = tmp_path / "masters.yaml"
        path.write_text(yaml.safe_dump({
            "products": [{"productName": "", "alias": "x", "supplier": ""}],
        }), encoding="utf-8")
        with pytest.raises(MasterDataError):
            MasterRepository(path).list_products()

    def test_empty_product_name_rejected_by_model(self):
        # Пустой префикс совпал бы с любой строкой чата
        with pytest.raises(ValidationError):
            ProductMaster(product_name="", alias="x", supplier="")

    def test_not_a_mapping_raises(self, tmp_path):
        path = tmp_path / "masters.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(MasterDataError):
            MasterRepository(path).list_stores()

    def test_list_returns_copy(self, masters_file):
        repo = MasterRepository(masters_file)
        repo.list_stores().clear()
        assert len(repo.list_stores()) == 2


class TestMutations:

    def test_add_store_persisted(self, masters_file):
        repo = MasterRepository(masters_file)
        repo.add_store(StoreMaster(input_name="アピ", formal_name="アピ"))

        reloaded = MasterRepository(masters_file)
        assert [s.input_name for s in reloaded.list_stores()] == ["金田さん", "金田", "アピ"]

    def test_update_store_by_index(self, masters_file):
        repo = MasterRepository(masters_file)
        repo.update_store(1, StoreMaster(input_name="金田様", formal_name="金田"))

        assert MasterRepository(masters_file).list_stores()[1].input_name == "金田様"

    def test_delete_store_by_index(self, masters_file):
        repo = MasterRepository(masters_file)
        removed = repo.delete_store(0)

        assert removed.input_name == "金田さん"
        assert [s.input_name for s in MasterRepository(masters_file).list_stores()] == ["金田"]

    def test_product_crud(self, masters_file):
        repo = MasterRepository(masters_file)
        repo.add_product(ProductMaster(product_name="うに", alias="", supplier="豊洲"))
        repo.update_product(0, ProductMaster(product_name="本マグロ", alias="鮪", supplier="豊洲"))
        repo.delete_product(1)

        products = MasterRepository(masters_file).list_products()
        assert len(products) == 1
        assert products[0].alias == "鮪"

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_index_out_of_range(self, masters_file, index):
        repo = MasterRepository(masters_file)
        with pytest.raises(MasterDataError):
            repo.update_store(index, StoreMaster(input_name="x", formal_name="x"))
        with pytest.raises(MasterDataError):
            repo.delete_store(index)

    def test_saved_with_wire_names(self, masters_file):
        MasterRepository(masters_file).add_store(StoreMaster(input_name="B", formal_name="B"))
        data = yaml.safe_load(masters_file.read_text(encoding="utf-8"))
        assert data["stores"][-1] == {"inputName": "B", "formalName": "B"}
