import pytest
from src.parsing.s1_normalization import Normalizer

@pytest.fixture
def normalizer():
    return Normalizer()

def test_fullwidth_digits_converted(normalizer):
    assert normalizer.normalize("本マグロ２ｋｇ") == "本マグロ2ｋｇ"
    assert normalizer.normalize("０１２３４５６７８９") == "0123456789"

def test_fullwidth_space_trimmed(normalizer):
    # U+3000 по краям тоже пробел
    assert normalizer.normalize("　 うに １個 　") == "うに 1個"

def test_inner_spaces_kept(normalizer):
    assert normalizer.normalize("本マグロ　2kg") == "本マグロ　2kg"

def test_carriage_return_removed(normalizer):
    assert normalizer.normalize("うに 1個\r") == "うに 1個"

@pytest.mark.parametrize("text", ["", "  ", "１０：０８ 原", "abc", "　１　"])
def test_idempotent(normalizer, text):
    once = normalizer.normalize(text)
    assert normalizer.normalize(once) == once
