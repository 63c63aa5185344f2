"""
Unit-тесты для загрузки правил разбора через RulesConfig.

ЦКП: Проверка корректности загрузки rules/*.yaml и ошибок конфигурации.
"""

import pytest
import yaml

from src.parsing.domain.exceptions import ParsingConfigurationError
from src.parsing.rules import RulesConfig
from src.parsing.s2_classification import LineClassifier


@pytest.fixture(autouse=True)
def clear_cache():
    RulesConfig.clear_cache()
    yield
    RulesConfig.clear_cache()


@pytest.fixture
def minimal_rules():
    return {
        "rules_code": "test",
        "honorific_suffixes": ["さん"],
        "timestamp_pattern": r"^\d{2}:\d{2}\s",
        "order_preamble_pattern": "^注文",
        "greeting_punctuation": r"[。\s]",
        "greeting_phrases": ["お願いします", "よろしくお願いします"],
        "date_keywords": ["明日"],
        "date_pattern": r"\d{1,2}日",
    }


class TestDefaultRules:
    """Правила по умолчанию (ja_chat.yaml)."""

    def test_load_default(self):
        rules = RulesConfig.load()
        assert rules.rules_code == "ja_chat"
        assert "よろしくお願いします" in rules.greeting_phrases
        assert rules.date_keywords[0] == "明日"
        assert rules.source_file == "ja_chat.yaml"

    def test_honorific_longest_first(self):
        rules = RulesConfig.load()
        assert rules.honorific_suffixes.index("さんです") < rules.honorific_suffixes.index("さん")

    def test_cached(self):
        assert RulesConfig.load() is RulesConfig.load()

    def test_date_pattern_matches_month_day(self):
        rules = RulesConfig.load()
        assert rules.date_regex.search("11月3日").group(0) == "11月3日"

    def test_date_pattern_ascii_digits_only(self):
        rules = RulesConfig.load()
        assert rules.date_regex.search("３日着で") is None


class TestCustomRules:
    """Загрузка из своего каталога и ошибки конфигурации."""

    def test_load_from_dir(self, tmp_path, minimal_rules):
        (tmp_path / "test.yaml").write_text(
            yaml.safe_dump(minimal_rules, allow_unicode=True), encoding="utf-8"
        )
        rules = RulesConfig.load("test", rules_dir=tmp_path)
        assert rules.rules_code == "test"
        assert rules.greeting_phrases == ("お願いします", "よろしくお願いします")

    def test_greeting_phrases_removed_in_yaml_order(self, minimal_rules):
        # "お願いします" стоит первой и оставляет "よろしく" от длинной фразы
        classifier = LineClassifier(RulesConfig.from_dict(minimal_rules))
        assert classifier.is_greeting("お願いします。") is True
        assert classifier.is_greeting("よろしくお願いします") is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParsingConfigurationError):
            RulesConfig.load("absent", rules_dir=tmp_path)

    def test_missing_keys(self, minimal_rules):
        del minimal_rules["date_keywords"]
        with pytest.raises(ParsingConfigurationError) as exc_info:
            RulesConfig.from_dict(minimal_rules)
        assert "date_keywords" in str(exc_info.value)

    def test_invalid_regex(self, minimal_rules):
        minimal_rules["date_pattern"] = "(unclosed"
        with pytest.raises(ParsingConfigurationError):
            RulesConfig.from_dict(minimal_rules)

    def test_empty_phrase_rejected(self, minimal_rules):
        minimal_rules["greeting_phrases"] = ["お願いします", ""]
        with pytest.raises(ParsingConfigurationError):
            RulesConfig.from_dict(minimal_rules)

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "broken.yaml").write_text("greeting_phrases: [unclosed", encoding="utf-8")
        with pytest.raises(ParsingConfigurationError):
            RulesConfig.load("broken", rules_dir=tmp_path)
