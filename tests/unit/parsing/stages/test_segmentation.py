"""
Unit-тесты для SegmentationStage.

ЦКП: Границы режут сегменты, но не мешают искать магазин.
"""

import pytest

from src.parsing.s2_classification import ClassifiedLine
from src.parsing.s4_segmentation import SegmentationStage


@pytest.fixture
def stage():
    return SegmentationStage()


def test_empty_sequence(stage):
    result = stage.process([])
    assert result.segments == []
    assert result.store_positions == []


def test_only_stores_gives_no_segments(stage, make_items, store_a, store_b):
    result = stage.process(make_items(store_a, store_b))
    assert result.segments == []
    assert result.store_positions == [0, 1]


def test_stores_split_segments(stage, make_items, store_a, store_b, product_line):
    items = make_items(store_a, product_line(), product_line(), store_b, product_line())
    result = stage.process(items)

    assert [s.to_dict()["positions"] for s in result.segments] == [[1, 2], [4]]
    assert result.segments[0].store_before == 0
    assert result.segments[0].store_after == 3
    assert result.segments[1].store_before == 3
    assert result.segments[1].store_after is None


def test_boundary_splits_segment(stage, make_items, product_line):
    items = make_items(product_line(), ClassifiedLine.boundary(), ClassifiedLine.unknown("x"), product_line())
    result = stage.process(items)

    assert [s.to_dict()["positions"] for s in result.segments] == [[0], [2, 3]]
    assert all(s.store_before is None and s.store_after is None for s in result.segments)


def test_store_lookup_ignores_boundaries(stage, make_items, store_a, store_b, product_line):
    items = make_items(
        store_a, ClassifiedLine.boundary(), product_line(), ClassifiedLine.boundary(), store_b,
    )
    result = stage.process(items)

    assert len(result.segments) == 1
    assert result.segments[0].store_before == 0
    assert result.segments[0].store_after == 4


def test_has_product_flag(stage, make_items, product_line):
    items = make_items(ClassifiedLine.unknown("x"), ClassifiedLine.boundary(), product_line())
    result = stage.process(items)

    assert result.segments[0].has_product is False
    assert result.segments[1].has_product is True
