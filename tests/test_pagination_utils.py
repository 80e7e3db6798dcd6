from fractions import Fraction

import pandas as pd

from paginator_model.utils import helpers, pagination


def test_compute_total_pages():
    """Missing or non-positive inputs give zero pages"""
    assert pagination.compute_total_pages(500, 33) == 16
    assert pagination.compute_total_pages(500, 50) == 10
    assert pagination.compute_total_pages(0, 50) == 0
    assert pagination.compute_total_pages(None, 50) == 0
    assert pagination.compute_total_pages(500, None) == 0


def test_item_index_bounds():
    """End offset is clamped to the item total"""
    assert pagination.item_index_bounds(3, 50, 500) == (100, 150)
    assert pagination.item_index_bounds(10, 10, 95) == (90, 95)
    assert pagination.item_index_bounds(1, None, None) == (0, 0)


def test_page_slice_series():
    """Series are sliced by position, not label"""
    series = pd.Series(["a", "b", "c", "d"], index=[10, 20, 30, 40])
    assert pagination.page_slice(series, 1, 3).tolist() == ["b", "c"]


def test_number_helpers():
    """Booleans, NaN and fractional values are not page numbers"""
    assert helpers.is_number(3)
    assert not helpers.is_number(True)
    assert not helpers.is_number(float("nan"))
    assert helpers.to_whole_number(4.0) == 4
    assert helpers.to_whole_number(4.5) is None
    assert helpers.parse_whole_number(" 8 ") == 8
    assert helpers.parse_whole_number("8.5") is None
    assert helpers.parse_whole_number("x") is None


def test_normalize_text():
    """Nulls become empty strings"""
    assert helpers.normalize_text(None) == ""
    assert helpers.normalize_text(float("nan")) == ""
    assert helpers.normalize_text("  All ") == "All"


def test_number_helpers_with_huge_values():
    """Values beyond float range do not overflow"""
    assert helpers.is_number(10**400)
    assert helpers.to_whole_number(10**400) == 10**400
    assert not helpers.is_number(Fraction(10**400, 3))
    assert helpers.parse_whole_number("1" * 400) == int("1" * 400)
