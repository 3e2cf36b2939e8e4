"""
Tests for page slicing and page parameter clamping.
"""
import pytest

from listing_engine.filters import MAX_PAGE_SIZE, FilterSpec, clamp_limit, clamp_page
from listing_engine.pagination import page_bounds, paginate, total_pages

ITEMS = list(range(100))


def test_first_page():
    page = paginate(ITEMS, 1, 10)
    assert page.items == list(range(10))
    assert page.has_next is True
    assert page.has_prev is False


def test_last_full_page():
    page = paginate(ITEMS, 10, 10)
    assert page.items == list(range(90, 100))
    assert page.has_next is False
    assert page.has_prev is True


def test_page_past_the_end_is_empty():
    page = paginate(ITEMS, 11, 10)
    assert page.items == []
    assert page.has_next is False
    assert page.has_prev is True


def test_partial_last_page():
    page = paginate(ITEMS, 4, 30)
    assert page.items == list(range(90, 100))
    assert page.has_next is False


def test_empty_sequence():
    page = paginate([], 1, 20)
    assert page.items == []
    assert not page.has_next and not page.has_prev


@pytest.mark.parametrize("total,limit,expected", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (100, 20, 5)])
def test_total_pages(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_page_bounds_clamped_to_total():
    assert page_bounds(25, 3, 10) == (20, 25)
    assert page_bounds(25, 9, 10) == (25, 25)


@pytest.mark.parametrize("raw,expected", [(0, 1), (-5, 1), ("3", 3), (None, 1), ("abc", 1)])
def test_clamp_page(raw, expected):
    assert clamp_page(raw) == expected


@pytest.mark.parametrize("raw,expected", [(0, 1), (-1, 1), (50, 50), (1000, MAX_PAGE_SIZE), (None, 20)])
def test_clamp_limit(raw, expected):
    assert clamp_limit(raw) == expected


def test_filter_spec_clamps_on_construction():
    spec = FilterSpec(page=0, limit=500)
    assert spec.page == 1
    assert spec.limit == MAX_PAGE_SIZE


def test_paginate_clamps_bad_arguments():
    page = paginate(ITEMS, 0, 0)
    assert page.items == [0]
    assert page.has_prev is False
