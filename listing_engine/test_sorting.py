"""
Tests for the sorter: every key, aliases, and stability.
"""
import pytest

from listing_engine.filters import FilterSpec, SortKey
from listing_engine.sorting import sort_listings


def ids(listings):
    return [x.id for x in listings]


def test_latest_ties_keep_input_order(marketplace):
    # Items 2 and 5 were both updated one day ago
    assert ids(sort_listings(marketplace, SortKey.LATEST)) == ["2", "5", "1", "3", "4"]


def test_newest_uses_posted_date(marketplace):
    assert ids(sort_listings(marketplace, "newest")) == ["5", "1", "3", "4", "2"]


def test_price_orders(marketplace):
    assert ids(sort_listings(marketplace, "price_low")) == ["4", "3", "5", "1", "2"]
    assert ids(sort_listings(marketplace, "price_high")) == ["2", "1", "5", "3", "4"]


def test_salary_aliases_use_range_ends(jobs):
    assert ids(sort_listings(jobs, "salary_low")) == ["5", "2", "3", "4", "1"]
    assert ids(sort_listings(jobs, "salary_high")) == ["1", "4", "3", "2", "5"]


def test_popularity(marketplace, jobs):
    # views + favorites
    assert ids(sort_listings(marketplace, "popular")) == ["2", "1", "3", "5", "4"]
    # applications
    assert ids(sort_listings(jobs, "applications")) == ["5", "2", "3", "1", "4"]


def test_name_is_case_sensitive(marketplace):
    assert ids(sort_listings(marketplace, "name")) == ["3", "4", "5", "2", "1"]


def test_company_sort(jobs):
    assert ids(sort_listings(jobs, "company")) == ["2", "1", "5", "3", "4"]


def test_featured_then_price(make_item):
    a = make_item(price=300.0)
    b = make_item(price=100.0, is_featured=True)
    c = make_item(price=200.0)
    d = make_item(price=500.0, is_featured=True)
    e = make_item(price=200.0)
    assert ids(sort_listings([a, b, c, d, e], "featured_then_price")) == [b.id, d.id, c.id, e.id, a.id]


@pytest.mark.parametrize("key", ["price_low", "price_high"])
def test_unknown_prices_sort_last(make_item, key):
    items = [make_item(price=None), make_item(price=10.0), make_item(price=None), make_item(price=5.0)]
    ordered = sort_listings(items, key)
    assert [x.price for x in ordered[2:]] == [None, None]
    assert ids(ordered[2:]) == [items[0].id, items[2].id]


def test_unknown_key_falls_back_to_latest(marketplace):
    assert sort_listings(marketplace, "bogus") == sort_listings(marketplace, "latest")
    assert sort_listings(marketplace, None) == sort_listings(marketplace, "latest")


def test_sort_does_not_mutate_input(marketplace):
    source = list(marketplace)
    before = list(source)
    result = sort_listings(source, "price_high")
    assert source == before
    assert result is not source


@pytest.mark.parametrize("key", [k.value for k in SortKey])
def test_sort_is_stable_and_repeatable(make_item, key):
    # All keys equal: output must equal input order
    items = [make_item() for _ in range(6)]
    assert ids(sort_listings(items, key)) == ids(items)
    assert sort_listings(items, key) == sort_listings(items, key)


@pytest.mark.parametrize("raw", [5, 1.5, object(), ["price_low"]])
def test_non_string_sort_key_falls_back_to_latest(raw):
    assert SortKey.parse(raw) is SortKey.LATEST
    assert FilterSpec(sort_by=raw).sort_by is SortKey.LATEST


def test_name_sort_puts_missing_names_first(make_item):
    items = [make_item(title="Beta"), make_item(title=None), make_item(title="Alpha")]
    assert ids(sort_listings(items, "name")) == [items[1].id, items[2].id, items[0].id]
