"""
Tests for region/type bucketing.
"""
from listing_engine.grouping import (
    bucket_rank,
    group_by_region_then_type,
    order_bucket_keys,
    partition,
)


def test_priority_keys_first_then_alphabetical():
    keys = ["manila", "cebu", "unknown1", "davao"]
    priority = ["manila", "cebu", "davao", "baguio", "boracay"]
    assert order_bucket_keys(keys, priority) == ["manila", "cebu", "davao", "unknown1"]


def test_unlisted_keys_sort_case_insensitively():
    assert order_bucket_keys(["zeta", "Beta", "alpha"], []) == ["alpha", "Beta", "zeta"]


def test_bucket_rank_orders_by_priority_index():
    priority = ("b", "a")
    assert bucket_rank("b", priority) < bucket_rank("a", priority) < bucket_rank("c", priority)


def test_partition_keeps_input_order(marketplace):
    groups = partition(marketplace, lambda x: x.region)
    assert [x.id for x in groups["NCR"]] == ["1", "2", "5"]


def test_default_grid_ordering(properties):
    buckets = group_by_region_then_type(properties)
    assert [b.region for b in buckets] == [
        "manila", "cebu", "angeles", "davao", "baguio", "boracay", "negros oriental",
    ]


def test_aliased_regions_share_a_bucket(properties):
    manila = group_by_region_then_type(properties)[0]
    # "Metro Manila", "NCR" and "manila" all land here
    assert manila.region == "manila"
    assert sorted(x.id for x in manila.items) == ["1", "3", "4"]
    assert manila.total == 3


def test_type_buckets_follow_type_priority(properties):
    buckets = {b.region: b for b in group_by_region_then_type(properties)}
    assert [t.type for t in buckets["manila"].type_buckets] == ["house", "condo"]
    assert [t.type for t in buckets["cebu"].type_buckets] == ["condo", "townhouse"]


def test_leaf_is_featured_first_then_cheapest(properties):
    manila = group_by_region_then_type(properties)[0]
    condo = manila.type_buckets[1]
    # Listing 1 is featured at 45000, listing 3 is not at 28000
    assert [x.id for x in condo.items] == ["1", "3"]


def test_grouping_is_complete(properties):
    buckets = group_by_region_then_type(properties)
    seen = sorted(x.id for b in buckets for t in b.type_buckets for x in t.items)
    assert seen == sorted(p.id for p in properties)
    assert sum(b.total for b in buckets) == len(properties)


def test_leaf_cap_keeps_uncut_total(make_item):
    items = [make_item(category="phones", price=float(p)) for p in (500, 100, 300, 200)]
    bucket = group_by_region_then_type(items, leaf_cap=2)[0]
    leaf = bucket.type_buckets[0]
    assert [x.price for x in leaf.items] == [100.0, 200.0]
    assert leaf.total == 4
    assert bucket.total == 4


def test_zero_or_negative_cap_empties_leaves(make_item):
    items = [make_item(), make_item()]
    for cap in (0, -3):
        leaf = group_by_region_then_type(items, leaf_cap=cap)[0].type_buckets[0]
        assert leaf.items == []
        assert leaf.total == 2


def test_empty_input_gives_no_buckets():
    assert group_by_region_then_type([]) == []


def test_region_priority_is_normalized(make_item):
    items = [make_item(region="NCR"), make_item(region="Zamboanga")]
    buckets = group_by_region_then_type(items, region_priority=("Zamboanga", "Metro Manila"))
    assert [b.region for b in buckets] == ["zamboanga", "manila"]


def test_type_priority_is_not_normalized(make_item):
    items = [make_item(category="condo"), make_item(category="house")]
    leaves = group_by_region_then_type(items, type_priority=("House",))[0].type_buckets
    assert [t.type for t in leaves] == ["condo", "house"]


def test_bucket_rank_tolerates_missing_key():
    assert order_bucket_keys(["b", None, "a"], ["a"]) == ["a", None, "b"]
