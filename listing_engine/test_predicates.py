"""
Tests for filter composition and the search matcher.
"""
from listing_engine.filters import FilterSpec
from listing_engine.predicates import attribute_predicate, build_predicate, flag_predicate
from listing_engine.search import matches


def ids(listings):
    return [x.id for x in listings]


def run(collection, **spec):
    predicate = build_predicate(FilterSpec(**spec))
    return ids(x for x in collection if predicate(x))


def test_empty_spec_matches_everything(marketplace):
    assert run(marketplace) == ["1", "2", "3", "4", "5"]


def test_category_filter(marketplace):
    assert run(marketplace, category="electronics") == ["1"]
    assert run(marketplace, category="Electronics ") == ["1"]


def test_region_filter_uses_aliases(marketplace):
    # Three items are listed under "NCR"
    assert run(marketplace, region="Metro Manila") == ["1", "2", "5"]
    assert run(marketplace, region="manila") == ["1", "2", "5"]
    assert run(marketplace, region="Davao") == ["4"]


def test_price_sides_are_independent(marketplace):
    assert run(marketplace, min_price=25000) == ["1", "2", "5"]
    assert run(marketplace, max_price=12000) == ["3", "4"]
    assert run(marketplace, min_price=10000, max_price=30000) == ["3", "5"]


def test_salary_range_must_fit_band(jobs):
    assert run(jobs, min_price=30000) == ["1", "3", "4"]
    assert run(jobs, max_price=60000) == ["2", "3", "5"]
    assert run(jobs, min_price=30000, max_price=60000) == ["3"]


def test_unknown_price_fails_supplied_side(make_item):
    priced = make_item(price=500.0)
    unpriced = make_item(price=None)
    assert run([priced, unpriced], min_price=100) == [priced.id]
    assert run([priced, unpriced], max_price=1000) == [priced.id]
    assert run([priced, unpriced]) == [priced.id, unpriced.id]


def test_flag_equality(jobs):
    assert run(jobs, featured=True) == ["1", "3"]
    assert run(jobs, featured=False) == ["2", "4", "5"]
    assert run(jobs, remote=True) == ["4"]
    assert run(jobs, urgent=True) == ["2", "5"]


def test_search_spans_text_fields_and_tags(marketplace):
    assert run(marketplace, search="warranty") == ["1", "5"]
    assert run(marketplace, search="SARAH") == ["1"]
    assert run(marketplace, search="sneakers") == ["4"]
    assert run(marketplace, search="   ") == ["1", "2", "3", "4", "5"]


def test_job_search_covers_company_and_skills(jobs):
    assert run(jobs, search="concentrix") == ["2"]
    assert run(jobs, search="django") == ["4"]


def test_filters_are_anded(marketplace):
    assert run(marketplace, region="NCR", max_price=50000, search="warranty") == ["1", "5"]
    assert run(marketplace, region="NCR", category="furniture") == []


def test_attribute_choice_and_equality(marketplace):
    assert run(marketplace, attributes={"condition": ("like_new",)}) == ["1", "3"]
    assert run(marketplace, attributes={"condition": ("new", "good")}) == ["2", "4", "5"]
    assert run(marketplace, attributes={"seller_id": "seller_4"}) == ["4"]


def test_unknown_attribute_is_no_constraint(marketplace):
    assert run(marketplace, attributes={"bedrooms": 3}) == ["1", "2", "3", "4", "5"]


def test_none_and_empty_attributes_are_ignored(marketplace):
    assert run(marketplace, attributes={"condition": None}) == ["1", "2", "3", "4", "5"]
    assert run(marketplace, attributes={"condition": ()}) == ["1", "2", "3", "4", "5"]


def test_attribute_predicate_non_string_values(properties):
    furnished = attribute_predicate("furnished", True)
    assert [p.id for p in properties if furnished(p)] == ["1", "3", "5", "8", "9"]


def test_flag_predicate_missing_attribute_is_false(make_item):
    assert flag_predicate("no_such_flag")(make_item()) is False


def test_matches_empty_term_always_true(make_item):
    item = make_item()
    assert matches(item, "")
    assert matches(item, None)


def test_matches_with_explicit_fields(marketplace):
    iphone = marketplace[0]
    assert matches(iphone, "bgc", fields=("area",))
    assert not matches(iphone, "bgc")
