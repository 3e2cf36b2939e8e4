"""
Tests for facet value normalization.
"""
import pytest

from listing_engine.normalize import REGION_ALIASES, normalize, normalize_key


@pytest.mark.parametrize("raw", ["Metro Manila", "NCR", "ncr", "  manila ", "MANILA", "metro   manila"])
def test_manila_aliases(raw):
    assert normalize(raw) == "manila"


def test_unknown_region_passes_through_lowercased():
    assert normalize("Negros Oriental") == "negros oriental"
    assert normalize("unknown1") == "unknown1"


def test_none_and_empty():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize_key(None) == ""


def test_custom_alias_table():
    assert normalize("QC", aliases={"qc": "quezon city"}) == "quezon city"
    # Default aliases do not apply when a different table is passed
    assert normalize("NCR", aliases={}) == "ncr"


def test_normalize_key_ignores_aliases():
    assert normalize_key(" Home_Appliances ") == "home_appliances"
    assert normalize_key("NCR") == "ncr"


def test_aliases_map_to_their_own_fixed_point():
    for target in REGION_ALIASES.values():
        assert normalize(target) == target
