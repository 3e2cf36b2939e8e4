"""
Stable multi-key ordering of listings.

Every ordering is built on ``sorted`` and therefore stable: listings whose
keys compare equal keep their input order, which is the final tie-break of
every sort key. Descending orders use ``reverse=True``, which preserves
that guarantee.

    key                  primary                        tie-break
    latest (default)     updated_at desc                input order
    newest               created_at desc                input order
    price_high           price_high desc                input order
    price_low            price_low asc                  input order
    popularity           popularity desc                input order
    featured_then_price  featured first                 price_low asc, input order
    name                 display_name asc (exact case)  input order
"""
from typing import Any, Callable, Iterable, List, Tuple, Union

from .filters import SortKey


def _price_asc(value) -> Tuple[bool, float]:
    # Unknown prices always sort after known ones.
    return (value is None, value if value is not None else 0.0)


def _price_desc(value) -> Tuple[bool, float]:
    # Used with reverse=True, so "known" must compare greater.
    return (value is not None, value if value is not None else 0.0)


def _latest(listing: Any):
    return listing.updated_at


def _newest(listing: Any):
    return listing.created_at


def _price_high(listing: Any):
    return _price_desc(listing.price_high)


def _price_low(listing: Any):
    return _price_asc(listing.price_low)


def _popularity(listing: Any):
    return listing.popularity


def _featured_then_price(listing: Any):
    return (not listing.featured,) + _price_asc(listing.price_low)


def _name(listing: Any):
    return listing.display_name or ""


SORT_KEYS: dict = {
    SortKey.LATEST: (_latest, True),
    SortKey.NEWEST: (_newest, True),
    SortKey.PRICE_HIGH: (_price_high, True),
    SortKey.PRICE_LOW: (_price_low, False),
    SortKey.POPULARITY: (_popularity, True),
    SortKey.FEATURED_THEN_PRICE: (_featured_then_price, False),
    SortKey.NAME: (_name, False),
}


def sort_key_for(key: Union[SortKey, str, None]) -> Tuple[Callable[[Any], Any], bool]:
    """Return ``(key_function, descending)`` for a sort name."""
    return SORT_KEYS[SortKey.parse(key)]


def sort_listings(listings: Iterable[Any], key: Union[SortKey, str, None] = SortKey.LATEST) -> List[Any]:
    """Return a new, stably ordered list. The input is left untouched."""
    key_func, descending = sort_key_for(key)
    return sorted(listings, key=key_func, reverse=descending)
