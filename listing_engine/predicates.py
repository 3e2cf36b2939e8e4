"""
Compose a FilterSpec into a single boolean predicate over listings.
"""
from typing import Any, Callable, Collection, List, Optional

from .filters import FilterSpec
from .normalize import normalize, normalize_key
from .search import matches

Predicate = Callable[[Any], bool]

_MISSING = object()


def always(listing: Any) -> bool:
    return True


def flag_predicate(name: str, expected: bool = True) -> Predicate:
    """Predicate testing a boolean facet flag such as ``featured``."""
    def check(listing: Any) -> bool:
        return bool(getattr(listing, name, False)) is expected
    return check


def region_predicate(region: str) -> Predicate:
    wanted = normalize(region)
    def check(listing: Any) -> bool:
        return normalize(listing.region) == wanted
    return check


def key_predicate(name: str, value: str) -> Predicate:
    wanted = normalize_key(value)
    def check(listing: Any) -> bool:
        return normalize_key(getattr(listing, name, "")) == wanted
    return check


def price_predicate(min_price: Optional[float], max_price: Optional[float]) -> Predicate:
    """
    Inclusive range check. The low end of a listing is tested against
    ``min_price`` and the high end against ``max_price``, so a salary
    range must fit entirely inside the requested band. Unknown prices fail
    whichever side was supplied.
    """
    def check(listing: Any) -> bool:
        if min_price is not None:
            low = listing.price_low
            if low is None or low < min_price:
                return False
        if max_price is not None:
            high = listing.price_high
            if high is None or high > max_price:
                return False
        return True
    return check


def _same(actual: Any, expected: Any) -> bool:
    if isinstance(actual, str) and isinstance(expected, str):
        return normalize_key(actual) == normalize_key(expected)
    return actual == expected


def attribute_predicate(name: str, expected: Any) -> Predicate:
    """
    Exact match on an arbitrary attribute. A collection of values means
    "any of". Records that do not have the attribute are not constrained.
    """
    is_choice = isinstance(expected, Collection) and not isinstance(expected, str)
    if is_choice and not expected:
        return always

    def check(listing: Any) -> bool:
        actual = getattr(listing, name, _MISSING)
        if actual is _MISSING:
            return True
        if is_choice:
            return any(_same(actual, option) for option in expected)
        return _same(actual, expected)
    return check


def search_predicate(term: str) -> Predicate:
    def check(listing: Any) -> bool:
        return matches(listing, term)
    return check


def build_predicate(spec: FilterSpec) -> Predicate:
    """AND together every constraint set on ``spec``."""
    checks: List[Predicate] = []

    if spec.region:
        checks.append(region_predicate(spec.region))
    if spec.category:
        checks.append(key_predicate("category", spec.category))
    if spec.status:
        checks.append(key_predicate("status", spec.status))
    if spec.min_price is not None or spec.max_price is not None:
        checks.append(price_predicate(spec.min_price, spec.max_price))
    for flag in ("featured", "urgent", "remote"):
        expected = getattr(spec, flag)
        if expected is not None:
            checks.append(flag_predicate(flag, expected))
    for name, expected in spec.attributes.items():
        if expected is None:
            continue
        checks.append(attribute_predicate(name, expected))
    if spec.search and spec.search.strip():
        checks.append(search_predicate(spec.search))

    if not checks:
        return always
    if len(checks) == 1:
        return checks[0]

    def combined(listing: Any) -> bool:
        return all(check(listing) for check in checks)
    return combined
