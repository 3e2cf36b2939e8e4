"""
Exact facet counts over a filtered (not yet paginated) listing set.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from .normalize import normalize
from .predicates import flag_predicate

DEFAULT_FACETS: Mapping[str, Callable[[Any], bool]] = {
    "featured": flag_predicate("featured"),
    "urgent": flag_predicate("urgent"),
    "remote": flag_predicate("remote"),
}


@dataclass
class FacetStats:
    """Summary counters for stats widgets and facet badges."""
    total: int = 0
    counts: Dict[str, int] = field(default_factory=dict)
    by_region: Dict[str, int] = field(default_factory=dict)
    by_category: Dict[str, int] = field(default_factory=dict)
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    avg_price: Optional[float] = None


def aggregate(
    filtered: Sequence[Any],
    facets: Mapping[str, Callable[[Any], bool]] = DEFAULT_FACETS,
) -> FacetStats:
    """Count every named facet predicate over ``filtered`` in a single pass."""
    counts = {name: 0 for name in facets}
    by_region: Dict[str, int] = {}
    by_category: Dict[str, int] = {}
    prices = []

    for listing in filtered:
        for name, predicate in facets.items():
            if predicate(listing):
                counts[name] += 1
        region = normalize(listing.region)
        by_region[region] = by_region.get(region, 0) + 1
        by_category[listing.category] = by_category.get(listing.category, 0) + 1
        if listing.price_low is not None:
            prices.append(listing.price_low)

    return FacetStats(
        total=len(filtered),
        counts=counts,
        by_region=by_region,
        by_category=by_category,
        min_price=min(prices) if prices else None,
        max_price=max(prices) if prices else None,
        avg_price=sum(prices) / len(prices) if prices else None,
    )
