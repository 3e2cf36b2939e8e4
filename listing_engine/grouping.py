"""
Region -> type bucketing for grid views.

Buckets are ordered by an explicit priority list first; keys missing from
the list follow in alphabetical order. The same ordering function is used
at both levels, each with its own priority list.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from .filters import SortKey
from .normalize import normalize
from .sorting import sort_listings

DEFAULT_REGION_PRIORITY: Tuple[str, ...] = (
    "manila", "cebu", "angeles", "davao", "baguio", "boracay",
)
DEFAULT_TYPE_PRIORITY: Tuple[str, ...] = ("house", "condo", "village", "apartment")


@dataclass
class TypeBucket:
    """Leaf bucket: listings of one type inside one region."""
    type: str
    items: List[Any] = field(default_factory=list)
    total: int = 0


@dataclass
class RegionBucket:
    """Listings sharing a normalized region, split further by type."""
    region: str
    items: List[Any] = field(default_factory=list)
    type_buckets: List[TypeBucket] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)


def bucket_rank(key: str, priority: Sequence[str]) -> Tuple[int, int, str, str]:
    """Sort key placing prioritized keys first (by index), then the rest A-Z."""
    key = key or ""
    try:
        return (0, list(priority).index(key), "", "")
    except ValueError:
        return (1, 0, key.casefold(), key)


def order_bucket_keys(keys: Iterable[str], priority: Sequence[str]) -> List[str]:
    """Order bucket keys by the priority list with alphabetical fallback."""
    priority = tuple(priority)
    return sorted(keys, key=lambda k: bucket_rank(k, priority))


def partition(listings: Iterable[Any], key_func) -> Dict[str, List[Any]]:
    """Split listings into lists keyed by ``key_func``, keeping input order."""
    buckets: Dict[str, List[Any]] = {}
    for listing in listings:
        buckets.setdefault(key_func(listing), []).append(listing)
    return buckets


def group_by_region_then_type(
    listings: Iterable[Any],
    region_priority: Sequence[str] = DEFAULT_REGION_PRIORITY,
    type_priority: Sequence[str] = DEFAULT_TYPE_PRIORITY,
    leaf_cap: Optional[int] = None,
) -> List[RegionBucket]:
    """
    Group listings into ordered region buckets, each holding ordered type
    buckets.

    Region keys and the region priority list are normalized (so "Metro
    Manila" and "manila" share a bucket and a rank); type keys are used
    as-is. Each leaf is ordered featured-first then by ascending price, and
    cut to ``leaf_cap`` items when a cap is given. ``TypeBucket.total`` always reports the uncut size.
    """
    by_region = partition(listings, lambda l: normalize(l.region))
    region_priority = tuple(normalize(p) for p in region_priority)

    result = []
    for region in order_bucket_keys(by_region, region_priority):
        members = by_region[region]
        by_type = partition(members, lambda l: l.category or "")

        type_buckets = []
        for type_key in order_bucket_keys(by_type, type_priority):
            leaf = sort_listings(by_type[type_key], SortKey.FEATURED_THEN_PRICE)
            total = len(leaf)
            if leaf_cap is not None:
                leaf = leaf[:max(0, leaf_cap)]
            type_buckets.append(TypeBucket(type=type_key, items=leaf, total=total))

        result.append(RegionBucket(region=region, items=list(members), type_buckets=type_buckets))
    return result
