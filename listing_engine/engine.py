"""
Query engine orchestration.

A query is a pure function of ``(snapshot, FilterSpec)``:

    flat:    filter -> sort -> aggregate -> paginate
    grouped: filter -> aggregate -> group (sort + cap inside each leaf)

The engine keeps configuration only; it never stores or mutates the
collections it is handed.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from .facets import DEFAULT_FACETS, FacetStats, aggregate
from .filters import FilterSpec
from .grouping import (
    DEFAULT_REGION_PRIORITY,
    DEFAULT_TYPE_PRIORITY,
    RegionBucket,
    group_by_region_then_type,
)
from .pagination import paginate, total_pages
from .predicates import build_predicate
from .sorting import sort_listings

logger = logging.getLogger(__name__)

DEFAULT_LEAF_CAP = 5


@dataclass
class PageMeta:
    total: int
    page: int
    limit: int
    has_next: bool
    has_prev: bool
    total_pages: int
    stats: FacetStats = field(default_factory=FacetStats)


class QueryResult(NamedTuple):
    listings: List[Any]
    meta: PageMeta


class GroupedResult(NamedTuple):
    buckets: List[RegionBucket]
    stats: FacetStats


@dataclass(frozen=True)
class QueryEngine:
    """
    Bundles the per-surface configuration of the engine.

    ``facets`` names the boolean counters reported in ``FacetStats``;
    the priority lists and ``leaf_cap`` only affect grouped queries.
    """

    facets: Mapping[str, Callable[[Any], bool]] = field(default_factory=lambda: dict(DEFAULT_FACETS))
    region_priority: Sequence[str] = DEFAULT_REGION_PRIORITY
    type_priority: Sequence[str] = DEFAULT_TYPE_PRIORITY
    leaf_cap: Optional[int] = DEFAULT_LEAF_CAP

    def filter(self, collection: Iterable[Any], spec: FilterSpec) -> List[Any]:
        """Listings satisfying every constraint of ``spec``, in input order."""
        predicate = build_predicate(spec)
        return [listing for listing in collection if predicate(listing)]

    def stats(self, collection: Iterable[Any], spec: FilterSpec) -> FacetStats:
        """Facet counts for ``spec`` without building a page."""
        return aggregate(self.filter(collection, spec), self.facets)

    def query(self, collection: Sequence[Any], spec: FilterSpec) -> QueryResult:
        """Run a flat query and return one page plus its metadata."""
        filtered = self.filter(collection, spec)
        ordered = sort_listings(filtered, spec.sort_by)
        stats = aggregate(filtered, self.facets)
        page = paginate(ordered, spec.page, spec.limit)

        logger.debug(
            f"Query matched {len(filtered)} of {len(collection)} listings "
            f"(sort={spec.sort_by.value}, page={spec.page}, limit={spec.limit})"
        )

        meta = PageMeta(
            total=len(filtered),
            page=spec.page,
            limit=spec.limit,
            has_next=page.has_next,
            has_prev=page.has_prev,
            total_pages=total_pages(len(filtered), spec.limit),
            stats=stats,
        )
        return QueryResult(listings=page.items, meta=meta)

    def query_grouped(self, collection: Sequence[Any], spec: FilterSpec,
                      leaf_cap: Optional[int] = None) -> GroupedResult:
        """
        Run a grouped query for region/type grids.

        Pagination fields of ``spec`` are ignored; each leaf bucket is cut
        to ``leaf_cap`` (or the engine default) instead.
        """
        filtered = self.filter(collection, spec)
        cap = self.leaf_cap if leaf_cap is None else leaf_cap
        buckets = group_by_region_then_type(
            filtered,
            region_priority=self.region_priority,
            type_priority=self.type_priority,
            leaf_cap=cap,
        )
        logger.debug(f"Grouped {len(filtered)} listings into {len(buckets)} region buckets")
        return GroupedResult(buckets=buckets, stats=aggregate(filtered, self.facets))


default_engine = QueryEngine()


def query(collection: Sequence[Any], spec: FilterSpec) -> QueryResult:
    return default_engine.query(collection, spec)


def query_grouped(collection: Sequence[Any], spec: FilterSpec,
                  leaf_cap: Optional[int] = None) -> GroupedResult:
    return default_engine.query_grouped(collection, spec, leaf_cap=leaf_cap)
