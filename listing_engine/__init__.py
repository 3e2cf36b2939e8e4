"""
Faceted listing query engine package.
"""
from .engine import GroupedResult, PageMeta, QueryEngine, QueryResult, query, query_grouped
from .facets import DEFAULT_FACETS, FacetStats, aggregate
from .filters import FilterSpec, SortKey
from .grouping import RegionBucket, TypeBucket, group_by_region_then_type
from .models import JobListing, Listing, MarketplaceItem, PropertyListing
from .normalize import normalize
from .pagination import paginate
from .predicates import build_predicate
from .search import matches
from .sorting import sort_listings

__version__ = "1.0.0"

__all__ = [
    "FilterSpec",
    "SortKey",
    "Listing",
    "PropertyListing",
    "JobListing",
    "MarketplaceItem",
    "normalize",
    "build_predicate",
    "matches",
    "sort_listings",
    "group_by_region_then_type",
    "RegionBucket",
    "TypeBucket",
    "paginate",
    "aggregate",
    "FacetStats",
    "DEFAULT_FACETS",
    "QueryEngine",
    "QueryResult",
    "GroupedResult",
    "PageMeta",
    "query",
    "query_grouped",
]
