"""
Pydantic models for API request/response serialization.
"""
from datetime import datetime
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from listing_engine.engine import PageMeta
from listing_engine.facets import FacetStats
from listing_engine.grouping import RegionBucket

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base model: camelCase on the wire, built from engine dataclasses."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PropertyOut(ApiModel):
    """Output model for property listings."""
    id: str
    title: str
    description: str = ""
    type: str
    region: str
    city: str = ""
    district: str = ""
    price: Optional[float] = None
    currency: str = "PHP"
    bedrooms: int = 0
    bathrooms: int = 0
    area: Optional[float] = None
    furnished: bool = False
    amenities: List[str] = []
    featured: bool = False
    monthly_stay: bool = False
    views: int = 0
    favorites: int = 0
    status: str = "active"
    created_at: datetime
    updated_at: datetime


class JobOut(ApiModel):
    """Output model for job postings."""
    id: str
    title: str
    company_name: str
    company_id: str = ""
    location: str = ""
    region: str = ""
    job_type: str
    sector: str = ""
    experience_level: str = ""
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    currency: str = "PHP"
    salary_period: str = "monthly"
    description: str = ""
    skills: List[str] = []
    views: int = 0
    applications: int = 0
    is_urgent: bool = False
    is_featured: bool = False
    is_remote: bool = False
    status: str = "active"
    posted_at: datetime
    updated_at: datetime


class MarketplaceItemOut(ApiModel):
    """Output model for marketplace items."""
    id: str
    title: str
    description: str = ""
    price: Optional[float] = None
    currency: str = "PHP"
    negotiable: bool = False
    condition: str = ""
    category: str
    subcategory: str = ""
    seller_id: str = ""
    seller_name: str = ""
    seller_verified: bool = False
    region: str = ""
    city: str = ""
    area: str = ""
    tags: List[str] = []
    views: int = 0
    favorites: int = 0
    inquiries: int = 0
    status: str = "active"
    is_featured: bool = False
    is_urgent: bool = False
    posted_at: datetime
    updated_at: datetime


class FacetStatsOut(ApiModel):
    """Exact facet counts over the filtered set."""
    total: int
    counts: Dict[str, int] = {}
    by_region: Dict[str, int] = {}
    by_category: Dict[str, int] = {}
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    avg_price: Optional[float] = None

    @classmethod
    def from_stats(cls, stats: FacetStats) -> "FacetStatsOut":
        return cls.model_validate(stats)


class PageMetaOut(ApiModel):
    """Pagination metadata; ``filters`` carries the facet counts."""
    total: int
    page: int
    limit: int
    has_next: bool
    has_prev: bool
    total_pages: int
    filters: FacetStatsOut

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PageMetaOut":
        return cls(
            total=meta.total,
            page=meta.page,
            limit=meta.limit,
            has_next=meta.has_next,
            has_prev=meta.has_prev,
            total_pages=meta.total_pages,
            filters=FacetStatsOut.from_stats(meta.stats),
        )


class TypeBucketOut(ApiModel):
    type: str
    total: int
    items: List[PropertyOut]


class RegionBucketOut(ApiModel):
    region: str
    total: int
    type_buckets: List[TypeBucketOut]

    @classmethod
    def from_bucket(cls, bucket: RegionBucket) -> "RegionBucketOut":
        return cls(
            region=bucket.region,
            total=bucket.total,
            type_buckets=[
                TypeBucketOut(
                    type=leaf.type,
                    total=leaf.total,
                    items=[PropertyOut.model_validate(x) for x in leaf.items],
                )
                for leaf in bucket.type_buckets
            ],
        )


class GridOut(ApiModel):
    regions: List[RegionBucketOut]
    stats: FacetStatsOut


class Envelope(ApiModel, Generic[T]):
    """Standard success envelope ``{success, data, message, meta}``."""
    success: bool = True
    data: T
    message: str = ""
    meta: Optional[PageMetaOut] = None


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[Dict] = None


class ErrorEnvelope(BaseModel):
    """Failure envelope ``{success: false, error, timestamp, path}``."""
    success: bool = False
    error: ErrorDetail
    timestamp: str
    path: str
