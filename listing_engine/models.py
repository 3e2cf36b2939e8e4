"""
Data models for portal listings.

The query engine never depends on a concrete record type. It reads the
projected attributes described by ``Listing``; each domain record below
supplies them as plain fields or read-only properties.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from .utils import parse_timestamp, to_float, to_int


class Listing(Protocol):
    """Projection every listing record exposes to the query engine."""

    id: str
    title: str
    region: str
    category: str
    status: str

    @property
    def price_low(self) -> Optional[float]: ...

    @property
    def price_high(self) -> Optional[float]: ...

    @property
    def featured(self) -> bool: ...

    @property
    def urgent(self) -> bool: ...

    @property
    def remote(self) -> bool: ...

    @property
    def created_at(self) -> datetime: ...

    @property
    def updated_at(self) -> datetime: ...

    @property
    def popularity(self) -> int: ...

    @property
    def display_name(self) -> str: ...

    @property
    def text_fields(self) -> Tuple[str, ...]: ...

    @property
    def tags(self) -> Sequence[str]: ...


@dataclass
class PropertyListing:
    """A rental property (house, condo, village...)."""

    id: str
    title: str
    type: str
    region: str
    price: Optional[float]
    created_at: datetime
    updated_at: datetime

    description: str = ""
    city: str = ""
    district: str = ""
    currency: str = "PHP"
    bedrooms: int = 0
    bathrooms: int = 0
    area: Optional[float] = None
    furnished: bool = False
    amenities: List[str] = field(default_factory=list)
    featured: bool = False
    monthly_stay: bool = False
    views: int = 0
    favorites: int = 0
    status: str = "active"

    @property
    def category(self) -> str:
        return self.type

    @property
    def price_low(self) -> Optional[float]:
        return self.price

    @property
    def price_high(self) -> Optional[float]:
        return self.price

    @property
    def urgent(self) -> bool:
        return False

    @property
    def remote(self) -> bool:
        return False

    @property
    def popularity(self) -> int:
        return self.views + self.favorites

    @property
    def display_name(self) -> str:
        return self.title

    @property
    def text_fields(self) -> Tuple[str, ...]:
        return (self.title, self.description, self.city, self.district)

    @property
    def tags(self) -> List[str]:
        return self.amenities

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropertyListing":
        """Build a property from a camelCase JSON payload."""
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            type=data.get("type") or "",
            region=data.get("region") or "",
            price=to_float(data.get("price")),
            created_at=parse_timestamp(data["createdAt"]),
            updated_at=parse_timestamp(data.get("updatedAt") or data["createdAt"]),
            description=data.get("description") or "",
            city=data.get("city") or "",
            district=data.get("district") or "",
            currency=data.get("currency") or "PHP",
            bedrooms=to_int(data.get("bedrooms")),
            bathrooms=to_int(data.get("bathrooms")),
            area=to_float(data.get("area")),
            furnished=bool(data.get("furnished", False)),
            amenities=list(data.get("amenities") or []),
            featured=bool(data.get("featured", False)),
            monthly_stay=bool((data.get("monthlyStay") or {}).get("available", False)),
            views=to_int(data.get("viewCount", data.get("views"))),
            favorites=to_int(data.get("favorites")),
            status=data.get("status") or "active",
        )


@dataclass
class JobListing:
    """A job posting. Grouped and filtered by job type."""

    id: str
    title: str
    company_name: str
    job_type: str
    region: str
    salary_min: Optional[float]
    salary_max: Optional[float]
    posted_at: datetime
    updated_at: datetime

    company_id: str = ""
    location: str = ""
    sector: str = ""
    experience_level: str = ""
    currency: str = "PHP"
    salary_period: str = "monthly"
    description: str = ""
    skills: List[str] = field(default_factory=list)
    views: int = 0
    applications: int = 0
    is_urgent: bool = False
    is_featured: bool = False
    is_remote: bool = False
    status: str = "active"

    @property
    def category(self) -> str:
        return self.job_type

    @property
    def price_low(self) -> Optional[float]:
        return self.salary_min

    @property
    def price_high(self) -> Optional[float]:
        return self.salary_max

    @property
    def featured(self) -> bool:
        return self.is_featured

    @property
    def urgent(self) -> bool:
        return self.is_urgent

    @property
    def remote(self) -> bool:
        return self.is_remote or self.job_type == "remote"

    @property
    def created_at(self) -> datetime:
        return self.posted_at

    @property
    def popularity(self) -> int:
        return self.applications

    @property
    def display_name(self) -> str:
        return self.company_name

    @property
    def text_fields(self) -> Tuple[str, ...]:
        return (self.title, self.company_name, self.description)

    @property
    def tags(self) -> List[str]:
        return self.skills

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobListing":
        """Build a job from a camelCase JSON payload."""
        company = data.get("company") or {}
        salary = data.get("salaryRange") or {}
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            company_name=company.get("name") or "",
            job_type=data.get("jobType") or "",
            region=data.get("region") or "",
            salary_min=to_float(salary.get("min")),
            salary_max=to_float(salary.get("max")),
            posted_at=parse_timestamp(data["postedDate"]),
            updated_at=parse_timestamp(data.get("updatedDate") or data["postedDate"]),
            company_id=company.get("id") or "",
            location=data.get("location") or "",
            sector=data.get("category") or "",
            experience_level=data.get("experienceLevel") or "",
            currency=salary.get("currency") or "PHP",
            salary_period=salary.get("period") or "monthly",
            description=data.get("description") or "",
            skills=list(data.get("skills") or []),
            views=to_int(data.get("views")),
            applications=to_int(data.get("applications")),
            is_urgent=bool(data.get("isUrgent", False)),
            is_featured=bool(data.get("isFeatured", False)),
            is_remote=bool(data.get("isRemote", False)),
            status=data.get("status") or "active",
        )


@dataclass
class MarketplaceItem:
    """A second-hand item for sale."""

    id: str
    title: str
    category: str
    region: str
    price: Optional[float]
    posted_at: datetime
    updated_at: datetime

    description: str = ""
    currency: str = "PHP"
    negotiable: bool = False
    condition: str = ""
    subcategory: str = ""
    seller_id: str = ""
    seller_name: str = ""
    seller_verified: bool = False
    city: str = ""
    area: str = ""
    item_tags: List[str] = field(default_factory=list)
    views: int = 0
    favorites: int = 0
    inquiries: int = 0
    status: str = "active"
    is_featured: bool = False
    is_urgent: bool = False

    @property
    def price_low(self) -> Optional[float]:
        return self.price

    @property
    def price_high(self) -> Optional[float]:
        return self.price

    @property
    def featured(self) -> bool:
        return self.is_featured

    @property
    def urgent(self) -> bool:
        return self.is_urgent

    @property
    def remote(self) -> bool:
        # Verified sellers count as "active" in the marketplace facets.
        return self.seller_verified

    @property
    def is_new(self) -> bool:
        return self.condition == "new"

    @property
    def created_at(self) -> datetime:
        return self.posted_at

    @property
    def popularity(self) -> int:
        return self.views + self.favorites

    @property
    def display_name(self) -> str:
        return self.title

    @property
    def text_fields(self) -> Tuple[str, ...]:
        return (self.title, self.description, self.seller_name)

    @property
    def tags(self) -> List[str]:
        return self.item_tags

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarketplaceItem":
        """Build an item from a camelCase JSON payload."""
        seller = data.get("seller") or {}
        location = data.get("location") or {}
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            category=data.get("category") or "",
            region=location.get("region") or "",
            price=to_float(data.get("price")),
            posted_at=parse_timestamp(data["postedDate"]),
            updated_at=parse_timestamp(data.get("updatedDate") or data["postedDate"]),
            description=data.get("description") or "",
            currency=data.get("currency") or "PHP",
            negotiable=bool(data.get("negotiable", False)),
            condition=data.get("condition") or "",
            subcategory=data.get("subcategory") or "",
            seller_id=seller.get("id") or "",
            seller_name=seller.get("name") or "",
            seller_verified=bool(seller.get("verified", False)),
            city=location.get("city") or "",
            area=location.get("area") or "",
            item_tags=list(data.get("tags") or []),
            views=to_int(data.get("views")),
            favorites=to_int(data.get("favorites")),
            inquiries=to_int(data.get("inquiries")),
            status=data.get("status") or "active",
            is_featured=bool(data.get("isFeatured", False)),
            is_urgent=bool(data.get("isUrgent", False)),
        )
