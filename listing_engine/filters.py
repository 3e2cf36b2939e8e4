"""
Typed query parameters accepted by the engine.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class SortKey(str, Enum):
    """Named orderings. See ``sorting`` for the tie-break chain of each."""

    LATEST = "latest"
    NEWEST = "newest"
    PRICE_HIGH = "price_high"
    PRICE_LOW = "price_low"
    POPULARITY = "popularity"
    FEATURED_THEN_PRICE = "featured_then_price"
    NAME = "name"

    @classmethod
    def parse(cls, value: Union[str, "SortKey", None]) -> "SortKey":
        """Resolve a sort name or alias; anything unrecognised is ``LATEST``."""
        if isinstance(value, SortKey):
            return value
        if not value or not isinstance(value, str):
            return cls.LATEST
        name = value.strip().lower()
        name = SORT_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            return cls.LATEST


SORT_ALIASES = {
    "salary_high": "price_high",
    "salary_low": "price_low",
    "popular": "popularity",
    "applications": "popularity",
    "company": "name",
    "date": "latest",
}


def clamp_page(page: Any) -> int:
    """Pages are 1-indexed; anything below (or unparseable) becomes 1."""
    try:
        return max(1, int(page))
    except (TypeError, ValueError):
        return 1


def clamp_limit(limit: Any) -> int:
    """Limits are bounded to ``[1, MAX_PAGE_SIZE]``."""
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return min(max(1, value), MAX_PAGE_SIZE)


@dataclass(frozen=True)
class FilterSpec:
    """
    Immutable description of one listing query.

    Every constraint is optional; a field left as ``None`` (or an empty
    ``search``) does not narrow the result. ``attributes`` carries extra
    exact-match facets (``{"condition": ("new", "like_new")}``) that only
    apply to records exposing that attribute.
    """

    region: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    featured: Optional[bool] = None
    urgent: Optional[bool] = None
    remote: Optional[bool] = None
    search: Optional[str] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)
    sort_by: SortKey = SortKey.LATEST
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        object.__setattr__(self, "sort_by", SortKey.parse(self.sort_by))
        object.__setattr__(self, "page", clamp_page(self.page))
        object.__setattr__(self, "limit", clamp_limit(self.limit))
