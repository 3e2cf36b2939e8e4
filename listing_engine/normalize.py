"""
Canonical keys for free-form facet values.

Region names arrive in many spellings ("Metro Manila", "NCR", "manila").
Everything that compares or buckets facet values goes through here.
"""
from typing import Mapping, Optional

from .utils import clean_text

REGION_ALIASES: Mapping[str, str] = {
    "metro manila": "manila",
    "ncr": "manila",
    "national capital region": "manila",
    "manila city": "manila",
    "cebu city": "cebu",
    "angeles city": "angeles",
    "davao city": "davao",
    "baguio city": "baguio",
}


def normalize(raw: Optional[str], aliases: Mapping[str, str] = REGION_ALIASES) -> str:
    """Lower-case, trim and de-alias a facet value. Unknown values pass through."""
    key = clean_text(raw).lower()
    return aliases.get(key, key)


def normalize_key(raw: Optional[str]) -> str:
    """Alias-free variant for categories, statuses and other plain facets."""
    return clean_text(raw).lower()
