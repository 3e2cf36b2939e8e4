"""
Loading read-only listing snapshots from JSON.
"""
import json
import logging
from typing import Any, Dict, Iterable, Tuple, Type

from .models import JobListing, MarketplaceItem, PropertyListing

logger = logging.getLogger(__name__)

RECORD_TYPES: Dict[str, Type] = {
    "properties": PropertyListing,
    "jobs": JobListing,
    "marketplace": MarketplaceItem,
}


def build_snapshot(kind: str, payloads: Iterable[Dict[str, Any]]) -> Tuple[Any, ...]:
    """Turn camelCase payloads into an immutable tuple of records."""
    try:
        record_type = RECORD_TYPES[kind]
    except KeyError:
        raise ValueError(f"Unknown listing kind: {kind!r}") from None
    return tuple(record_type.from_dict(p) for p in payloads)


def load_snapshot(path: str, kind: str) -> Tuple[Any, ...]:
    """
    Read a JSON array of listings from ``path``.

    A top-level object with a ``data`` array (the API envelope) is accepted
    as well, so saved API responses can be replayed.
    """
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    if isinstance(payload, dict):
        payload = payload.get("data", [])
    records = build_snapshot(kind, payload)
    logger.info(f"Loaded {len(records)} {kind} listings from {path}")
    return records
