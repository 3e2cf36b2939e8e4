"""
Read-only listing snapshots and the per-surface query engines.

Snapshots are loaded once and handed to the engine on every request; route
handlers never mutate them.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from listing_engine.engine import QueryEngine
from listing_engine.predicates import flag_predicate
from listing_engine.samples import sample_snapshot
from listing_engine.snapshot import RECORD_TYPES, load_snapshot

from .config import config

logger = logging.getLogger(__name__)

ENGINES: Dict[str, QueryEngine] = {
    "properties": QueryEngine(
        facets={
            "featured": flag_predicate("featured"),
            "furnished": flag_predicate("furnished"),
            "monthly_stay": flag_predicate("monthly_stay"),
        },
        leaf_cap=config.GRID_LEAF_CAP,
    ),
    "jobs": QueryEngine(
        facets={
            "featured": flag_predicate("featured"),
            "urgent": flag_predicate("urgent"),
            "remote": flag_predicate("remote"),
        },
    ),
    "marketplace": QueryEngine(
        facets={
            "featured": flag_predicate("featured"),
            "urgent": flag_predicate("urgent"),
            "new": flag_predicate("is_new"),
            "active_sellers": flag_predicate("seller_verified"),
        },
    ),
}


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshots keyed by listing kind."""
    properties: Tuple[Any, ...] = ()
    jobs: Tuple[Any, ...] = ()
    marketplace: Tuple[Any, ...] = ()

    def snapshot(self, kind: str) -> Tuple[Any, ...]:
        return getattr(self, kind)

    def get(self, kind: str, listing_id: str) -> Optional[Any]:
        """Find a listing by id."""
        for listing in self.snapshot(kind):
            if listing.id == listing_id:
                return listing
        return None


def load_catalog(data_dir: Optional[str] = None) -> Catalog:
    """
    Build a catalog from ``<data_dir>/<kind>.json`` files, falling back to
    the bundled sample data for kinds without a file.
    """
    data_dir = config.DATA_DIR if data_dir is None else data_dir
    snapshots = {}
    for kind in RECORD_TYPES:
        path = os.path.join(data_dir, f"{kind}.json") if data_dir else ""
        if path and os.path.exists(path):
            snapshots[kind] = load_snapshot(path, kind)
        else:
            snapshots[kind] = sample_snapshot(kind)
            logger.info(f"Serving {len(snapshots[kind])} sample {kind} listings")
    return Catalog(**snapshots)


_catalog: Optional[Catalog] = None


def set_catalog(catalog: Optional[Catalog]) -> None:
    global _catalog
    _catalog = catalog


def get_catalog() -> Catalog:
    """FastAPI dependency returning the active catalog (loaded on first use)."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog
