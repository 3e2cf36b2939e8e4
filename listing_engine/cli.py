"""
Command line front-end: run a listing query over a JSON snapshot.

    python -m listing_engine.cli --kind marketplace --input items.json \
        --category electronics --sort price_low --out result.csv
"""
import argparse
import os
import sys
from typing import List, Optional

from .engine import QueryEngine
from .export import save_output_rows
from .filters import DEFAULT_PAGE_SIZE, FilterSpec, SortKey
from .snapshot import RECORD_TYPES, load_snapshot
from .sorting import sort_listings
from .utils import init_logger


def parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Faceted query over a listings snapshot (JSON)")
    ap.add_argument("--kind", choices=sorted(RECORD_TYPES), required=True, help="Listing kind")
    ap.add_argument("--input", required=True, help="Path to a JSON array of listings")
    ap.add_argument("--region", default=None, help="Region (aliases like 'NCR' accepted)")
    ap.add_argument("--category", default=None, help="Category / type / job type")
    ap.add_argument("--min-price", type=float, default=None, help="Minimum price or salary")
    ap.add_argument("--max-price", type=float, default=None, help="Maximum price or salary")
    ap.add_argument("--search", default=None, help="Free-text search term")
    ap.add_argument("--featured", action="store_true", help="Only featured listings")
    ap.add_argument("--remote", action="store_true", help="Only remote / active-seller listings")
    ap.add_argument("--sort", default=SortKey.LATEST.value,
                    help="latest, newest, price_high, price_low, popularity, featured_then_price, name")
    ap.add_argument("--page", type=int, default=1, help="Page number (1-indexed)")
    ap.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE, help="Page size (1-100)")
    ap.add_argument("--grouped", action="store_true", help="Print region/type buckets instead of a page")
    ap.add_argument("--cap", type=int, default=5, help="Per-bucket display cap for --grouped")
    ap.add_argument("--out", default="", help="Write the filtered, sorted set to this CSV")
    lvl_choices = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    ap.add_argument("--log-level", choices=lvl_choices, default=os.getenv("LOG_LEVEL", "INFO"),
                    help="Console log level (default from env LOG_LEVEL or INFO).")
    return ap.parse_args(argv)


def spec_from_args(args) -> FilterSpec:
    return FilterSpec(
        region=args.region,
        category=args.category,
        min_price=args.min_price,
        max_price=args.max_price,
        search=args.search,
        featured=True if args.featured else None,
        remote=True if args.remote else None,
        sort_by=args.sort,
        page=args.page,
        limit=args.limit,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = init_logger(console_level=args.log_level)

    try:
        collection = load_snapshot(args.input, args.kind)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Could not load {args.input}: {e}")
        return 1

    engine = QueryEngine(leaf_cap=args.cap)
    spec = spec_from_args(args)

    if args.grouped:
        result = engine.query_grouped(collection, spec)
        for bucket in result.buckets:
            print(f"{bucket.region} ({bucket.total})")
            for leaf in bucket.type_buckets:
                print(f"  {leaf.type} ({leaf.total})")
                for listing in leaf.items:
                    print(f"    - {listing.title} [{listing.price_low}]")
    else:
        result = engine.query(collection, spec)
        meta = result.meta
        print(f"{meta.total} matches, page {meta.page}/{max(meta.total_pages, 1)}")
        for listing in result.listings:
            print(f"- {listing.id}: {listing.title} [{listing.price_low}]")
        print(f"facets: {meta.stats.counts}")

    if args.out:
        filtered = engine.filter(collection, spec)
        save_output_rows(sort_listings(filtered, spec.sort_by), args.out, logger=logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
