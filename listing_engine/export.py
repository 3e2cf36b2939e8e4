"""
Tabular export of listing query results.
"""
import dataclasses
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

DEFAULT_COLUMNS = ["id", "title", "region", "category", "price_low", "price_high", "featured"]


def listing_row(listing: Any) -> Dict[str, Any]:
    """Flatten one listing into CSV-friendly scalars."""
    if dataclasses.is_dataclass(listing):
        row = dataclasses.asdict(listing)
    else:
        row = dict(vars(listing))

    for key, value in list(row.items()):
        if isinstance(value, (list, tuple)):
            row[key] = "|".join(str(v) for v in value)
        elif isinstance(value, datetime):
            row[key] = value.isoformat()

    # Projected fields are what the engine filtered and sorted on.
    row.setdefault("category", listing.category)
    row["price_low"] = listing.price_low
    row["price_high"] = listing.price_high
    row["featured"] = listing.featured
    return row


def listings_to_frame(listings: Iterable[Any]) -> pd.DataFrame:
    """Build a DataFrame from listings, keeping input order."""
    rows: List[Dict[str, Any]] = [listing_row(x) for x in listings]
    if not rows:
        return pd.DataFrame(columns=DEFAULT_COLUMNS)
    return pd.DataFrame(rows)


def save_output_rows(listings: Iterable[Any], out_path: str,
                     logger: Optional[logging.Logger] = None) -> pd.DataFrame:
    """Save listings to a CSV file."""
    df = listings_to_frame(listings)
    df.to_csv(out_path, index=False)

    if logger:
        logger.info(f">>> Saved {len(df)} rows to {out_path}")
    return df


def frame_to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
