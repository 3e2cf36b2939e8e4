"""
Shared fixtures: sample snapshots pinned to a fixed clock and a small
factory for ad-hoc marketplace items.
"""
from datetime import datetime, timedelta, timezone

import pytest

from listing_engine.models import MarketplaceItem
from listing_engine.samples import sample_snapshot

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def marketplace():
    return sample_snapshot("marketplace", now=NOW)


@pytest.fixture
def jobs():
    return sample_snapshot("jobs", now=NOW)


@pytest.fixture
def properties():
    return sample_snapshot("properties", now=NOW)


@pytest.fixture
def make_item():
    """Build a MarketplaceItem with sensible defaults."""
    counter = {"n": 0}

    def factory(**overrides):
        counter["n"] += 1
        fields = {
            "id": str(counter["n"]),
            "title": f"Item {counter['n']}",
            "category": "misc",
            "region": "manila",
            "price": 1000.0,
            "posted_at": NOW - timedelta(days=1),
            "updated_at": NOW - timedelta(days=1),
        }
        fields.update(overrides)
        return MarketplaceItem(**fields)

    return factory
