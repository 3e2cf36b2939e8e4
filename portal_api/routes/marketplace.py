"""
API route handlers for marketplace items.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from listing_engine.filters import FilterSpec
from listing_engine.sorting import sort_listings

from ..catalog import ENGINES, Catalog, get_catalog
from ..config import config
from ..errors import ApiError, ErrorCodes
from ..models import Envelope, FacetStatsOut, MarketplaceItemOut
from .common import (
    ERROR_RESPONSES, check_pagination, choice, csv_response, not_found, only, page_envelope,
    split_choices,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["marketplace"], responses=ERROR_RESPONSES)

engine = ENGINES["marketplace"]


def get_item_filters(
    page: int = 1,
    limit: int = config.DEFAULT_PAGE_SIZE,
    category: Optional[str] = None,
    location: Optional[str] = None,
    region: Optional[str] = None,
    condition: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    search: Optional[str] = None,
    sort: Optional[str] = None,
    featured: Optional[bool] = None,
    seller_id: Optional[str] = Query(None, alias="sellerId"),
) -> FilterSpec:
    """
    Dependency to extract and validate marketplace filters.

    ``location`` is an alias of ``region``: both match the normalized region
    exactly (``NCR`` finds Metro Manila listings); city names such as
    ``Makati`` are not matched.
    """
    check_pagination(page, limit)
    return FilterSpec(
        region=choice(region) or choice(location),
        category=choice(category),
        min_price=min_price,
        max_price=max_price,
        featured=only(featured),
        search=search,
        attributes={
            "condition": split_choices(condition),
            "seller_id": choice(seller_id),
        },
        sort_by=sort,
        page=page,
        limit=limit,
    )


@router.get("/marketplace/items", response_model=Envelope[List[MarketplaceItemOut]])
async def get_items(
    spec: FilterSpec = Depends(get_item_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Get marketplace items with filtering, sorting and pagination."""
    try:
        result = engine.query(catalog.marketplace, spec)
        return page_envelope(
            Envelope[List[MarketplaceItemOut]], MarketplaceItemOut, result,
            "Marketplace items retrieved successfully",
        )
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching marketplace items: {e}")
        raise ApiError("Failed to process request", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/marketplace/stats", response_model=Envelope[FacetStatsOut])
async def get_item_stats(
    spec: FilterSpec = Depends(get_item_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Facet counts (featured, urgent, new, active sellers) for the filtered items."""
    stats = engine.stats(catalog.marketplace, spec)
    return Envelope[FacetStatsOut](data=FacetStatsOut.from_stats(stats))


@router.get("/marketplace/export/csv")
async def export_items_csv(
    spec: FilterSpec = Depends(get_item_filters),
    catalog: Catalog = Depends(get_catalog),
):
    """Export the filtered, sorted items as CSV."""
    try:
        listings = sort_listings(engine.filter(catalog.marketplace, spec), spec.sort_by)
        return csv_response(listings, "marketplace.csv")
    except Exception as e:
        logger.error(f"Error exporting CSV: {e}")
        raise ApiError("Error generating CSV export", ErrorCodes.INTERNAL_SERVER_ERROR, 500)


@router.get("/marketplace/items/{item_id}", response_model=Envelope[MarketplaceItemOut])
async def get_item(item_id: str, catalog: Catalog = Depends(get_catalog)):
    """Get a specific marketplace item by ID."""
    listing = catalog.get("marketplace", item_id)
    if listing is None:
        raise not_found("Item", item_id)
    return Envelope[MarketplaceItemOut](data=MarketplaceItemOut.model_validate(listing))
